"""Wellbore records from the FactPages ``wellbore_exploration_all`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_boolean, to_date, to_double, to_int
from records.wellbore import NpdDrilledWellbore, name_parts

WELLBORE_NAME_INDEX = 0
WELL_NAME_INDEX = 1
DRILLING_OPERATOR_INDEX = 2
PRODUCTION_LICENSE_INDEX = 3
PURPOSE_INDEX = 4
STATUS_INDEX = 5
CONTENT_INDEX = 6
WELL_TYPE_INDEX = 7
SUBSEA_INDEX = 8
ENTRY_DATE_INDEX = 9
COMPLETION_DATE_INDEX = 10
FIELD_INDEX = 11
DRILL_PERMIT_INDEX = 12
DISCOVERY_INDEX = 13
DISCOVERY_WELLBORE_INDEX = 14
BOTTOM_HOLE_TEMPERATURE_INDEX = 15
SITE_SURVEY_INDEX = 16
SEISMIC_LOCATION_INDEX = 17
MAX_INCLINATION_INDEX = 18
KELLY_BUSH_ELEVATION_INDEX = 19
FINAL_VERTICAL_DEPTH_INDEX = 20
TOTAL_DEPTH_INDEX = 21
WATER_DEPTH_INDEX = 22
KICK_OFF_POINT_INDEX = 23
AGE_AT_TD_INDEX = 24
FORMATION_AT_TD_INDEX = 25
MAIN_AREA_INDEX = 26
DRILLING_FACILITY_INDEX = 27
FACILITY_TYPE_DRILLING_INDEX = 28
DRILLING_FACILITY_CATEGORY_INDEX = 29
LICENSING_ACTIVITY_INDEX = 30
MULTILATERAL_INDEX = 31
PURPOSE_PLANNED_INDEX = 32
ENTRY_YEAR_INDEX = 33
COMPLETION_YEAR_INDEX = 34
RECLASS_FROM_WELLBORE_INDEX = 35
REENTRY_ACTIVITY_INDEX = 36
PLOT_SYMBOL_INDEX = 37
FORMATION_WITH_HC1_INDEX = 38
AGE_WITH_HC1_INDEX = 39
FORMATION_WITH_HC2_INDEX = 40
AGE_WITH_HC2_INDEX = 41
FORMATION_WITH_HC3_INDEX = 42
AGE_WITH_HC3_INDEX = 43
DRILLING_DAYS_INDEX = 44
REENTRY_INDEX = 45
LICENSE_TARGET_NAME_INDEX = 46
PLUGGED_AND_ABANDON_DATE_INDEX = 47
PLUGGED_DATE_INDEX = 48
GEODETIC_DATUM_INDEX = 49
NS_DEG_INDEX = 50
NS_MIN_INDEX = 51
NS_SEC_INDEX = 52
NS_CODE_INDEX = 53
EW_DEG_INDEX = 54
EW_MIN_INDEX = 55
EW_SEC_INDEX = 56
EW_CODE_INDEX = 57
LATITUDE_INDEX = 58
LONGITUDE_INDEX = 59
NS_UTM_INDEX = 60
EW_UTM_INDEX = 61
UTM_ZONE_INDEX = 62
NAME_PART1_INDEX = 63
PRESS_RELEASE_URL_INDEX = 69
FACT_PAGE_URL_INDEX = 70
FACT_MAP_URL_INDEX = 71
DISKOS_WELLBORE_TYPE_INDEX = 72
DISKOS_WELLBORE_PARENT_INDEX = 73
WDSS_QC_DATE_INDEX = 74
RELEASE_DATE_INDEX = 75
RECLASSIFICATION_DATE_INDEX = 76
NPDID_WELLBORE_INDEX = 77
NPDID_DISCOVERY_INDEX = 78
NPDID_FIELD_INDEX = 79
NPDID_FACILITY_DRILLING_INDEX = 80
NPDID_WELLBORE_RECLASS_INDEX = 81
NPDID_PRODUCTION_LICENSE_INDEX = 82
NPDID_SITE_SURVEY_INDEX = 83
MAIN_LEVEL_UPDATED_DATE_INDEX = 84
UPDATED_DATE_INDEX = 85
DATESYNC_NPD_INDEX = 86
COLUMN_COUNT = 87


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdExplorationWellbore(NpdDrilledWellbore):
    """An exploration wellbore.

    Attributes:
        bottom_hole_temperature: Temperature at total depth in °C.
        max_inclination: Maximum deviation from vertical in degrees.
        hydrocarbon_formations: Up to three formations with hydrocarbons,
            shallowest first.
        hydrocarbon_ages: Ages matching ``hydrocarbon_formations``.
        drilling_days: Days from entry to completion.
    """

    RECORD_TYPE = "wellbore_exploration"

    bottom_hole_temperature: int | None = None
    site_survey: str | None = None
    site_survey_id: str | None = None
    seismic_location: str | None = None
    max_inclination: float | None = None
    age_at_total_depth: str | None = None
    formation_at_total_depth: str | None = None
    reentry_activity: str | None = None
    hydrocarbon_formations: tuple[str | None, ...] = ()
    hydrocarbon_ages: tuple[str | None, ...] = ()
    drilling_days: int | None = None
    is_reentry: bool | None = None
    press_release_url: str | None = None
    reclassification_date: date | None = None


def new_exploration_wellbore(tokens: Tokens) -> NpdExplorationWellbore:
    """Build a wellbore from one row of the exploration-wellbore table."""
    return NpdExplorationWellbore(
        npd_id=require(tokens[NPDID_WELLBORE_INDEX], "wlbNpdidWellbore"),
        name=require(tokens[WELLBORE_NAME_INDEX], "wlbWellboreName"),
        well_name=tokens[WELL_NAME_INDEX],
        drilling_operator=tokens[DRILLING_OPERATOR_INDEX],
        production_license=tokens[PRODUCTION_LICENSE_INDEX],
        purpose=tokens[PURPOSE_INDEX],
        status=tokens[STATUS_INDEX],
        content=tokens[CONTENT_INDEX],
        well_type=tokens[WELL_TYPE_INDEX],
        is_subsea=to_boolean(tokens[SUBSEA_INDEX]),
        entry_date=to_date(tokens[ENTRY_DATE_INDEX]),
        completion_date=to_date(tokens[COMPLETION_DATE_INDEX]),
        field=tokens[FIELD_INDEX],
        drill_permit=tokens[DRILL_PERMIT_INDEX],
        discovery=tokens[DISCOVERY_INDEX],
        is_discovery_wellbore=to_boolean(tokens[DISCOVERY_WELLBORE_INDEX]),
        bottom_hole_temperature=to_int(tokens[BOTTOM_HOLE_TEMPERATURE_INDEX]),
        site_survey=tokens[SITE_SURVEY_INDEX],
        seismic_location=tokens[SEISMIC_LOCATION_INDEX],
        max_inclination=to_double(tokens[MAX_INCLINATION_INDEX]),
        kelly_bush_elevation=to_double(tokens[KELLY_BUSH_ELEVATION_INDEX]),
        final_vertical_depth=to_double(tokens[FINAL_VERTICAL_DEPTH_INDEX]),
        total_depth=to_double(tokens[TOTAL_DEPTH_INDEX]),
        water_depth=to_double(tokens[WATER_DEPTH_INDEX]),
        kick_off_point=to_double(tokens[KICK_OFF_POINT_INDEX]),
        age_at_total_depth=tokens[AGE_AT_TD_INDEX],
        formation_at_total_depth=tokens[FORMATION_AT_TD_INDEX],
        main_area=tokens[MAIN_AREA_INDEX],
        drilling_facility=tokens[DRILLING_FACILITY_INDEX],
        drilling_facility_type=tokens[FACILITY_TYPE_DRILLING_INDEX],
        drilling_facility_category=tokens[DRILLING_FACILITY_CATEGORY_INDEX],
        licensing_activity=tokens[LICENSING_ACTIVITY_INDEX],
        is_multilateral=to_boolean(tokens[MULTILATERAL_INDEX]),
        purpose_planned=tokens[PURPOSE_PLANNED_INDEX],
        entry_year=to_int(tokens[ENTRY_YEAR_INDEX]),
        completion_year=to_int(tokens[COMPLETION_YEAR_INDEX]),
        reclass_from_wellbore=tokens[RECLASS_FROM_WELLBORE_INDEX],
        reentry_activity=tokens[REENTRY_ACTIVITY_INDEX],
        plot_symbol=to_int(tokens[PLOT_SYMBOL_INDEX]),
        hydrocarbon_formations=(
            tokens[FORMATION_WITH_HC1_INDEX],
            tokens[FORMATION_WITH_HC2_INDEX],
            tokens[FORMATION_WITH_HC3_INDEX],
        ),
        hydrocarbon_ages=(
            tokens[AGE_WITH_HC1_INDEX],
            tokens[AGE_WITH_HC2_INDEX],
            tokens[AGE_WITH_HC3_INDEX],
        ),
        drilling_days=to_int(tokens[DRILLING_DAYS_INDEX]),
        is_reentry=to_boolean(tokens[REENTRY_INDEX]),
        license_target_name=tokens[LICENSE_TARGET_NAME_INDEX],
        plugged_and_abandon_date=to_date(tokens[PLUGGED_AND_ABANDON_DATE_INDEX]),
        plugged_date=to_date(tokens[PLUGGED_DATE_INDEX]),
        geodetic_datum=tokens[GEODETIC_DATUM_INDEX],
        ns_degrees=to_int(tokens[NS_DEG_INDEX]),
        ns_minutes=to_int(tokens[NS_MIN_INDEX]),
        ns_seconds=to_double(tokens[NS_SEC_INDEX]),
        ns_code=tokens[NS_CODE_INDEX],
        ew_degrees=to_int(tokens[EW_DEG_INDEX]),
        ew_minutes=to_int(tokens[EW_MIN_INDEX]),
        ew_seconds=to_double(tokens[EW_SEC_INDEX]),
        ew_code=tokens[EW_CODE_INDEX],
        latitude=to_double(tokens[LATITUDE_INDEX]),
        longitude=to_double(tokens[LONGITUDE_INDEX]),
        ns_utm=to_double(tokens[NS_UTM_INDEX]),
        ew_utm=to_double(tokens[EW_UTM_INDEX]),
        utm_zone=to_int(tokens[UTM_ZONE_INDEX]),
        name_parts=name_parts(tokens, NAME_PART1_INDEX),
        press_release_url=tokens[PRESS_RELEASE_URL_INDEX],
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        diskos_wellbore_type=tokens[DISKOS_WELLBORE_TYPE_INDEX],
        diskos_wellbore_parent=tokens[DISKOS_WELLBORE_PARENT_INDEX],
        wdss_qc_date=to_date(tokens[WDSS_QC_DATE_INDEX]),
        release_date=to_date(tokens[RELEASE_DATE_INDEX]),
        reclassification_date=to_date(tokens[RECLASSIFICATION_DATE_INDEX]),
        discovery_id=tokens[NPDID_DISCOVERY_INDEX],
        field_id=tokens[NPDID_FIELD_INDEX],
        drilling_facility_id=tokens[NPDID_FACILITY_DRILLING_INDEX],
        reclass_wellbore_id=tokens[NPDID_WELLBORE_RECLASS_INDEX],
        production_license_id=tokens[NPDID_PRODUCTION_LICENSE_INDEX],
        site_survey_id=tokens[NPDID_SITE_SURVEY_INDEX],
        main_level_updated_date=to_date(tokens[MAIN_LEVEL_UPDATED_DATE_INDEX]),
        last_changed_date=to_date(tokens[UPDATED_DATE_INDEX]),
        sync_date=to_date(tokens[DATESYNC_NPD_INDEX]),
    )
