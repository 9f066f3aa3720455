"""Wellbore records from the FactPages ``wellbore_development_all`` table.

Development wellbores are drilled to produce from or inject into a field.
Pre-drilled wellbores carry a second pair of entry and completion dates for
the pre-drilling campaign.
"""

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
STATUS_INDEX = 4
PURPOSE_INDEX = 5
PURPOSE_PLANNED_INDEX = 6
CONTENT_INDEX = 7
WELL_TYPE_INDEX = 8
SUBSEA_INDEX = 9
ENTRY_DATE_INDEX = 10
COMPLETION_DATE_INDEX = 11
PRE_DRILL_ENTRY_DATE_INDEX = 12
PRE_DRILL_COMPLETION_DATE_INDEX = 13
FIELD_INDEX = 14
DRILL_PERMIT_INDEX = 15
DISCOVERY_INDEX = 16
DISCOVERY_WELLBORE_INDEX = 17
KELLY_BUSH_ELEVATION_INDEX = 18
FINAL_VERTICAL_DEPTH_INDEX = 19
TOTAL_DEPTH_INDEX = 20
WATER_DEPTH_INDEX = 21
KICK_OFF_POINT_INDEX = 22
MAIN_AREA_INDEX = 23
DRILLING_FACILITY_INDEX = 24
FACILITY_TYPE_DRILLING_INDEX = 25
DRILLING_FACILITY_CATEGORY_INDEX = 26
PRODUCTION_FACILITY_INDEX = 27
LICENSING_ACTIVITY_INDEX = 28
MULTILATERAL_INDEX = 29
CONTENT_PLANNED_INDEX = 30
ENTRY_YEAR_INDEX = 31
COMPLETION_YEAR_INDEX = 32
RECLASS_FROM_WELLBORE_INDEX = 33
PLUGGED_AND_ABANDON_DATE_INDEX = 34
PLUGGED_DATE_INDEX = 35
LICENSE_TARGET_NAME_INDEX = 36
PLOT_SYMBOL_INDEX = 37
GEODETIC_DATUM_INDEX = 38
NS_DEG_INDEX = 39
NS_MIN_INDEX = 40
NS_SEC_INDEX = 41
NS_CODE_INDEX = 42
EW_DEG_INDEX = 43
EW_MIN_INDEX = 44
EW_SEC_INDEX = 45
EW_CODE_INDEX = 46
LATITUDE_INDEX = 47
LONGITUDE_INDEX = 48
NS_UTM_INDEX = 49
EW_UTM_INDEX = 50
UTM_ZONE_INDEX = 51
NAME_PART1_INDEX = 52
FACT_PAGE_URL_INDEX = 58
FACT_MAP_URL_INDEX = 59
DISKOS_WELLBORE_TYPE_INDEX = 60
DISKOS_WELLBORE_PARENT_INDEX = 61
NPDID_WELLBORE_INDEX = 62
NPDID_DISCOVERY_INDEX = 63
NPDID_FIELD_INDEX = 64
WDSS_QC_DATE_INDEX = 65
RELEASE_DATE_INDEX = 66
NPDID_PRODUCTION_LICENSE_INDEX = 67
NPDID_TARGET_PRODUCTION_LICENSE_INDEX = 68
NPDID_FACILITY_DRILLING_INDEX = 69
NPDID_FACILITY_PRODUCING_INDEX = 70
NPDID_WELLBORE_RECLASS_INDEX = 71
MAIN_LEVEL_UPDATED_DATE_INDEX = 72
UPDATED_DATE_INDEX = 73
DATESYNC_NPD_INDEX = 74
COLUMN_COUNT = 75


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdDevelopmentWellbore(NpdDrilledWellbore):
    """A development wellbore."""

    RECORD_TYPE = "wellbore_development"

    pre_drill_entry_date: date | None = None
    pre_drill_completion_date: date | None = None
    production_facility: str | None = None
    content_planned: str | None = None
    target_production_license_id: str | None = None
    producing_facility_id: str | None = None


def new_development_wellbore(tokens: Tokens) -> NpdDevelopmentWellbore:
    """Build a wellbore from one row of the development-wellbore table."""
    return NpdDevelopmentWellbore(
        npd_id=require(tokens[NPDID_WELLBORE_INDEX], "wlbNpdidWellbore"),
        name=require(tokens[WELLBORE_NAME_INDEX], "wlbWellboreName"),
        well_name=tokens[WELL_NAME_INDEX],
        drilling_operator=tokens[DRILLING_OPERATOR_INDEX],
        production_license=tokens[PRODUCTION_LICENSE_INDEX],
        status=tokens[STATUS_INDEX],
        purpose=tokens[PURPOSE_INDEX],
        purpose_planned=tokens[PURPOSE_PLANNED_INDEX],
        content=tokens[CONTENT_INDEX],
        well_type=tokens[WELL_TYPE_INDEX],
        is_subsea=to_boolean(tokens[SUBSEA_INDEX]),
        entry_date=to_date(tokens[ENTRY_DATE_INDEX]),
        completion_date=to_date(tokens[COMPLETION_DATE_INDEX]),
        pre_drill_entry_date=to_date(tokens[PRE_DRILL_ENTRY_DATE_INDEX]),
        pre_drill_completion_date=to_date(tokens[PRE_DRILL_COMPLETION_DATE_INDEX]),
        field=tokens[FIELD_INDEX],
        drill_permit=tokens[DRILL_PERMIT_INDEX],
        discovery=tokens[DISCOVERY_INDEX],
        is_discovery_wellbore=to_boolean(tokens[DISCOVERY_WELLBORE_INDEX]),
        kelly_bush_elevation=to_double(tokens[KELLY_BUSH_ELEVATION_INDEX]),
        final_vertical_depth=to_double(tokens[FINAL_VERTICAL_DEPTH_INDEX]),
        total_depth=to_double(tokens[TOTAL_DEPTH_INDEX]),
        water_depth=to_double(tokens[WATER_DEPTH_INDEX]),
        kick_off_point=to_double(tokens[KICK_OFF_POINT_INDEX]),
        main_area=tokens[MAIN_AREA_INDEX],
        drilling_facility=tokens[DRILLING_FACILITY_INDEX],
        drilling_facility_type=tokens[FACILITY_TYPE_DRILLING_INDEX],
        drilling_facility_category=tokens[DRILLING_FACILITY_CATEGORY_INDEX],
        production_facility=tokens[PRODUCTION_FACILITY_INDEX],
        licensing_activity=tokens[LICENSING_ACTIVITY_INDEX],
        is_multilateral=to_boolean(tokens[MULTILATERAL_INDEX]),
        content_planned=tokens[CONTENT_PLANNED_INDEX],
        entry_year=to_int(tokens[ENTRY_YEAR_INDEX]),
        completion_year=to_int(tokens[COMPLETION_YEAR_INDEX]),
        reclass_from_wellbore=tokens[RECLASS_FROM_WELLBORE_INDEX],
        plugged_and_abandon_date=to_date(tokens[PLUGGED_AND_ABANDON_DATE_INDEX]),
        plugged_date=to_date(tokens[PLUGGED_DATE_INDEX]),
        license_target_name=tokens[LICENSE_TARGET_NAME_INDEX],
        plot_symbol=to_int(tokens[PLOT_SYMBOL_INDEX]),
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
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        diskos_wellbore_type=tokens[DISKOS_WELLBORE_TYPE_INDEX],
        diskos_wellbore_parent=tokens[DISKOS_WELLBORE_PARENT_INDEX],
        discovery_id=tokens[NPDID_DISCOVERY_INDEX],
        field_id=tokens[NPDID_FIELD_INDEX],
        wdss_qc_date=to_date(tokens[WDSS_QC_DATE_INDEX]),
        release_date=to_date(tokens[RELEASE_DATE_INDEX]),
        production_license_id=tokens[NPDID_PRODUCTION_LICENSE_INDEX],
        target_production_license_id=tokens[NPDID_TARGET_PRODUCTION_LICENSE_INDEX],
        drilling_facility_id=tokens[NPDID_FACILITY_DRILLING_INDEX],
        producing_facility_id=tokens[NPDID_FACILITY_PRODUCING_INDEX],
        reclass_wellbore_id=tokens[NPDID_WELLBORE_RECLASS_INDEX],
        main_level_updated_date=to_date(tokens[MAIN_LEVEL_UPDATED_DATE_INDEX]),
        last_changed_date=to_date(tokens[UPDATED_DATE_INDEX]),
        sync_date=to_date(tokens[DATESYNC_NPD_INDEX]),
    )
