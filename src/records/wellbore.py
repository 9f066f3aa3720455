"""Wellbore base models and records from ``wellbore_other_all``.

The other-wellbore table covers wellbores that are neither exploration nor
development wellbores, such as shallow, soil-sampling and injection
wellbores. Exploration and development wellbores live in their own modules
and share the base models defined here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_date, to_double, to_int
from records.base import NpdRecord

NAME_PART_COUNT = 6

WELLBORE_NAME_INDEX = 0
WELL_NAME_INDEX = 1
WELL_TYPE_INDEX = 2
PURPOSE_INDEX = 3
DRILLING_OPERATOR_INDEX = 4
PRODUCTION_LICENSE_INDEX = 5
DRILLING_FACILITY_INDEX = 6
ENTRY_DATE_INDEX = 7
COMPLETION_DATE_INDEX = 8
DRILL_PERMIT_INDEX = 9
TOTAL_DEPTH_INDEX = 10
KELLY_BUSH_ELEVATION_INDEX = 11
WATER_DEPTH_INDEX = 12
MAIN_AREA_INDEX = 13
ENTRY_YEAR_INDEX = 14
COMPLETION_YEAR_INDEX = 15
SITE_SURVEY_INDEX = 16
SEISMIC_LOCATION_INDEX = 17
GEODETIC_DATUM_INDEX = 18
LICENSE_TARGET_NAME_INDEX = 19
PLUGGED_AND_ABANDON_DATE_INDEX = 20
PLUGGED_DATE_INDEX = 21
NS_DEG_INDEX = 22
NS_MIN_INDEX = 23
NS_SEC_INDEX = 24
NS_CODE_INDEX = 25
EW_DEG_INDEX = 26
EW_MIN_INDEX = 27
EW_SEC_INDEX = 28
EW_CODE_INDEX = 29
LATITUDE_INDEX = 30
LONGITUDE_INDEX = 31
NS_UTM_INDEX = 32
EW_UTM_INDEX = 33
UTM_ZONE_INDEX = 34
NAME_PART1_INDEX = 35
NAME_PART2_INDEX = 36
NAME_PART3_INDEX = 37
NAME_PART4_INDEX = 38
NAME_PART5_INDEX = 39
NAME_PART6_INDEX = 40
NPDID_WELLBORE_INDEX = 41
NPDID_SITE_SURVEY_INDEX = 42
FACT_PAGE_URL_INDEX = 43
MAIN_LEVEL_UPDATED_DATE_INDEX = 44
UPDATED_DATE_INDEX = 45
DATESYNC_NPD_INDEX = 46
COLUMN_COUNT = 47


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdWellbore(NpdRecord):
    """Attributes common to every wellbore table.

    Depths and elevations are in meters. Positions are given both in
    degrees, minutes and seconds and as decimal latitude/longitude and UTM.
    Name parts are kept as text since parts 3, 5 and 6 may hold letters.
    """

    well_name: str | None = None
    well_type: str | None = None
    purpose: str | None = None
    drilling_operator: str | None = None
    production_license: str | None = None
    drilling_facility: str | None = None
    entry_date: date | None = None
    completion_date: date | None = None
    drill_permit: str | None = None
    total_depth: float | None = None
    kelly_bush_elevation: float | None = None
    water_depth: float | None = None
    main_area: str | None = None
    entry_year: int | None = None
    completion_year: int | None = None
    license_target_name: str | None = None
    plugged_and_abandon_date: date | None = None
    plugged_date: date | None = None
    geodetic_datum: str | None = None
    ns_degrees: int | None = None
    ns_minutes: int | None = None
    ns_seconds: float | None = None
    ns_code: str | None = None
    ew_degrees: int | None = None
    ew_minutes: int | None = None
    ew_seconds: float | None = None
    ew_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    ns_utm: float | None = None
    ew_utm: float | None = None
    utm_zone: int | None = None
    name_parts: tuple[str | None, ...] = ()
    main_level_updated_date: date | None = None


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdDrilledWellbore(NpdWellbore):
    """Attributes shared by exploration and development wellbores.

    Attributes:
        is_discovery_wellbore: Wellbore made the discovery it belongs to.
        drilling_facility_category: ``FIXED`` or ``MOVEABLE``.
        reclass_from_wellbore: Name of the wellbore this one was
            reclassified from, if any.
    """

    status: str | None = None
    content: str | None = None
    purpose_planned: str | None = None
    is_subsea: bool | None = None
    field: str | None = None
    discovery: str | None = None
    is_discovery_wellbore: bool | None = None
    final_vertical_depth: float | None = None
    kick_off_point: float | None = None
    drilling_facility_type: str | None = None
    drilling_facility_category: str | None = None
    licensing_activity: str | None = None
    is_multilateral: bool | None = None
    reclass_from_wellbore: str | None = None
    plot_symbol: int | None = None
    diskos_wellbore_type: str | None = None
    diskos_wellbore_parent: str | None = None
    wdss_qc_date: date | None = None
    release_date: date | None = None
    discovery_id: str | None = None
    field_id: str | None = None
    production_license_id: str | None = None
    drilling_facility_id: str | None = None
    reclass_wellbore_id: str | None = None


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdOtherWellbore(NpdWellbore):
    """A wellbore outside the exploration and development categories."""

    RECORD_TYPE = "wellbore_other"

    site_survey: str | None = None
    site_survey_id: str | None = None
    seismic_location: str | None = None


def name_parts(tokens: Tokens, first_index: int) -> tuple[str | None, ...]:
    """Return the six consecutive wellbore name parts starting at first_index."""
    return tuple(tokens[first_index : first_index + NAME_PART_COUNT])


def new_other_wellbore(tokens: Tokens) -> NpdOtherWellbore:
    """Build a wellbore from one row of the other-wellbore table."""
    return NpdOtherWellbore(
        npd_id=require(tokens[NPDID_WELLBORE_INDEX], "wlbNpdidWellbore"),
        name=require(tokens[WELLBORE_NAME_INDEX], "wlbWellboreName"),
        well_name=tokens[WELL_NAME_INDEX],
        well_type=tokens[WELL_TYPE_INDEX],
        purpose=tokens[PURPOSE_INDEX],
        drilling_operator=tokens[DRILLING_OPERATOR_INDEX],
        production_license=tokens[PRODUCTION_LICENSE_INDEX],
        drilling_facility=tokens[DRILLING_FACILITY_INDEX],
        entry_date=to_date(tokens[ENTRY_DATE_INDEX]),
        completion_date=to_date(tokens[COMPLETION_DATE_INDEX]),
        drill_permit=tokens[DRILL_PERMIT_INDEX],
        total_depth=to_double(tokens[TOTAL_DEPTH_INDEX]),
        kelly_bush_elevation=to_double(tokens[KELLY_BUSH_ELEVATION_INDEX]),
        water_depth=to_double(tokens[WATER_DEPTH_INDEX]),
        main_area=tokens[MAIN_AREA_INDEX],
        entry_year=to_int(tokens[ENTRY_YEAR_INDEX]),
        completion_year=to_int(tokens[COMPLETION_YEAR_INDEX]),
        site_survey=tokens[SITE_SURVEY_INDEX],
        site_survey_id=tokens[NPDID_SITE_SURVEY_INDEX],
        seismic_location=tokens[SEISMIC_LOCATION_INDEX],
        geodetic_datum=tokens[GEODETIC_DATUM_INDEX],
        license_target_name=tokens[LICENSE_TARGET_NAME_INDEX],
        plugged_and_abandon_date=to_date(tokens[PLUGGED_AND_ABANDON_DATE_INDEX]),
        plugged_date=to_date(tokens[PLUGGED_DATE_INDEX]),
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
        main_level_updated_date=to_date(tokens[MAIN_LEVEL_UPDATED_DATE_INDEX]),
        last_changed_date=to_date(tokens[UPDATED_DATE_INDEX]),
        sync_date=to_date(tokens[DATESYNC_NPD_INDEX]),
    )
