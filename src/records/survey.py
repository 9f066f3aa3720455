"""Seismic survey records from the FactPages ``survey`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_boolean, to_date, to_double
from records.base import NpdRecord

NAME_INDEX = 0
PLANNED_START_DATE_INDEX = 1
NPDID_INDEX = 2
STATUS_INDEX = 3
AREA_INDEX = 4
MIDPOINT_INDEX = 5
CATEGORY_INDEX = 6
MAIN_TYPE_INDEX = 7
SUB_TYPE_INDEX = 8
COMPANY_INDEX = 9
VESSEL_INDEX = 10
PLANNED_COMPLETE_DATE_INDEX = 11
START_DATE_INDEX = 12
COMPLETE_DATE_INDEX = 13
PLANNED_TOTAL_LENGTH_BOAT_INDEX = 14
PLANNED_TOTAL_LENGTH_CDP_INDEX = 15
TOTAL_AREA_INDEX = 16
IS_AVAILABLE_INDEX = 17
IS_SAMPLING_DONE_INDEX = 18
IS_SHALLOW_DRILLING_DONE_INDEX = 19
IS_GEOTECHNICAL_MEASUREMENT_DONE_INDEX = 20
FACT_PAGE_URL_INDEX = 21
FACT_MAP_URL_INDEX = 22
DATE_SYNCED_INDEX = 23
COLUMN_COUNT = 24


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdSurvey(NpdRecord):
    """A seismic or site survey as modeled by the NPD.

    Attributes:
        planned_total_length_boat: Planned boat kilometers.
        planned_total_length_cdp: Planned CDP kilometers.
        total_area: Surveyed area in square kilometers.
    """

    RECORD_TYPE = "survey"

    status: str | None = None
    area: str | None = None
    mid_point: str | None = None
    category: str | None = None
    main_type: str | None = None
    sub_type: str | None = None
    company: str | None = None
    vessel: str | None = None
    planned_start_date: date | None = None
    planned_complete_date: date | None = None
    start_date: date | None = None
    complete_date: date | None = None
    planned_total_length_boat: float | None = None
    planned_total_length_cdp: float | None = None
    total_area: float | None = None
    is_available: bool | None = None
    is_sampling_done: bool | None = None
    is_shallow_drilling_done: bool | None = None
    is_geotechnical_measurement_done: bool | None = None


def new_survey(tokens: Tokens) -> NpdSurvey:
    """Build a survey from one row of the survey table."""
    return NpdSurvey(
        npd_id=require(tokens[NPDID_INDEX], "seaNpdidSurvey"),
        name=require(tokens[NAME_INDEX], "seaName"),
        status=tokens[STATUS_INDEX],
        area=tokens[AREA_INDEX],
        mid_point=tokens[MIDPOINT_INDEX],
        category=tokens[CATEGORY_INDEX],
        main_type=tokens[MAIN_TYPE_INDEX],
        sub_type=tokens[SUB_TYPE_INDEX],
        company=tokens[COMPANY_INDEX],
        vessel=tokens[VESSEL_INDEX],
        planned_start_date=to_date(tokens[PLANNED_START_DATE_INDEX]),
        planned_complete_date=to_date(tokens[PLANNED_COMPLETE_DATE_INDEX]),
        start_date=to_date(tokens[START_DATE_INDEX]),
        complete_date=to_date(tokens[COMPLETE_DATE_INDEX]),
        planned_total_length_boat=to_double(tokens[PLANNED_TOTAL_LENGTH_BOAT_INDEX]),
        planned_total_length_cdp=to_double(tokens[PLANNED_TOTAL_LENGTH_CDP_INDEX]),
        total_area=to_double(tokens[TOTAL_AREA_INDEX]),
        is_available=to_boolean(tokens[IS_AVAILABLE_INDEX]),
        is_sampling_done=to_boolean(tokens[IS_SAMPLING_DONE_INDEX]),
        is_shallow_drilling_done=to_boolean(tokens[IS_SHALLOW_DRILLING_DONE_INDEX]),
        is_geotechnical_measurement_done=to_boolean(
            tokens[IS_GEOTECHNICAL_MEASUREMENT_DONE_INDEX]
        ),
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        sync_date=to_date(tokens[DATE_SYNCED_INDEX]),
    )
