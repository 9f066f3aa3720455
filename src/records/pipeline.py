"""Pipeline records from the FactPages ``tuf_pipeline_overview`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_date, to_double
from records.base import NpdRecord

NAME_INDEX = 0
MAP_LABEL_INDEX = 1
FROM_FACILITY_INDEX = 2
TO_FACILITY_INDEX = 3
BELONGS_TO_INDEX = 4
OPERATOR_INDEX = 5
CURRENT_PHASE_INDEX = 6
CURRENT_PHASE_FROM_DATE_INDEX = 7
MEDIUM_INDEX = 8
MAIN_GROUPING_INDEX = 9
DIMENSION_INDEX = 10
WATER_DEPTH_INDEX = 11
NPDID_OPERATOR_INDEX = 12
NPDID_FROM_FACILITY_INDEX = 13
NPDID_TO_FACILITY_INDEX = 14
FACT_PAGE_URL_INDEX = 15
FACT_MAP_URL_INDEX = 16
NPDID_INDEX = 17
LAST_CHANGED_DATE_INDEX = 18
SYNCED_DATE_INDEX = 19
COLUMN_COUNT = 20


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdPipeline(NpdRecord):
    """A transport pipeline as modeled by the NPD.

    Attributes:
        dimension: Pipeline dimension in inches.
        water_depth: Maximum water depth along the pipeline in meters.
    """

    RECORD_TYPE = "pipeline"

    map_label: str | None = None
    from_facility: str | None = None
    to_facility: str | None = None
    belongs_to: str | None = None
    operator: str | None = None
    current_phase: str | None = None
    current_phase_from_date: date | None = None
    medium: str | None = None
    main_grouping: str | None = None
    dimension: float | None = None
    water_depth: float | None = None
    operator_id: str | None = None
    from_facility_id: str | None = None
    to_facility_id: str | None = None


def new_pipeline(tokens: Tokens) -> NpdPipeline:
    """Build a pipeline from one row of the pipeline overview table."""
    return NpdPipeline(
        npd_id=require(tokens[NPDID_INDEX], "pipNpdidPipe"),
        name=require(tokens[NAME_INDEX], "pipName"),
        map_label=tokens[MAP_LABEL_INDEX],
        from_facility=tokens[FROM_FACILITY_INDEX],
        to_facility=tokens[TO_FACILITY_INDEX],
        belongs_to=tokens[BELONGS_TO_INDEX],
        operator=tokens[OPERATOR_INDEX],
        current_phase=tokens[CURRENT_PHASE_INDEX],
        current_phase_from_date=to_date(tokens[CURRENT_PHASE_FROM_DATE_INDEX]),
        medium=tokens[MEDIUM_INDEX],
        main_grouping=tokens[MAIN_GROUPING_INDEX],
        dimension=to_double(tokens[DIMENSION_INDEX]),
        water_depth=to_double(tokens[WATER_DEPTH_INDEX]),
        operator_id=tokens[NPDID_OPERATOR_INDEX],
        from_facility_id=tokens[NPDID_FROM_FACILITY_INDEX],
        to_facility_id=tokens[NPDID_TO_FACILITY_INDEX],
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        last_changed_date=to_date(tokens[LAST_CHANGED_DATE_INDEX]),
        sync_date=to_date(tokens[SYNCED_DATE_INDEX]),
    )
