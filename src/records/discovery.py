"""Discovery records from the FactPages ``discovery`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_date, to_int
from records.base import NpdRecord

NAME_INDEX = 0
OPERATOR_INDEX = 1
ACTIVITY_STATUS_INDEX = 2
HYDROCARBON_TYPE_INDEX = 3
WELLBORE_NAME_INDEX = 4
MAIN_AREA_INDEX = 5
FIELD_NAME_INDEX = 6
INCLUDED_IN_FIELD_FROM_DATE_INDEX = 7
DISCOVERY_YEAR_INDEX = 8
RESOURCES_DISCOVERY_NAME_INDEX = 9
OWNER_KIND_INDEX = 10
OWNER_NAME_INDEX = 11
NPDID_INDEX = 12
NPDID_FIELD_INDEX = 13
NPDID_WELLBORE_INDEX = 14
FACT_PAGE_URL_INDEX = 15
FACT_MAP_URL_INDEX = 16
DATE_MAIN_LEVEL_UPDATED_INDEX = 17
DATE_ALL_UPDATED_INDEX = 18
DATE_SYNCED_INDEX = 19
COLUMN_COUNT = 20


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdDiscovery(NpdRecord):
    """A petroleum discovery as modeled by the NPD."""

    RECORD_TYPE = "discovery"

    operator: str | None = None
    activity_status: str | None = None
    hydrocarbon_type: str | None = None
    wellbore_name: str | None = None
    main_area: str | None = None
    field_name: str | None = None
    included_in_field_from_date: date | None = None
    discovery_year: int | None = None
    resources_discovery_name: str | None = None
    owner_kind: str | None = None
    owner_name: str | None = None
    field_id: str | None = None
    wellbore_id: str | None = None
    main_level_updated_date: date | None = None


def new_discovery(tokens: Tokens) -> NpdDiscovery:
    """Build a discovery from one row of the discovery table."""
    return NpdDiscovery(
        npd_id=require(tokens[NPDID_INDEX], "dscNpdidDiscovery"),
        name=require(tokens[NAME_INDEX], "dscName"),
        operator=tokens[OPERATOR_INDEX],
        activity_status=tokens[ACTIVITY_STATUS_INDEX],
        hydrocarbon_type=tokens[HYDROCARBON_TYPE_INDEX],
        wellbore_name=tokens[WELLBORE_NAME_INDEX],
        main_area=tokens[MAIN_AREA_INDEX],
        field_name=tokens[FIELD_NAME_INDEX],
        included_in_field_from_date=to_date(tokens[INCLUDED_IN_FIELD_FROM_DATE_INDEX]),
        discovery_year=to_int(tokens[DISCOVERY_YEAR_INDEX]),
        resources_discovery_name=tokens[RESOURCES_DISCOVERY_NAME_INDEX],
        owner_kind=tokens[OWNER_KIND_INDEX],
        owner_name=tokens[OWNER_NAME_INDEX],
        field_id=tokens[NPDID_FIELD_INDEX],
        wellbore_id=tokens[NPDID_WELLBORE_INDEX],
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        main_level_updated_date=to_date(tokens[DATE_MAIN_LEVEL_UPDATED_INDEX]),
        last_changed_date=to_date(tokens[DATE_ALL_UPDATED_INDEX]),
        sync_date=to_date(tokens[DATE_SYNCED_INDEX]),
    )
