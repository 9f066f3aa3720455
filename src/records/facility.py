"""Fixed and moveable facility records.

Fixed facilities come from ``facility_fixed`` and moveable ones (rigs,
vessels) from ``facility_moveable``; both share kind and functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.types import Tokens
from ingest.coercion import require, to_boolean, to_date, to_double, to_int, to_record_kind
from records.base import NpdRecord

FIXED_NAME_INDEX = 0
FIXED_PHASE_INDEX = 1
FIXED_IS_SURFACE_INDEX = 2
FIXED_CURRENT_OPERATOR_INDEX = 3
FIXED_KIND_INDEX = 4
FIXED_BELONGS_TO_NAME_INDEX = 5
FIXED_BELONGS_TO_KIND_INDEX = 6
FIXED_BELONGS_TO_ID_INDEX = 7
FIXED_STARTUP_DATE_INDEX = 8
FIXED_GEODETIC_DATUM_INDEX = 9
FIXED_NS_DEGREES_INDEX = 10
FIXED_NS_MINUTES_INDEX = 11
FIXED_NS_SECONDS_INDEX = 12
FIXED_NS_CODE_INDEX = 13
FIXED_EW_DEGREES_INDEX = 14
FIXED_EW_MINUTES_INDEX = 15
FIXED_EW_SECONDS_INDEX = 16
FIXED_EW_CODE_INDEX = 17
FIXED_WATER_DEPTH_INDEX = 18
FIXED_FUNCTIONS_INDEX = 19
FIXED_DESIGNED_LIFETIME_INDEX = 20
FIXED_FACT_PAGE_URL_INDEX = 21
FIXED_FACT_MAP_URL_INDEX = 22
FIXED_NPDID_INDEX = 23
FIXED_DATE_UPDATED_INDEX = 24
FIXED_SYNC_DATE_INDEX = 25
FIXED_COLUMN_COUNT = 26

MOVEABLE_NAME_INDEX = 0
MOVEABLE_RESPONSIBLE_COMPANY_NAME_INDEX = 1
MOVEABLE_KIND_INDEX = 2
MOVEABLE_FUNCTIONS_INDEX = 3
MOVEABLE_AOC_STATUS_INDEX = 4
MOVEABLE_NATION_INDEX = 5
MOVEABLE_FACT_PAGE_URL_INDEX = 6
MOVEABLE_NPDID_INDEX = 7
MOVEABLE_RESPONSIBLE_COMPANY_ID_INDEX = 8
MOVEABLE_DATE_UPDATED_INDEX = 9
MOVEABLE_SYNC_DATE_INDEX = 10
MOVEABLE_COLUMN_COUNT = 11


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdFacility(NpdRecord):
    """Common attributes of fixed and moveable facilities.

    Attributes:
        kind: Facility kind, e.g. ``JACKET 4 LEGS`` or ``SEMISUB STEEL``.
        functions: Comma separated facility functions.
    """

    kind: str | None = None
    functions: str | None = None


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdFixedFacility(NpdFacility):
    """A fixed facility such as a platform or subsea template.

    Attributes:
        belongs_to_kind: Record type tag of the owning entity, if known.
        belongs_to_id: NPD id of the owning entity.
        designed_lifetime: Designed lifetime in years.
    """

    RECORD_TYPE = "facility_fixed"

    phase: str | None = None
    is_surface_facility: bool | None = None
    current_operator: str | None = None
    belongs_to_name: str | None = None
    belongs_to_kind: str | None = None
    belongs_to_id: str | None = None
    startup_date: date | None = None
    geodetic_datum: str | None = None
    ns_degrees: int | None = None
    ns_minutes: int | None = None
    ns_seconds: float | None = None
    ns_code: str | None = None
    ew_degrees: int | None = None
    ew_minutes: int | None = None
    ew_seconds: float | None = None
    ew_code: str | None = None
    water_depth: float | None = None
    designed_lifetime: int | None = None


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdMoveableFacility(NpdFacility):
    """A moveable facility such as a drilling rig."""

    RECORD_TYPE = "facility_moveable"

    responsible_company_name: str | None = None
    responsible_company_id: str | None = None
    aoc_status: str | None = None
    nation: str | None = None


def new_fixed_facility(tokens: Tokens) -> NpdFixedFacility:
    """Build a fixed facility from one row of the fixed facility table."""
    return NpdFixedFacility(
        npd_id=require(tokens[FIXED_NPDID_INDEX], "fclNpdidFacility"),
        name=require(tokens[FIXED_NAME_INDEX], "fclName"),
        kind=tokens[FIXED_KIND_INDEX],
        functions=tokens[FIXED_FUNCTIONS_INDEX],
        phase=tokens[FIXED_PHASE_INDEX],
        is_surface_facility=to_boolean(tokens[FIXED_IS_SURFACE_INDEX]),
        current_operator=tokens[FIXED_CURRENT_OPERATOR_INDEX],
        belongs_to_name=tokens[FIXED_BELONGS_TO_NAME_INDEX],
        belongs_to_kind=to_record_kind(tokens[FIXED_BELONGS_TO_KIND_INDEX]),
        belongs_to_id=tokens[FIXED_BELONGS_TO_ID_INDEX],
        startup_date=to_date(tokens[FIXED_STARTUP_DATE_INDEX]),
        geodetic_datum=tokens[FIXED_GEODETIC_DATUM_INDEX],
        ns_degrees=to_int(tokens[FIXED_NS_DEGREES_INDEX]),
        ns_minutes=to_int(tokens[FIXED_NS_MINUTES_INDEX]),
        ns_seconds=to_double(tokens[FIXED_NS_SECONDS_INDEX]),
        ns_code=tokens[FIXED_NS_CODE_INDEX],
        ew_degrees=to_int(tokens[FIXED_EW_DEGREES_INDEX]),
        ew_minutes=to_int(tokens[FIXED_EW_MINUTES_INDEX]),
        ew_seconds=to_double(tokens[FIXED_EW_SECONDS_INDEX]),
        ew_code=tokens[FIXED_EW_CODE_INDEX],
        water_depth=to_double(tokens[FIXED_WATER_DEPTH_INDEX]),
        designed_lifetime=to_int(tokens[FIXED_DESIGNED_LIFETIME_INDEX]),
        fact_page_url=tokens[FIXED_FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FIXED_FACT_MAP_URL_INDEX],
        last_changed_date=to_date(tokens[FIXED_DATE_UPDATED_INDEX]),
        sync_date=to_date(tokens[FIXED_SYNC_DATE_INDEX]),
    )


def new_moveable_facility(tokens: Tokens) -> NpdMoveableFacility:
    """Build a moveable facility from one row of the moveable facility table."""
    return NpdMoveableFacility(
        npd_id=require(tokens[MOVEABLE_NPDID_INDEX], "fclNpdidFacility"),
        name=require(tokens[MOVEABLE_NAME_INDEX], "fclName"),
        kind=tokens[MOVEABLE_KIND_INDEX],
        functions=tokens[MOVEABLE_FUNCTIONS_INDEX],
        responsible_company_name=tokens[MOVEABLE_RESPONSIBLE_COMPANY_NAME_INDEX],
        responsible_company_id=tokens[MOVEABLE_RESPONSIBLE_COMPANY_ID_INDEX],
        aoc_status=tokens[MOVEABLE_AOC_STATUS_INDEX],
        nation=tokens[MOVEABLE_NATION_INDEX],
        fact_page_url=tokens[MOVEABLE_FACT_PAGE_URL_INDEX],
        last_changed_date=to_date(tokens[MOVEABLE_DATE_UPDATED_INDEX]),
        sync_date=to_date(tokens[MOVEABLE_SYNC_DATE_INDEX]),
    )
