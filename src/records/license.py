"""Production licence records from the FactPages ``licence`` table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.constants import SQUARE_METERS_PER_SQUARE_KILOMETER
from core.types import Tokens
from ingest.coercion import require, to_date, to_double
from records.base import NpdRecord

NAME_INDEX = 0
ACTIVITY_INDEX = 1
MAIN_AREA_INDEX = 2
STATUS_INDEX = 3
STRATIGRAPHICAL_INDEX = 4
DATE_GRANTED_INDEX = 5
VALID_TO_DATE_INDEX = 6
ORIGINAL_AREA_INDEX = 7
CURRENT_AREA_INDEX = 8
PHASE_INDEX = 9
NPDID_INDEX = 10
FACT_PAGE_URL_INDEX = 11
FACT_MAP_URL_INDEX = 12
DATE_MAIN_LEVEL_UPDATED_INDEX = 13
DATE_ALL_UPDATED_INDEX = 14
SYNC_DATE_INDEX = 15
COLUMN_COUNT = 16


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdLicense(NpdRecord):
    """A production licence as modeled by the NPD.

    Attributes:
        activity: Licensing activity the licence was awarded in.
        main_area: Main area, e.g. ``Barents sea``.
        status: Current status, e.g. ``ACTIVE``.
        stratigraphical: Whether the licence is stratigraphically split.
        date_granted: Date the licence was granted.
        valid_to_date: Date the licence expires.
        original_area: Original area in square meters.
        current_area: Current area in square meters.
        phase: Current licence phase.
    """

    RECORD_TYPE = "licence"

    activity: str | None = None
    main_area: str | None = None
    status: str | None = None
    stratigraphical: str | None = None
    date_granted: date | None = None
    valid_to_date: date | None = None
    original_area: float | None = None
    current_area: float | None = None
    phase: str | None = None


def new_license(tokens: Tokens) -> NpdLicense:
    """Build a licence from one row of the licence table.

    Raises:
        CoercionError: If a required or typed column is invalid.
    """
    return NpdLicense(
        npd_id=require(tokens[NPDID_INDEX], "prlNpdidLicence"),
        name=require(tokens[NAME_INDEX], "prlName"),
        activity=tokens[ACTIVITY_INDEX],
        main_area=tokens[MAIN_AREA_INDEX],
        status=tokens[STATUS_INDEX],
        stratigraphical=tokens[STRATIGRAPHICAL_INDEX],
        date_granted=to_date(tokens[DATE_GRANTED_INDEX]),
        valid_to_date=to_date(tokens[VALID_TO_DATE_INDEX]),
        original_area=_square_meters(to_double(tokens[ORIGINAL_AREA_INDEX])),
        current_area=_square_meters(to_double(tokens[CURRENT_AREA_INDEX])),
        phase=tokens[PHASE_INDEX],
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        last_changed_date=to_date(tokens[DATE_ALL_UPDATED_INDEX]),
        sync_date=to_date(tokens[SYNC_DATE_INDEX]),
    )


def _square_meters(square_kilometers: float | None) -> float | None:
    if square_kilometers is None:
        return None
    return square_kilometers * SQUARE_METERS_PER_SQUARE_KILOMETER
