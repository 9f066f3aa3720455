"""Field records and their monthly production.

Fields come from the FactPages ``field`` table. Production comes from
``field_production_monthly`` and is attached afterwards by the aggregator,
which returns enriched copies instead of mutating the field.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from core.errors import CoercionError
from core.types import Tokens
from ingest.coercion import require, to_date, to_double, to_int
from records.base import NpdRecord

NAME_INDEX = 0
OPERATOR_NAME_INDEX = 1
STATUS_INDEX = 2
DISCOVERY_WELLBORE_NAME_INDEX = 3
DISCOVERY_WELLBORE_COMPLETION_DATE_INDEX = 4
MAIN_AREA_INDEX = 5
LICENSE_KIND_INDEX = 6
LICENSE_NAME_INDEX = 7
MAIN_SUPPLY_BASE_INDEX = 8
LICENSE_NPDID_INDEX = 9
NPDID_INDEX = 10
DISCOVERY_WELLBORE_NPDID_INDEX = 11
COMPANY_NPDID_INDEX = 12
FACT_PAGE_URL_INDEX = 13
FACT_MAP_URL_INDEX = 14
DATE_MAIN_LEVEL_UPDATED_INDEX = 15
DATE_ALL_UPDATED_INDEX = 16
DATE_SYNCED_INDEX = 17
COLUMN_COUNT = 18

PRODUCTION_YEAR_INDEX = 1
PRODUCTION_MONTH_INDEX = 2
PRODUCTION_OIL_INDEX = 3
PRODUCTION_GAS_INDEX = 4
PRODUCTION_NGL_INDEX = 5
PRODUCTION_CONDENSATE_INDEX = 6
PRODUCTION_OIL_EQUIVALENTS_INDEX = 7
PRODUCTION_WATER_INDEX = 8
PRODUCTION_NPDID_INDEX = 9
PRODUCTION_COLUMN_COUNT = 10


@dataclass(frozen=True)
class ProductionEntry:
    """Total production of one field for one month.

    Volumes are net, in million Sm3, and None when not reported.
    """

    year: int
    month: int
    field_npd_id: str
    oil: float | None = None
    gas: float | None = None
    ngl: float | None = None
    condensate: float | None = None
    oil_equivalents: float | None = None
    water: float | None = None

    @property
    def period(self) -> tuple[int, int]:
        """Return the (year, month) sort key of this entry."""
        return (self.year, self.month)


@dataclass(frozen=True)
class Production:
    """Monthly production of one field, oldest month first."""

    entries: tuple[ProductionEntry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Sequence[ProductionEntry]) -> "Production":
        """Build production with entries ordered by (year, month)."""
        return cls(entries=tuple(sorted(entries, key=lambda entry: entry.period)))

    def total_oil_equivalents(self) -> float:
        """Return the summed oil equivalents over all reported months."""
        return sum(entry.oil_equivalents or 0.0 for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdField(NpdRecord):
    """A petroleum field as modeled by the NPD.

    Attributes:
        status: Current activity status, e.g. ``Producing``.
        discovery_wellbore_id: NPD id of the discovery wellbore.
        license_id: NPD id of the production licence.
        main_area: Main area, e.g. ``North sea``.
        main_supply_base: Main supply base.
        operator_id: NPD id of the operating company.
        production: Monthly production, None until attached.
    """

    RECORD_TYPE = "field"

    status: str | None = None
    discovery_wellbore_id: str | None = None
    license_id: str | None = None
    main_area: str | None = None
    main_supply_base: str | None = None
    operator_id: str | None = None
    production: Production | None = None

    def with_production(self, entries: Sequence[ProductionEntry]) -> "NpdField":
        """Return a copy of this field carrying the given production.

        Any previously attached production is replaced, not merged.
        """
        return replace(self, production=Production.from_entries(entries))


def new_field(tokens: Tokens) -> NpdField:
    """Build a field from one row of the field table.

    Raises:
        CoercionError: If a required or typed column is invalid.
    """
    return NpdField(
        npd_id=require(tokens[NPDID_INDEX], "fldNpdidField"),
        name=require(tokens[NAME_INDEX], "fldName"),
        status=tokens[STATUS_INDEX],
        discovery_wellbore_id=tokens[DISCOVERY_WELLBORE_NPDID_INDEX],
        license_id=tokens[LICENSE_NPDID_INDEX],
        main_area=tokens[MAIN_AREA_INDEX],
        main_supply_base=tokens[MAIN_SUPPLY_BASE_INDEX],
        operator_id=tokens[COMPANY_NPDID_INDEX],
        fact_page_url=tokens[FACT_PAGE_URL_INDEX],
        fact_map_url=tokens[FACT_MAP_URL_INDEX],
        last_changed_date=to_date(tokens[DATE_ALL_UPDATED_INDEX]),
        sync_date=to_date(tokens[DATE_SYNCED_INDEX]),
    )


def new_production_entry(tokens: Tokens) -> ProductionEntry:
    """Build one monthly entry from the field production table.

    Raises:
        CoercionError: If year, month or field id is missing or invalid.
    """
    year = to_int(tokens[PRODUCTION_YEAR_INDEX])
    month = to_int(tokens[PRODUCTION_MONTH_INDEX])
    if year is None or month is None:
        raise CoercionError("Production entry requires both year and month")
    if not 1 <= month <= 12:
        raise CoercionError(f"Invalid month: {month}")
    return ProductionEntry(
        year=year,
        month=month,
        field_npd_id=require(tokens[PRODUCTION_NPDID_INDEX], "prfNpdidInformationCarrier"),
        oil=to_double(tokens[PRODUCTION_OIL_INDEX]),
        gas=to_double(tokens[PRODUCTION_GAS_INDEX]),
        ngl=to_double(tokens[PRODUCTION_NGL_INDEX]),
        condensate=to_double(tokens[PRODUCTION_CONDENSATE_INDEX]),
        oil_equivalents=to_double(tokens[PRODUCTION_OIL_EQUIVALENTS_INDEX]),
        water=to_double(tokens[PRODUCTION_WATER_INDEX]),
    )
