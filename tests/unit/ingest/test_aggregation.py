"""Unit tests for one-to-many detail aggregation."""

from __future__ import annotations

from core.config import NpdConfig
from ingest.aggregation import attach_details
from ingest.production import PRODUCTION_POLICY, attach_production
from records.field import NpdField, ProductionEntry
from tests.fixture_paths import fixture_path


def _field(npd_id: str, name: str) -> NpdField:
    return NpdField(npd_id=npd_id, name=name)


def _entry(field_npd_id: str, year: int, month: int, oil: float = 1.0) -> ProductionEntry:
    return ProductionEntry(year=year, month=month, field_npd_id=field_npd_id, oil=oil)


def test_attach_details_orders_each_group_by_period() -> None:
    """Unordered rows should be attached oldest month first."""
    fields = [_field("1", "ALPHA")]
    details = [_entry("1", 2024, 3), _entry("1", 2023, 12), _entry("1", 2024, 1)]

    enriched = attach_details(fields, details, PRODUCTION_POLICY)

    assert [entry.period for entry in enriched[0].production.entries] == [
        (2023, 12),
        (2024, 1),
        (2024, 3),
    ]


def test_attach_details_keeps_parent_order_and_unmatched_parents() -> None:
    """Parents should keep input order; parents without rows stay untouched."""
    fields = [_field("2", "BETA"), _field("1", "ALPHA"), _field("3", "GAMMA")]
    details = [_entry("1", 2024, 1), _entry("2", 2024, 1)]

    enriched = attach_details(fields, details, PRODUCTION_POLICY)

    assert [(field.npd_id, field.production is None) for field in enriched] == [
        ("2", False),
        ("1", False),
        ("3", True),
    ]


def test_attach_details_drops_rows_for_unknown_parents() -> None:
    """Rows referencing unknown parents should be ignored."""
    fields = [_field("1", "ALPHA")]
    details = [_entry("1", 2024, 1), _entry("99", 2024, 1)]

    enriched = attach_details(fields, details, PRODUCTION_POLICY)

    assert len(enriched[0].production) == 1


def test_attach_details_keeps_input_order_for_equal_periods() -> None:
    """Rows with equal periods should keep their relative input order."""
    fields = [_field("1", "ALPHA")]
    details = [_entry("1", 2024, 1, oil=1.0), _entry("1", 2024, 1, oil=2.0)]

    enriched = attach_details(fields, details, PRODUCTION_POLICY)

    assert [entry.oil for entry in enriched[0].production.entries] == [1.0, 2.0]


def test_attach_details_does_not_mutate_parents() -> None:
    """Aggregation should return copies and leave inputs unchanged."""
    fields = [_field("1", "ALPHA")]

    attach_details(fields, [_entry("1", 2024, 1)], PRODUCTION_POLICY)

    assert fields[0].production is None


def test_attach_details_overwrites_previous_aggregate() -> None:
    """A second aggregation should replace, not merge, production."""
    fields = [_field("1", "ALPHA")]
    first = attach_details(fields, [_entry("1", 2024, 1)], PRODUCTION_POLICY)

    second = attach_details(first, [_entry("1", 2025, 6)], PRODUCTION_POLICY)

    assert [entry.period for entry in second[0].production.entries] == [(2025, 6)]


def test_attach_production_reads_fixture_source() -> None:
    """Production source should enrich matching fields only."""
    fields = [_field("46437", "TROLL"), _field("43506", "EKOFISK"), _field("43758", "DRAUGEN")]
    source_uri = str(fixture_path("factpages/field_production.csv"))

    enriched = attach_production(source_uri, fields, NpdConfig())

    assert [None if field.production is None else len(field.production) for field in enriched] == [
        3,
        2,
        None,
    ]
