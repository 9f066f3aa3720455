"""Unit tests for record models and their token constructors."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from core.errors import CoercionError
from records import (
    company,
    development_wellbore,
    discovery,
    exploration_wellbore,
    facility,
    field,
    license,
    pipeline,
    survey,
    wellbore,
)
from records.company import NpdCompany
from records.field import NpdField


def _tokens(column_count: int, values: dict[int, str]) -> list[str | None]:
    tokens: list[str | None] = [None] * column_count
    for index, value in values.items():
        tokens[index] = value
    return tokens


def test_records_compare_by_npd_id_only() -> None:
    """Records with the same id should be equal across kinds."""
    first = NpdCompany(npd_id="1", name="Alpha AS")
    second = NpdField(npd_id="1", name="ALPHA")

    assert first == second and hash(first) == hash(second)


def test_records_with_different_ids_differ() -> None:
    """Same name but different id should not be equal."""
    first = NpdCompany(npd_id="1", name="Alpha AS")
    second = NpdCompany(npd_id="2", name="Alpha AS")

    assert first != second


def test_record_is_immutable() -> None:
    """Records should reject attribute assignment."""
    record = NpdCompany(npd_id="1", name="Alpha AS")

    with pytest.raises(FrozenInstanceError):
        record.name = "Beta AS"  # type: ignore[misc]


def test_record_rejects_empty_id() -> None:
    """Records should require a non-empty id."""
    with pytest.raises(ValueError):
        NpdCompany(npd_id="", name="Alpha AS")


def test_new_company_maps_flags_and_sync_date() -> None:
    """Company constructor should coerce flags and dates."""
    tokens = _tokens(
        company.COLUMN_COUNT,
        {
            company.NAME_INDEX: "Equinor Energy AS",
            company.NPDID_INDEX: "17237817",
            company.IS_CURRENT_LICENSE_OPERATOR_INDEX: "Y",
            company.IS_FORMER_LICENSE_OPERATOR_INDEX: "N",
            company.DATE_SYNCED_INDEX: "17.10.2026",
        },
    )

    record = company.new_company(tokens)

    assert (
        record.is_current_license_operator,
        record.is_former_license_operator,
        record.is_current_license_licensee,
        record.sync_date,
    ) == (True, False, None, date(2026, 10, 17))


def test_new_company_raises_for_missing_id() -> None:
    """Company constructor should reject rows without an id."""
    tokens = _tokens(company.COLUMN_COUNT, {company.NAME_INDEX: "Equinor Energy AS"})

    with pytest.raises(CoercionError):
        company.new_company(tokens)


def test_new_license_converts_areas_to_square_meters() -> None:
    """Licence areas are published in km2 and stored in m2."""
    tokens = _tokens(
        license.COLUMN_COUNT,
        {
            license.NAME_INDEX: "054",
            license.NPDID_INDEX: "20756",
            license.ORIGINAL_AREA_INDEX: "1.25",
            license.CURRENT_AREA_INDEX: "0.5",
        },
    )

    record = license.new_license(tokens)

    assert (record.original_area, record.current_area) == (1_250_000.0, 500_000.0)


def test_new_discovery_parses_year() -> None:
    """Discovery year should be an integer."""
    tokens = _tokens(
        discovery.COLUMN_COUNT,
        {
            discovery.NAME_INDEX: "31/2-1 TROLL",
            discovery.NPDID_INDEX: "43690",
            discovery.DISCOVERY_YEAR_INDEX: "1979",
        },
    )

    record = discovery.new_discovery(tokens)

    assert record.discovery_year == 1979


def test_new_pipeline_parses_dimension() -> None:
    """Pipeline dimension should be a float in inches."""
    tokens = _tokens(
        pipeline.COLUMN_COUNT,
        {
            pipeline.NAME_INDEX: "TROLL OIL PIPELINE II",
            pipeline.NPDID_INDEX: "309014",
            pipeline.DIMENSION_INDEX: "20.00",
        },
    )

    record = pipeline.new_pipeline(tokens)

    assert record.dimension == 20.0


def test_new_fixed_facility_maps_belongs_to_kind() -> None:
    """Owning entity label should become a record type tag."""
    tokens = _tokens(
        facility.FIXED_COLUMN_COUNT,
        {
            facility.FIXED_NAME_INDEX: "TROLL A",
            facility.FIXED_NPDID_INDEX: "272295",
            facility.FIXED_BELONGS_TO_KIND_INDEX: "FIELD",
            facility.FIXED_IS_SURFACE_INDEX: "Y",
        },
    )

    record = facility.new_fixed_facility(tokens)

    assert (record.belongs_to_kind, record.is_surface_facility) == ("field", True)


def test_new_moveable_facility_reads_nation() -> None:
    """Moveable facility constructor should read the flag nation."""
    tokens = _tokens(
        facility.MOVEABLE_COLUMN_COUNT,
        {
            facility.MOVEABLE_NAME_INDEX: "DEEPSEA ATLANTIC",
            facility.MOVEABLE_NPDID_INDEX: "420437",
            facility.MOVEABLE_NATION_INDEX: "NORWAY",
        },
    )

    record = facility.new_moveable_facility(tokens)

    assert (record.record_type, record.nation) == ("facility_moveable", "NORWAY")


def test_new_survey_reads_availability_flag() -> None:
    """Survey availability should be a boolean."""
    tokens = _tokens(
        survey.COLUMN_COUNT,
        {
            survey.NAME_INDEX: "ST14001",
            survey.NPDID_INDEX: "8205",
            survey.IS_AVAILABLE_INDEX: "Ja",
        },
    )

    record = survey.new_survey(tokens)

    assert record.is_available is True


def test_new_other_wellbore_keeps_name_parts_as_text() -> None:
    """Wellbore name parts may contain letters and stay text."""
    tokens = _tokens(
        wellbore.COLUMN_COUNT,
        {
            wellbore.WELLBORE_NAME_INDEX: "1/9-U-1",
            wellbore.NPDID_WELLBORE_INDEX: "6207",
            wellbore.NAME_PART1_INDEX: "1",
            wellbore.NAME_PART2_INDEX: "9",
            wellbore.NAME_PART3_INDEX: "U",
            wellbore.NAME_PART4_INDEX: "1",
        },
    )

    record = wellbore.new_other_wellbore(tokens)

    assert record.name_parts == ("1", "9", "U", "1", None, None)


def test_new_exploration_wellbore_maps_flags_depths_and_ids() -> None:
    """Exploration constructor should coerce flags and depths and keep ids."""
    tokens = _tokens(
        exploration_wellbore.COLUMN_COUNT,
        {
            exploration_wellbore.WELLBORE_NAME_INDEX: "35/11-25 S",
            exploration_wellbore.NPDID_WELLBORE_INDEX: "8953",
            exploration_wellbore.SUBSEA_INDEX: "NO",
            exploration_wellbore.DISCOVERY_WELLBORE_INDEX: "YES",
            exploration_wellbore.TOTAL_DEPTH_INDEX: "3655.0",
            exploration_wellbore.BOTTOM_HOLE_TEMPERATURE_INDEX: "131",
            exploration_wellbore.FORMATION_WITH_HC1_INDEX: "SOGNEFJORD FM",
            exploration_wellbore.ENTRY_DATE_INDEX: "11.04.2020",
            exploration_wellbore.NPDID_DISCOVERY_INDEX: "43765",
            exploration_wellbore.NAME_PART1_INDEX: "35",
            exploration_wellbore.NAME_PART1_INDEX + 5: "S",
        },
    )

    record = exploration_wellbore.new_exploration_wellbore(tokens)

    assert (
        record.is_subsea,
        record.is_discovery_wellbore,
        record.total_depth,
        record.bottom_hole_temperature,
        record.hydrocarbon_formations,
        record.entry_date,
        record.discovery_id,
        record.name_parts,
    ) == (
        False,
        True,
        3655.0,
        131,
        ("SOGNEFJORD FM", None, None),
        date(2020, 4, 11),
        "43765",
        ("35", None, None, None, None, "S"),
    )


def test_new_exploration_wellbore_rejects_invalid_drilling_days() -> None:
    """Non-numeric drilling days should reject the row."""
    tokens = _tokens(
        exploration_wellbore.COLUMN_COUNT,
        {
            exploration_wellbore.WELLBORE_NAME_INDEX: "35/11-25 S",
            exploration_wellbore.NPDID_WELLBORE_INDEX: "8953",
            exploration_wellbore.DRILLING_DAYS_INDEX: "forty",
        },
    )

    with pytest.raises(CoercionError):
        exploration_wellbore.new_exploration_wellbore(tokens)


def test_new_development_wellbore_maps_pre_drill_dates_and_facilities() -> None:
    """Development constructor should read pre-drill dates and facility ids."""
    tokens = _tokens(
        development_wellbore.COLUMN_COUNT,
        {
            development_wellbore.WELLBORE_NAME_INDEX: "34/10-A-1",
            development_wellbore.NPDID_WELLBORE_INDEX: "95",
            development_wellbore.PRE_DRILL_ENTRY_DATE_INDEX: "02.05.1986",
            development_wellbore.PRE_DRILL_COMPLETION_DATE_INDEX: "30.06.1986",
            development_wellbore.PRODUCTION_FACILITY_INDEX: "GULLFAKS A",
            development_wellbore.NPDID_FACILITY_PRODUCING_INDEX: "272428",
            development_wellbore.MULTILATERAL_INDEX: "NO",
        },
    )

    record = development_wellbore.new_development_wellbore(tokens)

    assert (
        record.pre_drill_entry_date,
        record.pre_drill_completion_date,
        record.production_facility,
        record.producing_facility_id,
        record.is_multilateral,
    ) == (date(1986, 5, 2), date(1986, 6, 30), "GULLFAKS A", "272428", False)


def test_new_development_wellbore_requires_npd_id() -> None:
    """Development row without a wellbore id should be rejected."""
    tokens = _tokens(
        development_wellbore.COLUMN_COUNT,
        {development_wellbore.WELLBORE_NAME_INDEX: "34/10-A-1"},
    )

    with pytest.raises(CoercionError):
        development_wellbore.new_development_wellbore(tokens)


def test_new_production_entry_rejects_invalid_month() -> None:
    """Production month outside 1..12 should reject the row."""
    tokens = _tokens(
        field.PRODUCTION_COLUMN_COUNT,
        {
            field.PRODUCTION_YEAR_INDEX: "2024",
            field.PRODUCTION_MONTH_INDEX: "13",
            field.PRODUCTION_NPDID_INDEX: "43506",
        },
    )

    with pytest.raises(CoercionError):
        field.new_production_entry(tokens)


def test_new_production_entry_requires_year() -> None:
    """Production row without a year should be rejected."""
    tokens = _tokens(
        field.PRODUCTION_COLUMN_COUNT,
        {field.PRODUCTION_MONTH_INDEX: "1", field.PRODUCTION_NPDID_INDEX: "43506"},
    )

    with pytest.raises(CoercionError):
        field.new_production_entry(tokens)


def test_field_with_production_returns_enriched_copy() -> None:
    """Attaching production should leave the original field untouched."""
    original = NpdField(npd_id="46437", name="TROLL")
    entry = field.ProductionEntry(year=2024, month=1, field_npd_id="46437", oil_equivalents=5.1)

    enriched = original.with_production([entry])

    assert (original.production, len(enriched.production)) == (None, 1)
