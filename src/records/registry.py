"""Record kind registry.

This module maps record kind names to their constructor, column count
and FactPages table so generic callers can read any kind by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.config import NpdConfig
from core.errors import NpdUnknownKindError
from core.types import RecordConstructor
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
from records.base import NpdRecord

PRODUCTION_TABLE = "field_production_monthly"


@dataclass(frozen=True)
class RecordKind:
    """One ingestible record kind.

    Attributes:
        name: Kind name used by the SDK and CLI.
        record_class: Record dataclass produced by the constructor.
        construct: Callback building one record from tokens.
        column_count: Number of columns of the source table.
        table: FactPages table view name.
    """

    name: str
    record_class: type[NpdRecord]
    construct: RecordConstructor[NpdRecord]
    column_count: int
    table: str

    def default_source_uri(self, config: NpdConfig) -> str:
        """Return the FactPages CSV URL of this kind."""
        return config.table_url(self.table)


RECORD_KINDS: dict[str, RecordKind] = {
    kind.name: kind
    for kind in (
        RecordKind(
            "company",
            company.NpdCompany,
            company.new_company,
            company.COLUMN_COUNT,
            "company",
        ),
        RecordKind("field", field.NpdField, field.new_field, field.COLUMN_COUNT, "field"),
        RecordKind(
            "licence",
            license.NpdLicense,
            license.new_license,
            license.COLUMN_COUNT,
            "licence",
        ),
        RecordKind(
            "discovery",
            discovery.NpdDiscovery,
            discovery.new_discovery,
            discovery.COLUMN_COUNT,
            "discovery",
        ),
        RecordKind(
            "pipeline",
            pipeline.NpdPipeline,
            pipeline.new_pipeline,
            pipeline.COLUMN_COUNT,
            "tuf_pipeline_overview",
        ),
        RecordKind(
            "facility_fixed",
            facility.NpdFixedFacility,
            facility.new_fixed_facility,
            facility.FIXED_COLUMN_COUNT,
            "facility_fixed",
        ),
        RecordKind(
            "facility_moveable",
            facility.NpdMoveableFacility,
            facility.new_moveable_facility,
            facility.MOVEABLE_COLUMN_COUNT,
            "facility_moveable",
        ),
        RecordKind("survey", survey.NpdSurvey, survey.new_survey, survey.COLUMN_COUNT, "survey"),
        RecordKind(
            "wellbore_other",
            wellbore.NpdOtherWellbore,
            wellbore.new_other_wellbore,
            wellbore.COLUMN_COUNT,
            "wellbore_other_all",
        ),
        RecordKind(
            "wellbore_exploration",
            exploration_wellbore.NpdExplorationWellbore,
            exploration_wellbore.new_exploration_wellbore,
            exploration_wellbore.COLUMN_COUNT,
            "wellbore_exploration_all",
        ),
        RecordKind(
            "wellbore_development",
            development_wellbore.NpdDevelopmentWellbore,
            development_wellbore.new_development_wellbore,
            development_wellbore.COLUMN_COUNT,
            "wellbore_development_all",
        ),
    )
}


def get_record_kind(name: str) -> RecordKind:
    """Look up a record kind by name.

    Args:
        name: Kind name, e.g. ``company``.

    Returns:
        Registered record kind.

    Raises:
        NpdUnknownKindError: If no kind has that name.
    """
    try:
        return RECORD_KINDS[name]
    except KeyError as error:
        raise NpdUnknownKindError(
            f"Unknown record kind '{name}'. "
            f"Supported kinds: {', '.join(sorted(RECORD_KINDS))}."
        ) from error


def supported_kinds() -> list[str]:
    """Return registered kind names in sorted order."""
    return sorted(RECORD_KINDS)
