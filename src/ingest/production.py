"""Monthly field production aggregation.

This module wires the production detail table onto field records.
"""

from __future__ import annotations

from typing import Sequence

from core.config import NpdConfig
from ingest.aggregation import DetailPolicy, aggregate_details
from records.field import (
    PRODUCTION_COLUMN_COUNT,
    NpdField,
    ProductionEntry,
    new_production_entry,
)

PRODUCTION_POLICY: DetailPolicy[NpdField, ProductionEntry] = DetailPolicy(
    construct=new_production_entry,
    column_count=PRODUCTION_COLUMN_COUNT,
    parent_key=lambda entry: entry.field_npd_id,
    order_key=lambda entry: entry.period,
    attach=lambda field, entries: field.with_production(entries),
)


def attach_production(
    source_uri: str,
    fields: Sequence[NpdField],
    config: NpdConfig | None = None,
) -> list[NpdField]:
    """Attach monthly production to the given fields.

    Args:
        source_uri: Location of the ``field_production_monthly`` table.
        fields: Fields read earlier.
        config: Optional runtime configuration.

    Returns:
        Fields in input order, those with production rows enriched.

    Raises:
        NpdSourceError: If the production source cannot be read.
    """
    return aggregate_details(source_uri, fields, PRODUCTION_POLICY, config)
