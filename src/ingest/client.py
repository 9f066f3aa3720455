"""Python SDK for FactPages ingestion.

This module exposes high-level APIs for reading record kinds by name
and attaching monthly production to fields.
"""

from __future__ import annotations

from typing import Sequence

from core.config import NpdConfig
from core.logging_config import configure_logging
from core.types import ReadReport
from ingest.production import attach_production
from ingest.record_reader import read_records_with_report
from records.base import NpdRecord
from records.field import NpdField
from records.registry import PRODUCTION_TABLE, RecordKind, get_record_kind, supported_kinds


class NpdClient:
    """Primary SDK entry point for FactPages ingestion."""

    def __init__(self, config: NpdConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or NpdConfig.from_env()
        configure_logging(self._config.log_level)

    @property
    def config(self) -> NpdConfig:
        """Return the runtime configuration of this client."""
        return self._config

    def read(self, kind: str, source_uri: str | None = None) -> list[NpdRecord]:
        """Read all records of one kind.

        Args:
            kind: Record kind name, e.g. ``company``.
            source_uri: Optional source override. Defaults to the kind's
                FactPages table URL.

        Returns:
            Records in source line order.

        Raises:
            NpdUnknownKindError: If the kind is not registered.
            NpdSourceError: If the source cannot be opened or read.
        """
        return list(self.read_with_report(kind, source_uri).records)

    def read_with_report(
        self,
        kind: str,
        source_uri: str | None = None,
    ) -> ReadReport[NpdRecord]:
        """Read records of one kind together with rejected lines.

        Args:
            kind: Record kind name.
            source_uri: Optional source override.

        Returns:
            Read report for the resolved source.

        Raises:
            NpdUnknownKindError: If the kind is not registered.
            NpdSourceError: If the source cannot be opened or read.
        """
        record_kind = get_record_kind(kind)
        resolved_uri = source_uri or record_kind.default_source_uri(self._config)
        return read_records_with_report(
            resolved_uri,
            record_kind.construct,
            record_kind.column_count,
            self._config,
        )

    def attach_production(
        self,
        fields: Sequence[NpdField],
        source_uri: str | None = None,
    ) -> list[NpdField]:
        """Attach monthly production to previously read fields.

        Args:
            fields: Fields returned by ``read("field")``.
            source_uri: Optional production source override.

        Returns:
            Fields in input order, enriched where production exists.

        Raises:
            NpdSourceError: If the production source cannot be read.
        """
        resolved_uri = source_uri or self._config.table_url(PRODUCTION_TABLE)
        return attach_production(resolved_uri, fields, self._config)

    def kinds(self) -> list[RecordKind]:
        """Return registered record kinds sorted by name."""
        return [get_record_kind(name) for name in supported_kinds()]
