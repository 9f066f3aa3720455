"""Public SDK surface for npdio.

This module provides a stable import path for library users.
It re-exports the client, the reader and the record models.
"""

from __future__ import annotations

from core.config import NpdConfig
from core.errors import (
    CoercionError,
    NpdConfigError,
    NpdDependencyError,
    NpdError,
    NpdParseError,
    NpdSourceError,
    NpdUnknownKindError,
    RecordShapeError,
)
from core.types import LineRejection, ReadReport
from ingest.aggregation import DetailPolicy, aggregate_details, attach_details
from ingest.client import NpdClient
from ingest.coercion import to_boolean, to_date, to_double, to_int, to_record_kind
from ingest.production import PRODUCTION_POLICY, attach_production
from ingest.record_reader import read_records, read_records_with_report
from ingest.tokenizer import tokenize_line
from records.base import NpdRecord
from records.company import NpdCompany
from records.development_wellbore import NpdDevelopmentWellbore
from records.discovery import NpdDiscovery
from records.exploration_wellbore import NpdExplorationWellbore
from records.facility import NpdFixedFacility, NpdMoveableFacility
from records.field import NpdField, Production, ProductionEntry
from records.license import NpdLicense
from records.pipeline import NpdPipeline
from records.registry import RecordKind, get_record_kind, supported_kinds
from records.survey import NpdSurvey
from records.wellbore import NpdOtherWellbore

__all__ = [
    "CoercionError",
    "DetailPolicy",
    "LineRejection",
    "NpdClient",
    "NpdCompany",
    "NpdConfig",
    "NpdConfigError",
    "NpdDependencyError",
    "NpdDevelopmentWellbore",
    "NpdDiscovery",
    "NpdError",
    "NpdExplorationWellbore",
    "NpdField",
    "NpdFixedFacility",
    "NpdLicense",
    "NpdMoveableFacility",
    "NpdOtherWellbore",
    "NpdParseError",
    "NpdPipeline",
    "NpdRecord",
    "NpdSourceError",
    "NpdSurvey",
    "NpdUnknownKindError",
    "PRODUCTION_POLICY",
    "Production",
    "ProductionEntry",
    "ReadReport",
    "RecordKind",
    "RecordShapeError",
    "aggregate_details",
    "attach_details",
    "attach_production",
    "get_record_kind",
    "read_records",
    "read_records_with_report",
    "supported_kinds",
    "to_boolean",
    "to_date",
    "to_double",
    "to_int",
    "to_record_kind",
    "tokenize_line",
]
