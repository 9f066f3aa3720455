"""JSON serialization for FactPages records.

This module turns records into JSON-safe dictionaries for CLI output.
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import date
from typing import Any

from records.base import NpdRecord


def record_to_payload(record: NpdRecord) -> dict[str, object]:
    """Serialize a record into a JSON-safe payload.

    Args:
        record: Record instance of any kind.

    Returns:
        Dictionary payload tagged with the record type.
    """
    payload: dict[str, object] = {"record_type": record.record_type}
    for record_field in fields(record):
        payload[record_field.name] = _to_json_value(getattr(record, record_field.name))
    return payload


def record_to_json(record: NpdRecord) -> str:
    """Serialize a record as one sorted-key JSON line."""
    return json.dumps(record_to_payload(record), sort_keys=True)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (tuple, list)):
        return [_to_json_value(item) for item in value]
    if is_dataclass(value) and not isinstance(value, type):
        return {
            value_field.name: _to_json_value(getattr(value, value_field.name))
            for value_field in fields(value)
        }
    return value
