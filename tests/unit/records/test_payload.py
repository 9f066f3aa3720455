"""Unit tests for record JSON payloads."""

from __future__ import annotations

import json
from datetime import date

from records.company import NpdCompany
from records.field import NpdField, ProductionEntry
from records.payload import record_to_json, record_to_payload


def test_record_to_payload_tags_type_and_formats_dates() -> None:
    """Payload should carry the type tag and ISO dates."""
    record = NpdCompany(npd_id="1", name="Alpha AS", sync_date=date(2026, 10, 17))

    payload = record_to_payload(record)

    assert (payload["record_type"], payload["sync_date"]) == ("company", "2026-10-17")


def test_record_to_json_nests_production_entries() -> None:
    """Attached production should serialize as a list of entries."""
    entry = ProductionEntry(year=2024, month=1, field_npd_id="46437", oil=1.3)
    record = NpdField(npd_id="46437", name="TROLL").with_production([entry])

    payload = json.loads(record_to_json(record))

    assert payload["production"]["entries"][0]["oil"] == 1.3
