"""Unit tests for the ingestion SDK client."""

from __future__ import annotations

import httpx
import pytest

from core.config import NpdConfig
from core.errors import NpdUnknownKindError
from ingest import line_source
from ingest.client import NpdClient
from tests.fixture_paths import fixture_path


def test_client_read_uses_source_override() -> None:
    """Explicit source should replace the default FactPages URL."""
    client = NpdClient(NpdConfig())

    records = client.read("field", str(fixture_path("factpages/field.csv")))

    assert [record.name for record in records] == ["TROLL", "EKOFISK", "DRAUGEN"]


def test_client_read_defaults_to_factpages_table(monkeypatch: pytest.MonkeyPatch) -> None:
    """Default source should be the kind's FactPages table URL."""
    requested_urls: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(str(request.url))
        return httpx.Response(200, text=fixture_path("factpages/licence.csv").read_text())

    monkeypatch.setattr(
        line_source,
        "_create_http_client",
        lambda config: httpx.Client(transport=httpx.MockTransport(_handler)),
    )
    client = NpdClient(NpdConfig(factpages_url="https://factpages.example/ReportServer"))

    records = client.read("licence")

    assert len(records) == 1 and "licence" in requested_urls[0]


def test_client_read_raises_for_unknown_kind() -> None:
    """Unknown kind name should raise a typed error."""
    client = NpdClient(NpdConfig())

    with pytest.raises(NpdUnknownKindError):
        client.read("platform")


def test_client_attach_production_enriches_fields() -> None:
    """Client should attach production from an explicit source."""
    client = NpdClient(NpdConfig())
    fields = client.read("field", str(fixture_path("factpages/field.csv")))

    enriched = client.attach_production(
        fields, str(fixture_path("factpages/field_production.csv"))
    )

    assert enriched[0].production.total_oil_equivalents() == pytest.approx(14.8)


def test_client_kinds_lists_registry_sorted() -> None:
    """Kinds should be returned sorted by name."""
    client = NpdClient(NpdConfig())

    names = [record_kind.name for record_kind in client.kinds()]

    assert names == sorted(names) and "wellbore_other" in names
