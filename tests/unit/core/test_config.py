"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import NpdConfig
from core.constants import DEFAULT_FACTPAGES_URL
from core.errors import NpdConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the public FactPages server."""
    for name in ("NPDIO_FACTPAGES_URL", "NPDIO_HTTP_TIMEOUT", "NPDIO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = NpdConfig.from_env()

    assert (config.factpages_url, config.http_timeout, config.log_level) == (
        DEFAULT_FACTPAGES_URL,
        30.0,
        "info",
    )


def test_from_env_strips_query_suffix_from_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Base URL should not keep a trailing query marker."""
    monkeypatch.setenv("NPDIO_FACTPAGES_URL", "https://factpages.example/ReportServer?/")

    config = NpdConfig.from_env()

    assert config.factpages_url == "https://factpages.example/ReportServer"


def test_from_env_reads_s3_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should pass S3 region and profile through."""
    monkeypatch.setenv("NPDIO_S3_REGION", "eu-north-1")
    monkeypatch.setenv("NPDIO_S3_PROFILE", "npd-mirror")

    config = NpdConfig.from_env()

    assert (config.s3_region, config.s3_profile) == ("eu-north-1", "npd-mirror")


@pytest.mark.parametrize("raw_value", ["not-a-number", "0", "-5"])
def test_from_env_raises_for_invalid_timeout(
    monkeypatch: pytest.MonkeyPatch, raw_value: str
) -> None:
    """Config should fail for non-numeric or non-positive timeout."""
    monkeypatch.setenv("NPDIO_HTTP_TIMEOUT", raw_value)

    with pytest.raises(NpdConfigError):
        NpdConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log level."""
    monkeypatch.setenv("NPDIO_LOG_LEVEL", "verbose")

    with pytest.raises(NpdConfigError):
        NpdConfig.from_env()


def test_from_env_normalizes_log_level_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level should be case-insensitive."""
    monkeypatch.setenv("NPDIO_LOG_LEVEL", "WARNING")

    config = NpdConfig.from_env()

    assert config.log_level == "warning"
