"""Runtime configuration model for npdio.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_FACTPAGES_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_LOG_LEVEL,
    FACTPAGES_QUERY,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import NpdConfigError


@dataclass(frozen=True)
class NpdConfig:
    """Validated runtime configuration.

    Attributes:
        factpages_url: Base URL of the FactPages report server.
        http_timeout: Timeout in seconds for HTTP sources.
        s3_region: Optional default AWS region for S3 sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
        log_level: Minimum level of emitted log events.
    """

    factpages_url: str = DEFAULT_FACTPAGES_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    s3_region: str | None = None
    s3_profile: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "NpdConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            NpdConfigError: If environment values are invalid.
        """
        factpages_url = os.getenv("NPDIO_FACTPAGES_URL", DEFAULT_FACTPAGES_URL)
        timeout_value = os.getenv("NPDIO_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        log_level_value = os.getenv("NPDIO_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            factpages_url=factpages_url.rstrip("?/"),
            http_timeout=_parse_http_timeout(timeout_value),
            s3_region=os.getenv("NPDIO_S3_REGION"),
            s3_profile=os.getenv("NPDIO_S3_PROFILE"),
            log_level=_parse_log_level(log_level_value),
        )

    def table_url(self, table: str) -> str:
        """Build the CSV export URL of one FactPages table.

        Args:
            table: FactPages table view name, e.g. ``company``.

        Returns:
            Fully-qualified CSV download URL.
        """
        return self.factpages_url + FACTPAGES_QUERY.format(table=table)


def _parse_http_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        NpdConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise NpdConfigError(
            "Invalid NPDIO_HTTP_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set NPDIO_HTTP_TIMEOUT to a positive number."
        ) from error
    if timeout <= 0:
        raise NpdConfigError(
            f"Invalid NPDIO_HTTP_TIMEOUT value: expected > 0, got '{raw_value}'."
        )
    return timeout


def _parse_log_level(raw_value: str) -> str:
    """Parse and validate the log level environment value."""
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise NpdConfigError(
            f"Invalid NPDIO_LOG_LEVEL value '{raw_value}'. "
            f"Supported levels: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
