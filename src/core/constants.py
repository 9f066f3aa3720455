"""Core constants used across npdio modules.

This module centralizes format constants and source defaults.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

FIELD_SEPARATOR = ","
QUOTE_CHARACTER = '"'
ESCAPED_QUOTE = '""'
DATE_FORMAT = "%d.%m.%Y"
DATE_PATTERN = r"\d{2}\.\d{2}\.\d{4}"
INTEGER_PATTERN = r"[+-]?\d+"
DOUBLE_PATTERN = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
TRUE_PREFIXES = ("y", "j")
RECORD_KIND_LABELS = (
    ("field", "field"),
    ("discovery", "discovery"),
    ("licence", "licence"),
    ("license", "licence"),
    ("company", "company"),
    ("pipeline", "pipeline"),
    ("wellbore", "wellbore"),
)
SOURCE_ENCODING = "utf-8-sig"
READ_CHUNK_SIZE = 64 * 1024
HEADER_LINE_COUNT = 1
DEFAULT_FACTPAGES_URL = "https://factpages.npd.no/ReportServer_npdpublic"
FACTPAGES_QUERY = (
    "?/FactPages/TableView/{table}"
    "&rs:Command=Render&rc:Toolbar=false&rc:Parameters=f"
    "&rs:Format=CSV&Top100=false&CultureCode=en"
)
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
SQUARE_METERS_PER_SQUARE_KILOMETER = 1000.0 * 1000.0
