"""Streaming, fault-isolating record reader.

This module turns a header-prefixed CSV line stream into typed records.
Record shapes are supplied as constructor callbacks; one bad line is
logged and skipped without aborting the read.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from core.config import NpdConfig
from core.constants import HEADER_LINE_COUNT
from core.errors import NpdParseError, RecordShapeError
from core.logging_config import get_logger
from core.types import LineRejection, ReadReport, RecordConstructor, Tokens
from ingest.line_source import open_source_lines
from ingest.tokenizer import tokenize_line

T = TypeVar("T")

_LOGGER = get_logger(__name__)


def read_records(
    source_uri: str,
    construct: RecordConstructor[T],
    column_count: int,
    config: NpdConfig | None = None,
) -> list[T]:
    """Read all records of one kind from a source.

    Args:
        source_uri: URL, S3 URI or local path of the CSV table.
        construct: Callback building one record from a token sequence.
        column_count: Number of columns every data line must have.
        config: Optional runtime configuration.

    Returns:
        Successfully constructed records in input line order.

    Raises:
        NpdSourceError: If the source cannot be opened or read.
    """
    report = read_records_with_report(source_uri, construct, column_count, config)
    return list(report.records)


def read_records_with_report(
    source_uri: str,
    construct: RecordConstructor[T],
    column_count: int,
    config: NpdConfig | None = None,
) -> ReadReport[T]:
    """Read records of one kind and report rejected lines.

    Args:
        source_uri: URL, S3 URI or local path of the CSV table.
        construct: Callback building one record from a token sequence.
        column_count: Number of columns every data line must have.
        config: Optional runtime configuration.

    Returns:
        Read report with records and line rejections.

    Raises:
        NpdSourceError: If the source cannot be opened or read.
    """
    runtime_config = config or NpdConfig.from_env()
    with open_source_lines(source_uri, runtime_config) as lines:
        records, rejections = parse_lines(lines, construct, column_count, source_uri)
    _LOGGER.info(
        "records_read",
        source_uri=source_uri,
        record_count=len(records),
        rejected_count=len(rejections),
    )
    return ReadReport(
        source_uri=source_uri,
        records=tuple(records),
        rejections=tuple(rejections),
    )


def parse_lines(
    lines: Iterable[str],
    construct: RecordConstructor[T],
    column_count: int,
    source_uri: str = "<lines>",
) -> tuple[list[T], list[LineRejection]]:
    """Parse already-opened lines, skipping the header line.

    Args:
        lines: Lines without terminators, header first.
        construct: Callback building one record from a token sequence.
        column_count: Number of columns every data line must have.
        source_uri: Source name used in log events.

    Returns:
        Tuple of constructed records and rejected lines.
    """
    records: list[T] = []
    rejections: list[LineRejection] = []
    for line_number, line in enumerate(lines, 1):
        if line_number <= HEADER_LINE_COUNT or not line.strip():
            continue
        try:
            records.append(construct(_line_tokens(line, column_count)))
        except NpdParseError as error:
            rejection = LineRejection(line_number=line_number, line=line, reason=str(error))
            rejections.append(rejection)
            _LOGGER.warning(
                "line_rejected",
                source_uri=source_uri,
                line_number=line_number,
                line=line,
                reason=rejection.reason,
            )
    return records, rejections


def _line_tokens(line: str, column_count: int) -> Tokens:
    """Tokenize a line, nullify empty tokens and check the column count.

    Raises:
        RecordShapeError: If the token count differs from column_count.
    """
    tokens = [token or None for token in tokenize_line(line)]
    if len(tokens) != column_count:
        raise RecordShapeError(
            f"Invalid number of tokens: {len(tokens)}, expected {column_count}"
        )
    return tokens
