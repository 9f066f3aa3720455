"""Unit tests for the streaming record reader."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from core.config import NpdConfig
from core.errors import NpdSourceError
from ingest.record_reader import parse_lines, read_records, read_records_with_report
from records.company import COLUMN_COUNT, new_company
from tests.fixture_paths import fixture_path

_HEADER = "a,b,c"


def _three_columns(tokens):
    return tuple(tokens)


def test_read_records_skips_rejected_line() -> None:
    """One malformed line should cost exactly one record."""
    source_path = fixture_path("factpages/company.csv")

    records = read_records(str(source_path), new_company, COLUMN_COUNT, NpdConfig())

    assert [record.npd_id for record in records] == ["17237817", "28985044", "1625788"]


def test_read_records_with_report_lists_rejection() -> None:
    """Report should carry the rejected line number and cause."""
    source_path = fixture_path("factpages/company.csv")

    report = read_records_with_report(str(source_path), new_company, COLUMN_COUNT, NpdConfig())

    rejection = report.rejections[0]
    assert (report.rejected_count, rejection.line_number, rejection.reason) == (
        1,
        6,
        "Invalid date: 32.13.2026",
    )


def test_read_records_logs_one_warning_per_rejected_line() -> None:
    """Rejected line should be logged once with its raw content and cause."""
    source_path = fixture_path("factpages/company.csv")

    with capture_logs() as events:
        read_records(str(source_path), new_company, COLUMN_COUNT, NpdConfig())

    rejected = [event for event in events if event["event"] == "line_rejected"]
    assert [(event["log_level"], event["line"], event["reason"]) for event in rejected] == [
        (
            "warning",
            '"Broken Dates AS",912345678,BROKEN,NO,,29999999,Y,Y,Y,Y,32.13.2026',
            "Invalid date: 32.13.2026",
        )
    ]


def test_read_records_treats_crlf_like_lf() -> None:
    """CRLF terminated source should yield the same records."""
    config = NpdConfig()

    lf_records = read_records(
        str(fixture_path("factpages/company.csv")), new_company, COLUMN_COUNT, config
    )
    crlf_records = read_records(
        str(fixture_path("factpages/company_crlf.csv")), new_company, COLUMN_COUNT, config
    )

    assert [record.sync_date for record in crlf_records] == [
        record.sync_date for record in lf_records
    ] and crlf_records == lf_records


def test_read_records_is_idempotent() -> None:
    """Reading the same source twice should give equal results."""
    source_uri = str(fixture_path("factpages/company.csv"))
    config = NpdConfig()

    first = read_records(source_uri, new_company, COLUMN_COUNT, config)
    second = read_records(source_uri, new_company, COLUMN_COUNT, config)

    assert first == second


def test_read_records_raises_for_missing_source(tmp_path) -> None:
    """Unreadable source should be fatal."""
    missing_path = tmp_path / "missing.csv"

    with pytest.raises(NpdSourceError):
        read_records(str(missing_path), new_company, COLUMN_COUNT, NpdConfig())


def test_read_records_raises_for_unsupported_scheme() -> None:
    """Unknown URI scheme should be fatal."""
    with pytest.raises(NpdSourceError):
        read_records("ftp://example.org/company.csv", new_company, COLUMN_COUNT, NpdConfig())


def test_read_records_accepts_file_url() -> None:
    """file:// URLs should resolve to local paths."""
    source_uri = fixture_path("factpages/company.csv").as_uri()

    records = read_records(source_uri, new_company, COLUMN_COUNT, NpdConfig())

    assert len(records) == 3


def test_parse_lines_returns_nothing_for_header_only() -> None:
    """Header-only stream should produce no records and no rejections."""
    records, rejections = parse_lines([_HEADER], _three_columns, 3)

    assert records == [] and rejections == []


def test_parse_lines_skips_blank_lines_without_rejection() -> None:
    """Blank and whitespace-only lines should be skipped silently."""
    lines = [_HEADER, "", "1,2,3", "   ", "4,5,6"]

    records, rejections = parse_lines(lines, _three_columns, 3)

    assert len(records) == 2 and rejections == []


def test_parse_lines_rejects_wrong_column_count() -> None:
    """Line with an extra column should be rejected with both counts."""
    lines = [_HEADER, "1,2,3,4", "5,6,7"]

    records, rejections = parse_lines(lines, _three_columns, 3)

    assert records == [("5", "6", "7")] and rejections[0].reason == (
        "Invalid number of tokens: 4, expected 3"
    )


def test_parse_lines_nullifies_empty_tokens() -> None:
    """Empty and whitespace-only tokens should reach the constructor as None."""
    lines = [_HEADER, 'x, ,""']

    records, _ = parse_lines(lines, _three_columns, 3)

    assert records == [("x", None, None)]


def test_parse_lines_discards_header_even_when_valid() -> None:
    """First line should never become a record."""
    lines = ["1,2,3", "4,5,6"]

    records, _ = parse_lines(lines, _three_columns, 3)

    assert records == [("4", "5", "6")]
