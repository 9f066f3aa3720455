"""Unit tests for the quote-aware line tokenizer."""

from __future__ import annotations

import pytest

from ingest.tokenizer import tokenize_line


def test_tokenize_line_splits_documented_example() -> None:
    """Tokenizer should honor quotes and trim every field."""
    line = 'This, is,,a,"silly, but",actual,"example"'

    tokens = tokenize_line(line)

    assert tokens == ["This", "is", "", "a", "silly, but", "actual", "example"]


def test_tokenize_line_returns_single_empty_field_for_empty_line() -> None:
    """Empty line should yield exactly one empty field."""
    tokens = tokenize_line("")

    assert tokens == [""]


def test_tokenize_line_keeps_trailing_empty_field() -> None:
    """Trailing separator should produce a trailing empty field."""
    tokens = tokenize_line("a,b,")

    assert tokens == ["a", "b", ""]


def test_tokenize_line_collapses_doubled_quotes() -> None:
    """Doubled quotes inside a quoted field should become one quote."""
    tokens = tokenize_line('"He said ""hi""",x')

    assert tokens == ['He said "hi"', "x"]


def test_tokenize_line_strips_quotes_after_trimming() -> None:
    """Whitespace around a quoted field should not keep its quotes."""
    tokens = tokenize_line('  "Petoro AS, Stavanger"  ,NO')

    assert tokens == ["Petoro AS, Stavanger", "NO"]


def test_tokenize_line_keeps_lone_quote_character() -> None:
    """A field made of one quote should not be unquoted."""
    tokens = tokenize_line('a,"')

    assert tokens == ["a", '"']


def test_tokenize_line_raises_for_none() -> None:
    """None line is a caller error, not a data-quality error."""
    with pytest.raises(ValueError):
        tokenize_line(None)  # type: ignore[arg-type]
