"""Token coercion primitives.

This module converts single CSV tokens into typed column values.
Booleans and kind tags degrade to False/None; malformed numbers and
dates raise CoercionError so the whole line is rejected.
"""

from __future__ import annotations

from datetime import date, datetime
import re

from core.constants import (
    DATE_FORMAT,
    DATE_PATTERN,
    DOUBLE_PATTERN,
    INTEGER_PATTERN,
    RECORD_KIND_LABELS,
    TRUE_PREFIXES,
)
from core.errors import CoercionError

_INTEGER_RE = re.compile(INTEGER_PATTERN)
_DOUBLE_RE = re.compile(DOUBLE_PATTERN)
_DATE_RE = re.compile(DATE_PATTERN)


def to_boolean(text: str | None) -> bool | None:
    """Convert a yes/no token, accepting Norwegian ``ja`` spellings.

    Args:
        text: Token to convert. May be None.

    Returns:
        None for None, True if the token starts with ``y`` or ``j``
        (any case), else False.
    """
    if text is None:
        return None
    return text.lower().startswith(TRUE_PREFIXES)


def to_int(text: str | None) -> int | None:
    """Convert a base-10 integer token.

    Args:
        text: Token to convert. May be None.

    Returns:
        Parsed integer, or None if text is None or empty.

    Raises:
        CoercionError: If text is not an integer.
    """
    if not text:
        return None
    if not _INTEGER_RE.fullmatch(text):
        raise CoercionError(f"Invalid integer: {text}")
    return int(text)


def to_double(text: str | None) -> float | None:
    """Convert a decimal token using ``.`` as decimal point.

    Args:
        text: Token to convert. May be None.

    Returns:
        Parsed float, or None if text is None or empty.

    Raises:
        CoercionError: If text is not a decimal number.
    """
    if not text:
        return None
    if not _DOUBLE_RE.fullmatch(text):
        raise CoercionError(f"Invalid double: {text}")
    return float(text)


def to_date(text: str | None) -> date | None:
    """Convert a ``dd.mm.yyyy`` token.

    Args:
        text: Token to convert. May be None.

    Returns:
        Parsed date, or None if text is None or empty.

    Raises:
        CoercionError: If text does not match the pattern or is not a
            valid calendar date.
    """
    if not text:
        return None
    if not _DATE_RE.fullmatch(text):
        raise CoercionError(f"Invalid date: {text}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as error:
        raise CoercionError(f"Invalid date: {text}") from error


def to_record_kind(text: str | None) -> str | None:
    """Map a free-text kind label onto a record type tag.

    Args:
        text: Label such as ``FIELD`` or ``Discovery``. May be None.

    Returns:
        Record type tag, or None if the label is unknown.
    """
    if text is None:
        return None
    label = text.lower()
    for prefix, record_type in RECORD_KIND_LABELS:
        if label.startswith(prefix):
            return record_type
    return None


def require(text: str | None, column: str) -> str:
    """Return a mandatory token or reject the line."""
    if not text:
        raise CoercionError(f"Missing required value for column '{column}'")
    return text
