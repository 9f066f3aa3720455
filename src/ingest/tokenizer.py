"""Quote-aware CSV line tokenizer.

This module splits one FactPages CSV line into trimmed field values.
Quoting is tracked with an open/close flag, not a full escape grammar.
"""

from __future__ import annotations

from core.constants import ESCAPED_QUOTE, FIELD_SEPARATOR, QUOTE_CHARACTER


def tokenize_line(line: str) -> list[str]:
    """Split a line on commas that are not inside quotes.

    Example::

        This, is,,a,"silly, but",actual,"example"

    splits into ``This``, ``is``, ``""``, ``a``, ``silly, but``, ``actual``
    and ``example``.

    Args:
        line: Line to split, without its terminator.

    Returns:
        Field values in column order. Never empty.

    Raises:
        ValueError: If line is None.
    """
    if line is None:
        raise ValueError("line cannot be None")
    boundaries = _separator_positions(line)
    return [_clean_token(line[start + 1 : end]) for start, end in zip(boundaries, boundaries[1:])]


def _separator_positions(line: str) -> list[int]:
    """Locate unquoted separators, with sentinels before and after the line."""
    positions = [-1]
    in_quote = False
    for index, character in enumerate(line):
        if character == QUOTE_CHARACTER:
            in_quote = not in_quote
        elif character == FIELD_SEPARATOR and not in_quote:
            positions.append(index)
    positions.append(len(line))
    return positions


def _clean_token(raw_token: str) -> str:
    """Trim, unquote and unescape one raw field."""
    token = raw_token.strip()
    if len(token) >= 2 and token.startswith(QUOTE_CHARACTER) and token.endswith(QUOTE_CHARACTER):
        token = token[1:-1]
    return token.replace(ESCAPED_QUOTE, QUOTE_CHARACTER)
