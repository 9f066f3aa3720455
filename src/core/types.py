"""Shared typed models.

This module defines the immutable models passed between the tokenizer,
the streaming reader, the aggregator and the SDK surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")

Tokens = Sequence[Optional[str]]
RecordConstructor = Callable[[Tokens], T]


@dataclass(frozen=True)
class LineRejection:
    """One input line rejected by the streaming reader.

    Attributes:
        line_number: One-based line number in the source, header included.
        line: Raw line content without its terminator.
        reason: Human-readable cause of the rejection.
    """

    line_number: int
    line: str
    reason: str


@dataclass(frozen=True)
class ReadReport(Generic[T]):
    """Outcome of one streaming read.

    Attributes:
        source_uri: Source the lines were read from.
        records: Successfully constructed records in input order.
        rejections: Lines rejected for shape or coercion failures.
    """

    source_uri: str
    records: tuple[T, ...]
    rejections: tuple[LineRejection, ...]

    @property
    def rejected_count(self) -> int:
        """Return the number of rejected lines."""
        return len(self.rejections)
