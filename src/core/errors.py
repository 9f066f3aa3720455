"""npdio exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Source failures are fatal to a read; parse failures reject one line.
"""

from __future__ import annotations


class NpdError(Exception):
    """Base exception for all npdio failures."""


class NpdConfigError(NpdError):
    """Raised for invalid runtime configuration."""


class NpdSourceError(NpdError):
    """Raised when a source stream cannot be opened or read."""


class NpdParseError(NpdError):
    """Raised when one input line cannot be turned into a record."""


class RecordShapeError(NpdParseError):
    """Raised when a line has the wrong number of columns."""


class CoercionError(NpdParseError):
    """Raised when a token cannot be coerced to its column type."""


class NpdDependencyError(NpdError):
    """Raised when an optional runtime dependency is missing."""


class NpdUnknownKindError(NpdError):
    """Raised when an unknown record kind is requested."""
