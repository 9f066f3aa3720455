"""Base model shared by all FactPages record kinds.

Records are immutable and identified by their NPD id alone: two records
with the same id compare equal even when their kinds differ.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdRecord:
    """First-order FactPages entity.

    Attributes:
        npd_id: NPD unique id of the entity.
        name: Entity name.
        fact_page_url: URL of the FactPages fact page, if any.
        fact_map_url: URL of the FactMaps page, if any.
        last_changed_date: Date any attribute was last changed, if known.
        sync_date: Date synchronized with the NPD back-end, if known.
    """

    RECORD_TYPE: ClassVar[str] = "record"

    npd_id: str
    name: str
    fact_page_url: str | None = None
    fact_map_url: str | None = None
    last_changed_date: date | None = None
    sync_date: date | None = None

    def __post_init__(self) -> None:
        if not self.npd_id:
            raise ValueError("npd_id cannot be empty")
        if not self.name:
            raise ValueError("name cannot be empty")

    @property
    def record_type(self) -> str:
        """Return the FactPages type tag of this record."""
        return self.RECORD_TYPE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NpdRecord):
            return NotImplemented
        return self.npd_id == other.npd_id

    def __hash__(self) -> int:
        return hash(self.npd_id)
