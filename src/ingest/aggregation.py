"""One-to-many aggregation of detail rows onto parent records.

This module reads a detail table, groups rows by foreign key, orders
each group and attaches it to the matching parent. Parents are never
mutated; enriched copies are returned in the parents' input order.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Generic, Sequence, TypeVar

from core.config import NpdConfig
from core.logging_config import get_logger
from core.types import RecordConstructor
from ingest.record_reader import read_records

P = TypeVar("P")
D = TypeVar("D")

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class DetailPolicy(Generic[P, D]):
    """How detail rows are built, keyed, ordered and attached.

    Attributes:
        construct: Callback building one detail row from tokens.
        column_count: Number of columns of the detail table.
        parent_key: Foreign key of a detail row.
        order_key: Sort key of a detail row within its group.
        attach: Returns a parent carrying the ordered detail rows.
        parent_id: Unique id of a parent record.
    """

    construct: RecordConstructor[D]
    column_count: int
    parent_key: Callable[[D], str]
    order_key: Callable[[D], Any]
    attach: Callable[[P, tuple[D, ...]], P]
    parent_id: Callable[[P], str] = attrgetter("npd_id")


def aggregate_details(
    source_uri: str,
    parents: Sequence[P],
    policy: DetailPolicy[P, D],
    config: NpdConfig | None = None,
) -> list[P]:
    """Read detail rows and attach them to their parents.

    Args:
        source_uri: URL, S3 URI or local path of the detail table.
        parents: Previously read parent records.
        policy: Detail construction, keying and attachment policy.
        config: Optional runtime configuration.

    Returns:
        Parents in input order; matched ones replaced by enriched copies.

    Raises:
        NpdSourceError: If the detail source cannot be opened or read.
    """
    details = read_records(source_uri, policy.construct, policy.column_count, config)
    return attach_details(parents, details, policy)


def attach_details(
    parents: Sequence[P],
    details: Sequence[D],
    policy: DetailPolicy[P, D],
) -> list[P]:
    """Group already-read detail rows and attach them to their parents.

    Rows referencing unknown parents are dropped. Each group is sorted
    by the policy order key; ties keep their input order.

    Args:
        parents: Parent records.
        details: Detail rows in any order.
        policy: Detail keying and attachment policy.

    Returns:
        Parents in input order; matched ones replaced by enriched copies.
    """
    parent_ids = {policy.parent_id(parent) for parent in parents}
    groups: dict[str, list[D]] = defaultdict(list)
    unmatched_count = 0
    for detail in details:
        key = policy.parent_key(detail)
        if key not in parent_ids:
            unmatched_count += 1
            continue
        groups[key].append(detail)
    enriched: list[P] = []
    for parent in parents:
        group = groups.get(policy.parent_id(parent))
        if group is None:
            enriched.append(parent)
            continue
        enriched.append(policy.attach(parent, tuple(sorted(group, key=policy.order_key))))
    _LOGGER.debug(
        "details_attached",
        parent_count=len(parents),
        matched_parent_count=len(groups),
        detail_count=len(details) - unmatched_count,
        unmatched_count=unmatched_count,
    )
    return enriched
