"""Grouping engine: minimal-pair clustering and gloss-identity clustering.

Minimal pairs
-------------
Two records form a minimal pair when the symmetric difference of their gloss
token *sets* has exactly one element, i.e. one gloss is the other plus exactly
one extra distinct token. ``{A, B}`` vs ``{A, B, C}`` is a pair; the
substitution case ``{A, B, C}`` vs ``{A, B, D}`` differs by two and is not.

Clusters are built by seed linkage: records are taken in corpus order, each
unassigned record seeds a new group, and every later unassigned record that
forms a minimal pair *with the seed* joins it. Members are never compared with
each other, so two members of one group need not be a minimal pair, and a
record can end up outside the group of a record it pairs with. This
keeps compatibility with existing sorted outputs; it is not a transitive
closure and not a mutual-minimality clustering. Records without gloss tokens
never pair and stay in singleton groups.

Context variants
----------------
Records sharing a whitespace-normalized gloss line form one class. This is a
true partition.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Sequence

from .diagnostics import OperationCancelledError
from .models import Record, RecordGroup

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


def check_cancelled(cancel: CancelCheck | None, stage: str) -> None:
    """Raise OperationCancelledError if the cancellation callback fires."""
    if cancel is not None and cancel():
        raise OperationCancelledError(f"Cancelled during {stage}")


def _differ_by_one(a: frozenset[str], b: frozenset[str]) -> bool:
    if not a or not b:
        return False
    return len(a ^ b) == 1


def is_minimal_pair(a: Record, b: Record) -> bool:
    """True iff the gloss token sets of a and b differ by exactly one token.

    A record without gloss tokens never forms a pair.
    """
    return _differ_by_one(a.gloss_token_set, b.gloss_token_set)


def group_minimal_pairs(
    records: Sequence[Record], *, cancel: CancelCheck | None = None
) -> list[RecordGroup]:
    """Cluster records into minimal-pair groups by seed linkage.

    Args:
        records: Records in corpus order.
        cancel: Optional callback polled once per seed; when it returns True
            the operation stops with OperationCancelledError.

    Returns:
        Groups in seed discovery order; each record appears in exactly one.
    """
    token_sets = [record.gloss_token_set for record in records]
    assigned = [False] * len(records)
    groups: List[RecordGroup] = []

    for i, seed in enumerate(records):
        if assigned[i]:
            continue
        check_cancelled(cancel, "minimal-pair grouping")
        assigned[i] = True
        members = [seed]
        for j in range(i + 1, len(records)):
            if assigned[j]:
                continue
            if _differ_by_one(token_sets[i], token_sets[j]):
                members.append(records[j])
                assigned[j] = True
        groups.append(RecordGroup(key=seed.identifier or "", records=tuple(members)))

    logger.info("Grouped %d records into %d minimal-pair groups", len(records), len(groups))
    return groups


def group_context_variants(
    records: Sequence[Record], *, cancel: CancelCheck | None = None
) -> list[RecordGroup]:
    """Partition records by identical normalized gloss line.

    Classes follow the first appearance of each gloss; members keep corpus
    order. A missing gloss is keyed by "".
    """
    check_cancelled(cancel, "context-variant grouping")
    classes: Dict[str, List[Record]] = {}
    for record in records:
        classes.setdefault(record.gloss_key, []).append(record)

    groups = [RecordGroup(key=key, records=tuple(members)) for key, members in classes.items()]
    logger.info("Grouped %d records into %d context-variant classes", len(records), len(groups))
    return groups


def flatten_groups(groups: Iterable[RecordGroup]) -> list[Record]:
    """Records of all groups, group by group."""
    return [record for group in groups for record in group.records]
