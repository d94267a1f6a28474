"""Merge policies: turn a match outcome into concrete change instructions.

- ``RequireTotalMatch`` produces nothing unless every record found a row.
- ``ApplyPartial`` diffs every matched pair and leaves the leftovers alone.
- ``InsertUnmatchedOnly`` ignores matched pairs and seeds one new record per
  unmatched row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .contracts import ChangeSet, MergePolicy, NewRecord, RecordChanges
from .diff import derive_new_record, diff_fields

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from .contracts import MatchOutcome, UpdateCategory


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicyDecision:
    """Changes a policy decided on, and whether it refused to decide."""

    changes: ChangeSet = field(default_factory=ChangeSet)
    aborted: bool = False


class ResolveMergePolicy(Protocol):
    """Decide which changes a match outcome implies."""

    def __call__(
        self,
        outcome: MatchOutcome,
        *,
        policy: MergePolicy,
        categories: Collection[UpdateCategory],
    ) -> PolicyDecision: ...


def _require_total_match(
    outcome: MatchOutcome,
    categories: Collection[UpdateCategory],
) -> PolicyDecision:
    if not outcome.complete:
        log.info(
            "Refusing to apply changes: %s canonical records are unmatched",
            len(outcome.unmatched_records),
        )
        return PolicyDecision(aborted=True)
    return _apply_partial(outcome, categories)


def _apply_partial(
    outcome: MatchOutcome,
    categories: Collection[UpdateCategory],
) -> PolicyDecision:
    updates: list[RecordChanges] = []
    for pair in outcome.pairs:
        fields = diff_fields(pair.record, pair.row, categories)
        if not fields:
            continue
        updates.append(
            RecordChanges(
                record_id=pair.record.record_id,
                cid=pair.record.cid,
                resolution_id=pair.record.resolution_id,
                fields=fields,
            )
        )
    return PolicyDecision(changes=ChangeSet(updates=tuple(updates)))


def _insert_unmatched_only(
    outcome: MatchOutcome,
    categories: Collection[UpdateCategory],
) -> PolicyDecision:
    inserts = tuple(
        NewRecord(source_cid=row.label, fields=derive_new_record(row, categories))
        for row in outcome.unmatched_rows
    )
    return PolicyDecision(changes=ChangeSet(inserts=inserts))


_POLICIES: dict[
    MergePolicy,
    Callable[[MatchOutcome, Collection[UpdateCategory]], PolicyDecision],
] = {
    MergePolicy.REQUIRE_TOTAL_MATCH: _require_total_match,
    MergePolicy.APPLY_PARTIAL: _apply_partial,
    MergePolicy.INSERT_UNMATCHED_ONLY: _insert_unmatched_only,
}


def resolve_merge_policy(
    outcome: MatchOutcome,
    *,
    policy: MergePolicy,
    categories: Collection[UpdateCategory],
) -> PolicyDecision:
    return _POLICIES[policy](outcome, categories)
