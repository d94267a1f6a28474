"""Audit report for one reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .contracts import UpdateCategory

if TYPE_CHECKING:
    from collections.abc import Collection

    from .contracts import MatchOutcome, MatchStrategy, MergePolicy
    from .policy import PolicyDecision


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationReport:
    """What was matched, what was left over, and what changed.

    Canonical records are identified by CID (``"112"``/``"112.2"``), rows by the
    text of their ``CID`` cell. ``suggestions`` maps an unmatched record's CID
    to the CID of the row a single-record elimination would pick, when one
    exists.
    """

    matched: tuple[str, ...] = ()
    unmatched: tuple[str, ...] = ()
    remaining: tuple[str, ...] = ()
    added: tuple[str, ...] = ()
    updated: int = 0
    strategy: MatchStrategy | None = None
    policy: MergePolicy | None = None
    categories: tuple[UpdateCategory, ...] = ()
    rotation: int = 0
    aborted: bool = False
    suggestions: dict[str, str] = field(default_factory=dict["str", "str"])

    def as_dict(self) -> dict[str, object]:
        return {
            "matched": list(self.matched),
            "unmatched": list(self.unmatched),
            "remaining": list(self.remaining),
            "added": list(self.added),
            "updated": self.updated,
            "strategy": self.strategy.value if self.strategy else None,
            "policy": self.policy.value if self.policy else None,
            "categories": [category.value for category in self.categories],
            "rotation": self.rotation,
            "aborted": self.aborted,
            "suggestions": dict(self.suggestions),
        }


def build_report(
    outcome: MatchOutcome,
    decision: PolicyDecision,
    *,
    strategy: MatchStrategy,
    policy: MergePolicy,
    categories: Collection[UpdateCategory],
    suggestions: dict[str, str] | None = None,
) -> ReconciliationReport:
    changes = decision.changes
    return ReconciliationReport(
        matched=tuple(pair.record.cid for pair in outcome.pairs),
        unmatched=tuple(record.cid for record in outcome.unmatched_records),
        remaining=tuple(row.label for row in outcome.unmatched_rows),
        added=tuple(insert.source_cid for insert in changes.inserts),
        updated=len(changes.updates),
        strategy=strategy,
        policy=policy,
        categories=tuple(category for category in UpdateCategory if category in categories),
        rotation=outcome.rotation,
        aborted=decision.aborted,
        suggestions=dict(suggestions or {}),
    )
