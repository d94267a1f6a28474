"""Orchestrator for one re-import reconciliation.

The engine runs matcher, merge policy and reporter in that order. It is pure:
records and rows go in, a report and a change set come out, and applying the
change set is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .comparators import default_comparator_chain
from .matching import MATCHERS, find_match_by_elimination
from .options import ReconciliationOptions
from .policy import resolve_merge_policy
from .report import build_report

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from commentsync.domain.model import CanonicalRecord, ExternalRow

    from .comparators import ComparatorChain
    from .contracts import ChangeSet, MatchOutcome
    from .matching import MatchRecords
    from .policy import ResolveMergePolicy
    from .report import ReconciliationReport


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationResult:
    report: ReconciliationReport
    changes: ChangeSet


@dataclass(slots=True)
class ReconciliationEngine:
    """Match records to rows and decide the resulting changes."""

    chain: ComparatorChain = field(default_factory=default_comparator_chain)
    resolve: ResolveMergePolicy = resolve_merge_policy

    def reconcile(
        self,
        records: Sequence[CanonicalRecord],
        rows: Sequence[ExternalRow],
        options: ReconciliationOptions,
    ) -> ReconciliationResult:
        """Run a full reconciliation of ``records`` against ``rows``."""

        matcher: MatchRecords = MATCHERS[options.strategy]
        outcome = matcher(records, rows, chain=self.chain)
        decision = self.resolve(
            outcome,
            policy=options.policy,
            categories=options.categories,
        )
        report = build_report(
            outcome,
            decision,
            strategy=options.strategy,
            policy=options.policy,
            categories=options.categories,
            suggestions=self._suggest(outcome),
        )
        log.info(
            "Reconciled %s records against %s rows (%s/%s): matched=%s unmatched=%s "
            "remaining=%s updated=%s added=%s aborted=%s",
            len(records),
            len(rows),
            options.strategy.value,
            options.policy.value,
            len(report.matched),
            len(report.unmatched),
            len(report.remaining),
            report.updated,
            len(report.added),
            report.aborted,
        )
        return ReconciliationResult(report=report, changes=decision.changes)

    def _suggest(self, outcome: MatchOutcome) -> dict[str, str]:
        """Best single-record guesses for unmatched records among the leftover rows."""

        suggestions: dict[str, str] = {}
        if not outcome.unmatched_records or not outcome.unmatched_rows:
            return suggestions
        for record in outcome.unmatched_records:
            found = find_match_by_elimination(record, outcome.unmatched_rows, chain=self.chain)
            if found is None:
                continue
            position, rotation = found
            row = outcome.unmatched_rows[position]
            log.debug(
                "Record %s may correspond to row %s (rotation %s)",
                record.cid,
                row.label,
                rotation,
            )
            suggestions[record.cid] = row.label
        return suggestions


def reconcile(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    categories: Iterable[str] = (),
    policy: str = "RequireTotalMatch",
    strategy: str = "ByElimination",
    chain: ComparatorChain | None = None,
) -> ReconciliationResult:
    """Parse option tokens and run a reconciliation with the default engine."""

    options = ReconciliationOptions.parse(categories=categories, policy=policy, strategy=strategy)
    engine = ReconciliationEngine(chain=chain) if chain is not None else ReconciliationEngine()
    return engine.reconcile(records, rows, options)
