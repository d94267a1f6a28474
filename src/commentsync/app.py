"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from commentsync.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from commentsync.domain.ports import ChangeSink, CommentStore, ExternalRowSource
    from commentsync.domain.reconciliation import ReconciliationOptions, ReconciliationResult


log = getLogger(__name__)


def reconcile_ballot(
    *,
    store: CommentStore,
    row_source: ExternalRowSource,
    grouping_key: str | None,
    options: ReconciliationOptions,
    sink: ChangeSink | None = None,
    engine: ReconciliationEngine | None = None,
) -> ReconciliationResult:
    """Reconcile a re-imported spreadsheet with the stored records of one ballot.

    Changes are handed to ``sink`` only when there are any and the merge policy
    did not refuse the run.
    """

    effective_engine = engine or ReconciliationEngine()
    log.info(
        "Starting re-import for %s: strategy=%s, policy=%s, categories=%s",
        grouping_key,
        options.strategy.value,
        options.policy.value,
        sorted(category.value for category in options.categories),
    )

    records = store.records_for(grouping_key)
    rows = row_source.rows()
    result = effective_engine.reconcile(records, rows, options)

    if sink is None:
        log.info("No change sink configured; %s updates not applied", result.report.updated)
    elif result.report.aborted:
        log.warning(
            "Not applying changes: %s records unmatched",
            len(result.report.unmatched),
        )
    elif result.changes.is_empty:
        log.info("Nothing to apply")
    else:
        sink.apply(result.changes)

    return result
