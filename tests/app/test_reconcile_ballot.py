from __future__ import annotations

from commentsync.app import reconcile_ballot
from commentsync.domain.reconciliation import ReconciliationOptions, RecordField
from tests.helpers.records import (
    FakeCommentStore,
    FakeRowSource,
    RecordingChangeSink,
    make_record,
    make_row,
    row_for,
)


def test_reconcile_ballot_applies_changes_to_sink() -> None:
    record = make_record(1, notes="old")
    store = FakeCommentStore([record])
    sink = RecordingChangeSink()

    result = reconcile_ballot(
        store=store,
        row_source=FakeRowSource([row_for(record, ad_hoc_notes="new")]),
        grouping_key="LB-101",
        options=ReconciliationOptions.parse(categories=["notes"]),
        sink=sink,
    )

    assert store.requested == ["LB-101"]
    assert result.report.updated == 1
    assert sink.applied == [result.changes]
    assert sink.applied[0].updates[0].fields == {RecordField.NOTES: "new"}


def test_reconcile_ballot_does_not_apply_aborted_runs() -> None:
    records = [make_record(1, notes="old"), make_record(2)]
    rows = [
        row_for(records[0], ad_hoc_notes="new"),
        make_row("9", category="G", clause="9", page="1", line="1", comment="x"),
    ]
    sink = RecordingChangeSink()

    result = reconcile_ballot(
        store=FakeCommentStore(records),
        row_source=FakeRowSource(rows),
        grouping_key=None,
        options=ReconciliationOptions.parse(categories=["notes"]),
        sink=sink,
    )

    assert result.report.aborted
    assert sink.applied == []


def test_reconcile_ballot_skips_empty_change_sets() -> None:
    record = make_record(1)
    sink = RecordingChangeSink()

    result = reconcile_ballot(
        store=FakeCommentStore([record]),
        row_source=FakeRowSource([row_for(record)]),
        grouping_key=None,
        options=ReconciliationOptions.parse(categories=["notes"]),
        sink=sink,
    )

    assert result.changes.is_empty
    assert sink.applied == []


def test_reconcile_ballot_without_sink_returns_changes() -> None:
    record = make_record(1)

    result = reconcile_ballot(
        store=FakeCommentStore([record]),
        row_source=FakeRowSource([row_for(record, assignee="Alice")]),
        grouping_key=None,
        options=ReconciliationOptions.parse(categories=["assignee"]),
    )

    assert result.report.updated == 1
