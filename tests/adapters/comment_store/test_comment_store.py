from __future__ import annotations

import json
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

import pytest

from commentsync.adapters.comment_store import (
    CommentStoreError,
    JsonChangeWriter,
    JsonCommentStore,
    parse_canonical_record,
)
from commentsync.domain.model import EditStatus, ResolutionStatus
from commentsync.domain.reconciliation import ChangeSet, NewRecord, RecordChanges, RecordField

if TYPE_CHECKING:
    from pathlib import Path

RESOLUTION_ID = "7f0c7a4e-7c1b-4c36-9a53-8d3f8f0b2a11"

STORED_RECORD: dict[str, object] = {
    "id": 501,
    "CommentID": 12,
    "resolution_id": RESOLUTION_ID,
    "resolution_ordinal": 1,
    "index": 3,
    "category": "T",
    "c_clause": "6.3.1.10",
    "c_page": 42.0,
    "c_line": "5",
    "page": "42.5",
    "comment": "Fix the typo",
    "notes": None,
    "resolution_status": "Accepted",
    "edit_status": "I",
    "unused_column": "ignored",
}


def test_parse_canonical_record() -> None:
    record = parse_canonical_record(STORED_RECORD)

    assert record.record_id == 501
    assert record.sequence_number == 12
    assert record.cid == "12.1"
    assert record.resolution_id == UUID(RESOLUTION_ID)
    assert record.c_page == "42.0"
    assert record.page == Decimal("42.5")
    assert record.notes == ""
    assert record.resolution_status is ResolutionStatus.ACCEPTED
    assert record.edit_status is EditStatus.IMPLEMENTED


def test_blank_page_and_unknown_status_default() -> None:
    record = parse_canonical_record(
        {"id": 1, "CommentID": 1, "page": "", "resolution_status": "?"}
    )

    assert record.page == Decimal(0)
    assert record.resolution_status is None


def test_store_reads_single_ballot_array(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps([STORED_RECORD]), encoding="utf-8")

    records = JsonCommentStore(path).records_for(None)

    assert [record.cid for record in records] == ["12.1"]


def test_store_reads_keyed_export(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"LB-101": [STORED_RECORD], "LB-102": []}), encoding="utf-8")

    store = JsonCommentStore(path)

    assert len(store.records_for("LB-101")) == 1
    assert store.records_for("LB-102") == []
    with pytest.raises(CommentStoreError) as excinfo:
        store.records_for("LB-999")
    assert excinfo.value.grouping_key == "LB-999"


def test_change_writer_writes_change_set(tmp_path: Path) -> None:
    path = tmp_path / "changes.json"
    changes = ChangeSet(
        updates=(
            RecordChanges(
                record_id=501,
                cid="12.1",
                resolution_id=UUID(RESOLUTION_ID),
                fields={
                    RecordField.RESOLUTION_STATUS: ResolutionStatus.REVISED,
                    RecordField.PAGE: Decimal("7.5"),
                },
            ),
        ),
        inserts=(NewRecord(source_cid="13", fields={RecordField.SEQUENCE_NUMBER: 13}),),
    )

    JsonChangeWriter(path).apply(changes)

    written = json.loads(path.read_text(encoding="utf-8"))
    assert written == {
        "updates": [
            {
                "record_id": 501,
                "cid": "12.1",
                "resolution_id": RESOLUTION_ID,
                "fields": {"resolution_status": "V", "page": "7.5"},
            }
        ],
        "inserts": [{"source_cid": "13", "fields": {"sequence_number": 13}}],
    }
