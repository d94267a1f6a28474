"""Factories and in-memory fakes for reconciliation tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commentsync.domain.model import CanonicalRecord, ExternalRow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commentsync.domain.reconciliation import ChangeSet


def make_record(sequence_number: int = 1, **overrides: object) -> CanonicalRecord:
    """Create a canonical record whose placement matches ``make_row`` defaults."""

    values: dict[str, object] = {
        "record_id": 1000 + sequence_number,
        "sequence_number": sequence_number,
        "index": sequence_number,
        "category": "T",
        "c_clause": "6.3.1",
        "c_page": "42",
        "c_line": "5",
        "comment": f"Comment {sequence_number}",
        "proposed_change": f"Change {sequence_number}",
        "commenter_name": "Jane Reviewer",
    }
    values.update(overrides)
    return CanonicalRecord(**values)  # type: ignore[arg-type]


def make_row(cid: str | None = "1", **overrides: str | None) -> ExternalRow:
    """Create a spreadsheet row; ``comment``/``proposed_change`` follow the CID."""

    label = cid or ""
    values: dict[str, str | None] = {
        "cid": cid,
        "commenter": "Jane Reviewer",
        "category": "T",
        "clause": "6.3.1",
        "page": "42",
        "line": "5",
        "comment": f"Comment {label}",
        "proposed_change": f"Change {label}",
    }
    values.update(overrides)
    return ExternalRow(**values)


def row_for(record: CanonicalRecord, **overrides: str | None) -> ExternalRow:
    """Spreadsheet row exported unchanged from ``record``."""

    values: dict[str, str | None] = {
        "cid": record.cid,
        "commenter": record.commenter_name,
        "category": record.category,
        "clause": record.c_clause,
        "page": record.c_page,
        "line": record.c_line,
        "comment": record.comment,
        "proposed_change": record.proposed_change,
    }
    values.update(overrides)
    return ExternalRow(**values)


class FakeCommentStore:
    """In-memory implementation of the comment store port."""

    def __init__(self, records: Sequence[CanonicalRecord]) -> None:
        self._records = list(records)
        self.requested: list[str | None] = []

    def records_for(self, grouping_key: str | None) -> list[CanonicalRecord]:
        self.requested.append(grouping_key)
        return list(self._records)


class FakeRowSource:
    """In-memory implementation of the external row source port."""

    def __init__(self, rows: Sequence[ExternalRow]) -> None:
        self._rows = list(rows)

    def rows(self) -> list[ExternalRow]:
        return list(self._rows)


class RecordingChangeSink:
    """Change sink that remembers every change set it was given."""

    def __init__(self) -> None:
        self.applied: list[ChangeSet] = []

    def apply(self, changes: ChangeSet) -> None:
        self.applied.append(changes)
