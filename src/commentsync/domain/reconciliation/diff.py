"""Field-level changes implied by a matched record/row pair.

Only the categories the caller selected are inspected. A field is reported
only when its value derived from the row differs from the record's value;
``None`` and ``""`` count as the same value, and a missing cell is read as an
empty string rather than "leave unchanged".
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from commentsync.domain.model import EditStatus

from .contracts import RecordField, UpdateCategory
from .disposition import parse_disposition
from .values import parse_decimal_or_zero, parse_sequence_number, text

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Mapping

    from commentsync.domain.model import CanonicalRecord, ExternalRow

    from .contracts import FieldChanges

type Derived = Iterable[tuple[RecordField, object]]
type DeriveFields = Callable[[ExternalRow], Derived]


def _derive_identity(row: ExternalRow) -> Derived:
    sequence_number = parse_sequence_number(row.cid)
    if sequence_number is not None:
        yield RecordField.SEQUENCE_NUMBER, sequence_number


def _derive_placement(row: ExternalRow) -> Derived:
    yield RecordField.CLAUSE, text(row.clause)
    yield RecordField.PAGE, parse_decimal_or_zero(row.page)


def _derive_triage_group(row: ExternalRow) -> Derived:
    yield RecordField.COMMENT_GROUP, text(row.comment_group)


def _derive_ad_hoc_owner(row: ExternalRow) -> Derived:
    yield RecordField.AD_HOC, text(row.ad_hoc)


def _derive_notes(row: ExternalRow) -> Derived:
    yield RecordField.NOTES, text(row.ad_hoc_notes)


def _derive_assignee(row: ExternalRow) -> Derived:
    yield RecordField.ASSIGNEE_NAME, text(row.assignee)


def _derive_disposition(row: ExternalRow) -> Derived:
    disposition = parse_disposition(row.resolution, status_column=row.resolution_status)
    yield RecordField.RESOLUTION_STATUS, disposition.status
    yield RecordField.RESOLUTION, disposition.body
    yield RecordField.APPROVED_BY_MOTION, text(row.motion_number)


def _derive_editorial(row: ExternalRow) -> Derived:
    yield RecordField.EDIT_STATUS, EditStatus.from_code(row.edit_status)
    yield RecordField.EDIT_NOTES, text(row.edit_notes)
    yield RecordField.EDITED_IN_DRAFT, text(row.edited_in_draft)


_DERIVATIONS: dict[UpdateCategory, DeriveFields] = {
    UpdateCategory.IDENTITY: _derive_identity,
    UpdateCategory.PLACEMENT_AND_CONTENT: _derive_placement,
    UpdateCategory.TRIAGE_GROUP: _derive_triage_group,
    UpdateCategory.AD_HOC_OWNER: _derive_ad_hoc_owner,
    UpdateCategory.NOTES: _derive_notes,
    UpdateCategory.ASSIGNEE: _derive_assignee,
    UpdateCategory.DISPOSITION: _derive_disposition,
    UpdateCategory.EDITORIAL: _derive_editorial,
}


def _normalized(value: object) -> object:
    return "" if value is None else value


def _current_value(record: CanonicalRecord | None, name: RecordField) -> object:
    if record is None:
        return None
    return getattr(record, name.value)


def diff_fields(
    record: CanonicalRecord | None,
    row: ExternalRow,
    categories: Collection[UpdateCategory],
) -> FieldChanges:
    """Return the sparse change map for ``record`` (``None`` means an empty baseline)."""

    changes: FieldChanges = {}
    for category in UpdateCategory:
        if category not in categories:
            continue
        for name, value in _DERIVATIONS[category](row):
            if _normalized(_current_value(record, name)) != _normalized(value):
                changes[name] = value

    # The legacy sheet only knows assignee names, so a new name drops the stored id.
    if RecordField.ASSIGNEE_NAME in changes:
        changes[RecordField.ASSIGNEE_ID] = None
    return changes


def derive_new_record(row: ExternalRow, categories: Collection[UpdateCategory]) -> FieldChanges:
    """Build the payload for a new canonical record seeded from ``row``.

    The CID becomes the sequence number directly, so ``identity`` is not
    re-derived; placement is always taken from the row.
    """

    effective = {category for category in categories if category is not UpdateCategory.IDENTITY}
    effective.add(UpdateCategory.PLACEMENT_AND_CONTENT)

    payload: FieldChanges = {
        RecordField.SEQUENCE_NUMBER: parse_sequence_number(row.cid),
        RecordField.COMMENTER_NAME: text(row.commenter),
        RecordField.CATEGORY: text(row.category),
        RecordField.C_CLAUSE: text(row.clause),
        RecordField.C_PAGE: text(row.page),
        RecordField.C_LINE: text(row.line),
        RecordField.COMMENT: text(row.comment),
        RecordField.PROPOSED_CHANGE: text(row.proposed_change),
    }
    payload.update(diff_fields(None, row, effective))
    return payload


def apply_changes(
    record: CanonicalRecord,
    changes: Mapping[RecordField, object],
) -> CanonicalRecord:
    """Return a copy of ``record`` with ``changes`` applied (the record itself is untouched)."""

    updates = {name.value: value for name, value in changes.items()}
    return replace(record, **updates)  # type: ignore[arg-type]
