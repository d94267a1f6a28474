"""Shared reconciliation contract components.

This module holds the option enums, the match outcome, and the change-set
types handed to the persistence collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from commentsync.domain.model import CanonicalRecord, ExternalRow


class MatchStrategy(StrEnum):
    """How canonical records are paired with spreadsheet rows."""

    BY_IDENTITY = "ByIdentity"
    PERFECT = "Perfect"
    BY_ELIMINATION = "ByElimination"


class MergePolicy(StrEnum):
    """What to do with matched pairs and leftovers."""

    REQUIRE_TOTAL_MATCH = "RequireTotalMatch"
    APPLY_PARTIAL = "ApplyPartial"
    INSERT_UNMATCHED_ONLY = "InsertUnmatchedOnly"


class UpdateCategory(StrEnum):
    """Selectable groups of fields a re-import may change."""

    IDENTITY = "identity"
    PLACEMENT_AND_CONTENT = "placementAndContent"
    TRIAGE_GROUP = "triageGroup"
    AD_HOC_OWNER = "adHocOwner"
    NOTES = "notes"
    ASSIGNEE = "assignee"
    DISPOSITION = "disposition"
    EDITORIAL = "editorial"


class RecordField(StrEnum):
    """Writable canonical record fields; values are ``CanonicalRecord`` attribute names."""

    SEQUENCE_NUMBER = "sequence_number"
    COMMENTER_NAME = "commenter_name"
    CATEGORY = "category"
    C_CLAUSE = "c_clause"
    C_PAGE = "c_page"
    C_LINE = "c_line"
    COMMENT = "comment"
    PROPOSED_CHANGE = "proposed_change"
    CLAUSE = "clause"
    PAGE = "page"
    COMMENT_GROUP = "comment_group"
    AD_HOC = "ad_hoc"
    NOTES = "notes"
    ASSIGNEE_NAME = "assignee_name"
    ASSIGNEE_ID = "assignee_id"
    RESOLUTION_STATUS = "resolution_status"
    RESOLUTION = "resolution"
    APPROVED_BY_MOTION = "approved_by_motion"
    EDIT_STATUS = "edit_status"
    EDIT_NOTES = "edit_notes"
    EDITED_IN_DRAFT = "edited_in_draft"


CATEGORY_FIELDS: Final[dict[UpdateCategory, frozenset[RecordField]]] = {
    UpdateCategory.IDENTITY: frozenset({RecordField.SEQUENCE_NUMBER}),
    UpdateCategory.PLACEMENT_AND_CONTENT: frozenset({RecordField.CLAUSE, RecordField.PAGE}),
    UpdateCategory.TRIAGE_GROUP: frozenset({RecordField.COMMENT_GROUP}),
    UpdateCategory.AD_HOC_OWNER: frozenset({RecordField.AD_HOC}),
    UpdateCategory.NOTES: frozenset({RecordField.NOTES}),
    UpdateCategory.ASSIGNEE: frozenset({RecordField.ASSIGNEE_NAME, RecordField.ASSIGNEE_ID}),
    UpdateCategory.DISPOSITION: frozenset(
        {
            RecordField.RESOLUTION_STATUS,
            RecordField.RESOLUTION,
            RecordField.APPROVED_BY_MOTION,
        }
    ),
    UpdateCategory.EDITORIAL: frozenset(
        {RecordField.EDIT_STATUS, RecordField.EDIT_NOTES, RecordField.EDITED_IN_DRAFT}
    ),
}

# Fields stored on the comment itself; everything else lives on the resolution.
COMMENT_FIELDS: Final[frozenset[RecordField]] = frozenset(
    {
        RecordField.SEQUENCE_NUMBER,
        RecordField.COMMENTER_NAME,
        RecordField.CATEGORY,
        RecordField.C_CLAUSE,
        RecordField.C_PAGE,
        RecordField.C_LINE,
        RecordField.COMMENT,
        RecordField.PROPOSED_CHANGE,
        RecordField.CLAUSE,
        RecordField.PAGE,
        RecordField.COMMENT_GROUP,
        RecordField.AD_HOC,
        RecordField.NOTES,
    }
)

type FieldChanges = dict[RecordField, object]


@dataclass(frozen=True, slots=True)
class MatchedPair:
    """One canonical record paired with the spreadsheet row at ``row_position``."""

    record: CanonicalRecord
    row: ExternalRow
    row_position: int


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchOutcome:
    """Partial injection between records and rows, plus both residues."""

    pairs: tuple[MatchedPair, ...] = ()
    unmatched_records: tuple[CanonicalRecord, ...] = ()
    unmatched_rows: tuple[ExternalRow, ...] = ()
    rotation: int = 0

    @property
    def complete(self) -> bool:
        return not self.unmatched_records


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordChanges:
    """Sparse update for one existing canonical record."""

    record_id: int
    cid: str
    resolution_id: UUID | None = None
    fields: Mapping[RecordField, object] = field(default_factory=dict["RecordField", "object"])

    def comment_fields(self) -> dict[RecordField, object]:
        return {name: value for name, value in self.fields.items() if name in COMMENT_FIELDS}

    def resolution_fields(self) -> dict[RecordField, object]:
        """Resolution-side fields; with no ``resolution_id`` they seed a new resolution."""

        return {name: value for name, value in self.fields.items() if name not in COMMENT_FIELDS}


@dataclass(frozen=True, slots=True, kw_only=True)
class NewRecord:
    """Payload for a brand-new canonical record seeded from a spreadsheet row."""

    source_cid: str
    fields: Mapping[RecordField, object] = field(default_factory=dict["RecordField", "object"])


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeSet:
    """Everything the persistence collaborator has to write for one run."""

    updates: tuple[RecordChanges, ...] = ()
    inserts: tuple[NewRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.updates and not self.inserts

    def as_dict(self) -> dict[str, object]:
        return {
            "updates": [
                {
                    "record_id": update.record_id,
                    "cid": update.cid,
                    "resolution_id": str(update.resolution_id) if update.resolution_id else None,
                    "fields": _serialize_fields(update.fields),
                }
                for update in self.updates
            ],
            "inserts": [
                {"source_cid": insert.source_cid, "fields": _serialize_fields(insert.fields)}
                for insert in self.inserts
            ],
        }


def _serialize_fields(fields: Mapping[RecordField, object]) -> dict[str, object]:
    return {name.value: _serialize_value(value) for name, value in fields.items()}


def _serialize_value(value: object) -> object:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value
