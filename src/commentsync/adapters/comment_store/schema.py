"""Pydantic models for the JSON export of stored comments and resolutions."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from commentsync.domain.model import EditStatus, ResolutionStatus


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


class CommentStoreBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class CommentRecordPayload(CommentStoreBaseModel):
    record_id: int = Field(alias="id")
    sequence_number: int = Field(alias="CommentID")
    resolution_id: UUID | None = None
    resolution_ordinal: int | None = None
    index: int = 0

    category: str = ""
    c_clause: str = ""
    c_page: str = ""
    c_line: str = ""
    clause: str = ""
    page: Decimal = Decimal(0)

    commenter_name: str = ""
    comment: str = ""
    proposed_change: str = ""

    comment_group: str = ""
    ad_hoc: str = ""
    notes: str = ""

    assignee_name: str = ""
    assignee_id: int | None = None
    resolution_status: ResolutionStatus | None = None
    resolution: str = ""
    approved_by_motion: str = ""

    edit_status: EditStatus | None = None
    edit_notes: str = ""
    edited_in_draft: str = ""

    _blank_text = field_validator(
        "category",
        "c_clause",
        "c_page",
        "c_line",
        "clause",
        "commenter_name",
        "comment",
        "proposed_change",
        "comment_group",
        "ad_hoc",
        "notes",
        "assignee_name",
        "resolution",
        "approved_by_motion",
        "edit_notes",
        "edited_in_draft",
        mode="before",
    )(_none_to_blank)

    @field_validator("page", mode="before")
    @classmethod
    def _page_or_zero(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return Decimal(0)
        return value

    @field_validator("resolution_status", mode="before")
    @classmethod
    def _parse_resolution_status(cls, value: object) -> object:
        if isinstance(value, str):
            return ResolutionStatus.from_code(value)
        return value

    @field_validator("edit_status", mode="before")
    @classmethod
    def _parse_edit_status(cls, value: object) -> object:
        if isinstance(value, str):
            return EditStatus.from_code(value)
        return value


CommentRecordInput = CommentRecordPayload | Mapping[str, object]
