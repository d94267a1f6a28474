"""Pydantic model of one row exported from the legacy spreadsheet worksheet."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class LegacySheetBaseModel(BaseModel):
    # Unknown headers mean the worksheet does not follow the legacy layout.
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


class LegacySheetRow(LegacySheetBaseModel):
    cid: str | None = Field(default=None, alias="CID")
    commenter: str | None = Field(default=None, alias="Commenter")
    clause: str | None = Field(default=None, alias="Clause Number(C)")
    page: str | None = Field(default=None, alias="Page(C)")
    line: str | None = Field(default=None, alias="Line(C)")
    category: str | None = Field(default=None, alias="Type of Comment")
    comment: str | None = Field(default=None, alias="Comment")
    proposed_change: str | None = Field(default=None, alias="Proposed Change")
    resolution: str | None = Field(default=None, alias="Resolution")
    resolution_status: str | None = Field(default=None, alias="Resn Status")
    motion_number: str | None = Field(default=None, alias="Motion Number")
    assignee: str | None = Field(default=None, alias="Assignee")
    comment_group: str | None = Field(default=None, alias="Comment Group")
    ad_hoc: str | None = Field(default=None, alias="Owning Ad-hoc")
    ad_hoc_notes: str | None = Field(default=None, alias="Ad-hoc Notes")
    edit_status: str | None = Field(default=None, alias="Edit Status")
    edit_notes: str | None = Field(default=None, alias="Edit Notes")
    edited_in_draft: str | None = Field(default=None, alias="Edited in Draft")

    # Status columns are read by their first letter; blank cells carry no status.
    _normalize_codes = field_validator("resolution_status", "edit_status", mode="before")(
        _blank_to_none
    )


LegacySheetRowInput = LegacySheetRow | Mapping[str, object]
