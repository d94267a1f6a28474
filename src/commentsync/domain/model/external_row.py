"""Closed record type for one row of the re-imported legacy spreadsheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

LEGACY_COLUMNS: Final[dict[str, str]] = {
    "CID": "cid",
    "Commenter": "commenter",
    "Clause Number(C)": "clause",
    "Page(C)": "page",
    "Line(C)": "line",
    "Type of Comment": "category",
    "Comment": "comment",
    "Proposed Change": "proposed_change",
    "Resolution": "resolution",
    "Resn Status": "resolution_status",
    "Motion Number": "motion_number",
    "Assignee": "assignee",
    "Comment Group": "comment_group",
    "Owning Ad-hoc": "ad_hoc",
    "Ad-hoc Notes": "ad_hoc_notes",
    "Edit Status": "edit_status",
    "Edit Notes": "edit_notes",
    "Edited in Draft": "edited_in_draft",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalRow:
    """One parsed spreadsheet row; ``None`` means the cell was absent."""

    cid: str | None = None
    commenter: str | None = None
    clause: str | None = None
    page: str | None = None
    line: str | None = None
    category: str | None = None
    comment: str | None = None
    proposed_change: str | None = None
    resolution: str | None = None
    resolution_status: str | None = None
    motion_number: str | None = None
    assignee: str | None = None
    comment_group: str | None = None
    ad_hoc: str | None = None
    ad_hoc_notes: str | None = None
    edit_status: str | None = None
    edit_notes: str | None = None
    edited_in_draft: str | None = None

    @property
    def label(self) -> str:
        """CID as shown in reports; blank CIDs are reported as an empty string."""

        return (self.cid or "").strip()
