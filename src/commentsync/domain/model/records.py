"""Canonical comment/resolution records.

A canonical record is one comment joined with at most one of its resolutions.
Comments with several resolutions appear once per resolution and are told
apart by ``resolution_ordinal`` (the ``.n`` suffix of the CID).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from .enums import EditStatus, ResolutionStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class CanonicalRecord:
    """Read-only snapshot of a stored comment and (optionally) one resolution.

    Commenter-supplied placement (``c_clause``, ``c_page``, ``c_line``) is kept as
    the text the commenter wrote; the editor-assigned ``clause`` and ``page`` are
    what re-imports update.
    """

    record_id: int
    sequence_number: int
    resolution_id: UUID | None = None
    resolution_ordinal: int | None = None
    index: int = 0

    # placement
    category: str = ""
    c_clause: str = ""
    c_page: str = ""
    c_line: str = ""
    clause: str = ""
    page: Decimal = Decimal(0)

    # content
    commenter_name: str = ""
    comment: str = ""
    proposed_change: str = ""

    # triage
    comment_group: str = ""
    ad_hoc: str = ""
    notes: str = ""

    # disposition
    assignee_name: str = ""
    assignee_id: int | None = None
    resolution_status: ResolutionStatus | None = None
    resolution: str = ""
    approved_by_motion: str = ""

    # editorial
    edit_status: EditStatus | None = None
    edit_notes: str = ""
    edited_in_draft: str = ""

    @property
    def cid(self) -> str:
        """Externally visible identifier, e.g. ``"112"`` or ``"112.2"``."""

        if self.resolution_ordinal is None:
            return str(self.sequence_number)
        return f"{self.sequence_number}.{self.resolution_ordinal}"
