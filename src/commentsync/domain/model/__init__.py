"""Domain model for canonical records and re-imported spreadsheet rows."""

from __future__ import annotations

from .enums import EditStatus, ResolutionStatus
from .external_row import LEGACY_COLUMNS, ExternalRow
from .records import CanonicalRecord

__all__ = [
    "LEGACY_COLUMNS",
    "CanonicalRecord",
    "EditStatus",
    "ExternalRow",
    "ResolutionStatus",
]
