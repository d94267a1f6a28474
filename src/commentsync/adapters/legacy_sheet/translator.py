"""Translate validated spreadsheet rows into domain ``ExternalRow`` values."""

from __future__ import annotations

from commentsync.domain.model import ExternalRow

from .schema import LegacySheetRow, LegacySheetRowInput


def _ensure_sheet_row(row: LegacySheetRowInput) -> LegacySheetRow:
    if isinstance(row, LegacySheetRow):
        return row
    return LegacySheetRow.model_validate(row)


def parse_external_row(row: LegacySheetRowInput) -> ExternalRow:
    payload = _ensure_sheet_row(row)
    return ExternalRow(**payload.model_dump(by_alias=False))
