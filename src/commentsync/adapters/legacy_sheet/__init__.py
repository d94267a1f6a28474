"""Public interface for the legacy spreadsheet row adapter."""

from __future__ import annotations

from .reader import JsonRowSource, RowParseError
from .schema import LegacySheetRow, LegacySheetRowInput
from .translator import parse_external_row

__all__ = [
    "JsonRowSource",
    "LegacySheetRow",
    "LegacySheetRowInput",
    "RowParseError",
    "parse_external_row",
]
