"""Read spreadsheet rows exported as JSON by the spreadsheet parser.

The parser writes the comment worksheet as a JSON array with one object per
row, keyed by the worksheet's header cells.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from .translator import parse_external_row

if TYPE_CHECKING:
    from collections.abc import Mapping

    from commentsync.domain.model import ExternalRow


log = logging.getLogger(__name__)


class RowParseError(ValueError):
    """Raised when a worksheet row does not follow the legacy column vocabulary."""

    def __init__(self, *, row_number: int, message: str) -> None:
        self.row_number = row_number
        super().__init__(f"Row {row_number}: {message}")


@dataclass(slots=True)
class JsonRowSource:
    """``ExternalRowSource`` backed by a JSON row export."""

    path: Path

    def rows(self) -> list[ExternalRow]:
        payload = json.loads(Path(self.path).read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            raise RowParseError(row_number=0, message="expected a JSON array of rows")
        rows = [
            _parse_row(number, item)
            for number, item in enumerate(cast(list[object], payload), start=1)
        ]
        log.info("Read %s spreadsheet rows from %s", len(rows), self.path)
        return rows


def _parse_row(number: int, item: object) -> ExternalRow:
    if not isinstance(item, dict):
        raise RowParseError(row_number=number, message="expected an object keyed by column")
    try:
        return parse_external_row(cast("Mapping[str, object]", item))
    except ValidationError as exc:
        raise RowParseError(row_number=number, message=str(exc)) from exc
