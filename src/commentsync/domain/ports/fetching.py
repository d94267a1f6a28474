"""Ports for reading re-imported spreadsheet rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commentsync.domain.model import ExternalRow


@runtime_checkable
class ExternalRowSource(Protocol):
    """Rows parsed from the legacy spreadsheet's comment worksheet.

    Header mismatches against the legacy column vocabulary are the source's
    problem and must be raised here, before reconciliation starts.
    """

    def rows(self) -> Sequence[ExternalRow]: ...


__all__ = ["ExternalRowSource"]
