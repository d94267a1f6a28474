"""Ports for loading canonical records and writing change sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commentsync.domain.model import CanonicalRecord
    from commentsync.domain.reconciliation.contracts import ChangeSet


@runtime_checkable
class CommentStore(Protocol):
    """Read access to the canonical comment/resolution records."""

    def records_for(self, grouping_key: str | None) -> Sequence[CanonicalRecord]: ...


@runtime_checkable
class ChangeSink(Protocol):
    """Applies computed changes as update-by-id or insert operations."""

    def apply(self, changes: ChangeSet) -> None: ...


__all__ = ["ChangeSink", "CommentStore"]
