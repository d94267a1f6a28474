"""Errors raised before any matching work starts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ReconciliationError(Exception):
    """Base class for reconciliation failures surfaced to callers."""


class InvalidConfigurationError(ReconciliationError, ValueError):
    """Raised for unknown option tokens or unsupported option combinations."""

    def __init__(
        self,
        *,
        option: str,
        value: object,
        allowed: Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.option = option
        self.value = value
        self.allowed = tuple(allowed)
        message = f"Invalid {option}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        if self.allowed:
            message = f"{message}; expected one of {', '.join(self.allowed)}"
        super().__init__(message)


class InsufficientRowsError(ReconciliationError):
    """Raised when elimination matching has fewer external rows than records."""

    def __init__(self, *, external_count: int, canonical_count: int) -> None:
        self.external_count = external_count
        self.canonical_count = canonical_count
        super().__init__(
            f"Spreadsheet has {external_count} rows; less than the number of "
            f"canonical records, {canonical_count}"
        )
