"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ResolutionStatus(StrEnum):
    """Resolution status codes as stored on a resolution."""

    ACCEPTED = "A"
    REVISED = "V"
    REJECTED = "J"

    @classmethod
    def from_code(cls, value: str | None) -> ResolutionStatus | None:
        """Interpret a status cell by its first letter; anything else means no status."""

        if not value or not value.strip():
            return None
        code = value.strip()[0].upper()
        for status in cls:
            if status.value == code:
                return status
        return None


class EditStatus(StrEnum):
    """Editorial state of a resolution in the draft."""

    IMPLEMENTED = "I"
    NO_CHANGE = "N"

    @classmethod
    def from_code(cls, value: str | None) -> EditStatus | None:
        if not value or not value.strip():
            return None
        code = value.strip()[0].upper()
        for status in cls:
            if status.value == code:
                return status
        return None
