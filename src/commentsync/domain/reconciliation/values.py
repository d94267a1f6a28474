"""Lenient parsing of spreadsheet cell text.

The legacy tool hands back whatever text the cell holds. Every helper here
returns ``None`` (or zero) for unparsable input instead of raising, so one bad
cell never aborts a run.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_LEADING_FLOAT_RE = re.compile(rf"\s*({_NUMBER})")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_NUMERIC_RE = re.compile(rf"\s*{_NUMBER}\s*")


def text(value: str | None) -> str:
    return value if value is not None else ""


def parse_leading_float(value: str | None) -> float | None:
    """Parse the numeric prefix of ``value`` (``"42.5 approx"`` -> ``42.5``)."""

    if value is None:
        return None
    match = _LEADING_FLOAT_RE.match(value)
    if match is None:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def parse_leading_int(value: str | None) -> int | None:
    """Parse the integer prefix of ``value`` (``"12.1"`` -> ``12``)."""

    if value is None:
        return None
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return None
    return int(match.group(1))


def is_numeric(value: str) -> bool:
    """Return whether the whole value reads as a number; blank counts as zero."""

    if not value.strip():
        return True
    return _NUMERIC_RE.fullmatch(value) is not None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_sequence_number(cid: str | None) -> int | None:
    """Comment sequence number carried in a CID cell; ``"12.1"`` belongs to 12."""

    return parse_leading_int(cid)


def parse_decimal_or_zero(value: str | None) -> Decimal:
    if value is None:
        return Decimal(0)
    match = _LEADING_FLOAT_RE.match(value)
    if match is None:
        return Decimal(0)
    try:
        number = Decimal(match.group(1))
    except InvalidOperation:
        return Decimal(0)
    return number if number.is_finite() else Decimal(0)
