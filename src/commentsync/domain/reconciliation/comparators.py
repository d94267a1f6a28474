"""Corruption-tolerant field comparisons between records and spreadsheet rows.

The legacy spreadsheet tool damages data in a few predictable ways:

- clause numbers lose trailing zeros and are cut at a fixed width
- page and line numbers are stored as integers only
- non-numeric page/line input is passed through untouched
- comment text is stored after one UTF-8 -> Latin-1 round trip, and some
  characters come back as ``+``, ``-`` or box-drawing glyphs

Each comparison below accepts the corrupted form as equal. A chain is an
ordered, indexable tuple of comparisons; rotating it only reorders the tuple.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Final

from .values import is_numeric, parse_leading_float, parse_leading_int, round_half_up, text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from commentsync.domain.model import CanonicalRecord, ExternalRow

type Comparator = Callable[[CanonicalRecord, ExternalRow], bool]

DEFAULT_CLAUSE_TRUNCATION_LENGTH: Final[int] = 50

# Leading quote (Excel text marker), anything outside printable ASCII, and the
# substitutes mis-encoding leaves behind. Spaces go too: line breaks may come
# back as spaces.
_LEGACY_NOISE_RE = re.compile(r"^'|[^\x20-\x7f]|\+|-| ", re.MULTILINE)


def match_clause(
    canonical: str,
    external: str,
    *,
    truncation_length: int = DEFAULT_CLAUSE_TRUNCATION_LENGTH,
) -> bool:
    if canonical == external:
        return True
    if canonical.rstrip("0") == external:
        return True
    return len(external) >= truncation_length and canonical[: len(external)] == external


def match_page_line(canonical: str, external: str) -> bool:
    if canonical == external:
        return True
    canonical_number = parse_leading_float(canonical)
    external_number = parse_leading_int(external)
    if canonical_number is not None and external_number is not None:
        if round_half_up(canonical_number) == external_number:
            return True
    return not is_numeric(canonical)


def garble(value: str) -> str:
    """Reproduce one UTF-8 bytes -> Latin-1 text round trip."""

    return value.encode("utf-8").decode("latin-1")


def strip_legacy_noise(value: str) -> str:
    return _LEGACY_NOISE_RE.sub("", value)


def match_text(canonical: str, external: str) -> bool:
    if canonical == external:
        return True
    return strip_legacy_noise(garble(canonical)) == strip_legacy_noise(external)


def _category(record: CanonicalRecord, row: ExternalRow) -> bool:
    return record.category == text(row.category)


def _clause(record: CanonicalRecord, row: ExternalRow, *, truncation_length: int) -> bool:
    return match_clause(record.c_clause, text(row.clause), truncation_length=truncation_length)


def _page(record: CanonicalRecord, row: ExternalRow) -> bool:
    return match_page_line(record.c_page, text(row.page))


def _line(record: CanonicalRecord, row: ExternalRow) -> bool:
    return match_page_line(record.c_line, text(row.line))


def _comment(record: CanonicalRecord, row: ExternalRow) -> bool:
    return match_text(record.comment, text(row.comment))


def _proposed_change(record: CanonicalRecord, row: ExternalRow) -> bool:
    return match_text(record.proposed_change, text(row.proposed_change))


@dataclass(frozen=True, slots=True)
class FieldComparison:
    """A named, stateless predicate over one record/row pair."""

    name: str
    compare: Comparator

    def __call__(self, record: CanonicalRecord, row: ExternalRow) -> bool:
        return self.compare(record, row)


@dataclass(frozen=True, slots=True)
class ComparatorChain:
    """Ordered comparisons applied by the matchers."""

    comparisons: tuple[FieldComparison, ...]

    def __post_init__(self) -> None:
        if not self.comparisons:
            raise ValueError("Comparator chain must include at least one comparison")

    def __len__(self) -> int:
        return len(self.comparisons)

    def __iter__(self) -> Iterator[FieldComparison]:
        return iter(self.comparisons)

    def __getitem__(self, position: int) -> FieldComparison:
        return self.comparisons[position]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(comparison.name for comparison in self.comparisons)

    def rotated(self, steps: int) -> ComparatorChain:
        """Return the chain with its first ``steps`` comparisons moved to the end."""

        offset = steps % len(self.comparisons)
        return ComparatorChain(self.comparisons[offset:] + self.comparisons[:offset])

    def all_match(self, record: CanonicalRecord, row: ExternalRow) -> bool:
        return all(comparison(record, row) for comparison in self.comparisons)

    def mismatches(self, record: CanonicalRecord, row: ExternalRow) -> tuple[str, ...]:
        return tuple(
            comparison.name for comparison in self.comparisons if not comparison(record, row)
        )


def default_comparator_chain(
    *,
    clause_truncation_length: int = DEFAULT_CLAUSE_TRUNCATION_LENGTH,
) -> ComparatorChain:
    """Placement first, free text last: text columns are the most likely to be edited."""

    return ComparatorChain(
        (
            FieldComparison("category", _category),
            FieldComparison(
                "clause",
                partial(_clause, truncation_length=clause_truncation_length),
            ),
            FieldComparison("page", _page),
            FieldComparison("line", _line),
            FieldComparison("comment", _comment),
            FieldComparison("proposed_change", _proposed_change),
        )
    )
