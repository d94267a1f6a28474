"""Pair canonical records with re-imported spreadsheet rows.

Three strategies share one contract: given records, rows and a comparator
chain, return a ``MatchOutcome`` that is a partial injection (no record and no
row appears in two pairs).

Rows are never removed from the input. Each pass keeps a boolean claim mask
indexed by row position, so both collections stay intact for auditing and
"remaining rows" is simply the unclaimed positions in input order.

Tie-break: when several rows survive the whole chain during elimination, the
row that appears first in the spreadsheet wins.
"""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .contracts import MatchedPair, MatchOutcome, MatchStrategy
from .errors import InsufficientRowsError
from .values import parse_sequence_number

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commentsync.domain.model import CanonicalRecord, ExternalRow

    from .comparators import ComparatorChain


log = logging.getLogger(__name__)


class MatchRecords(Protocol):
    """Build a correspondence between records and rows."""

    def __call__(
        self,
        records: Sequence[CanonicalRecord],
        rows: Sequence[ExternalRow],
        *,
        chain: ComparatorChain,
    ) -> MatchOutcome: ...


@dataclass(slots=True)
class _RowPool:
    """Fixed row arena with a claim mask."""

    rows: Sequence[ExternalRow]
    claimed: list[bool] = field(default_factory=list["bool"])

    def __post_init__(self) -> None:
        if not self.claimed:
            self.claimed = [False] * len(self.rows)

    def available(self) -> list[int]:
        return [position for position, taken in enumerate(self.claimed) if not taken]

    def claim(self, position: int) -> ExternalRow:
        if self.claimed[position]:
            raise ValueError(f"Row at position {position} is already claimed")
        self.claimed[position] = True
        return self.rows[position]

    def unclaimed_rows(self) -> tuple[ExternalRow, ...]:
        return tuple(self.rows[position] for position in self.available())


@dataclass(slots=True)
class _PassBuilder:
    pool: _RowPool
    pairs: list[MatchedPair] = field(default_factory=list["MatchedPair"])
    unmatched: list[CanonicalRecord] = field(default_factory=list["CanonicalRecord"])

    def pair(self, record: CanonicalRecord, position: int) -> None:
        row = self.pool.claim(position)
        self.pairs.append(MatchedPair(record=record, row=row, row_position=position))

    def miss(self, record: CanonicalRecord) -> None:
        self.unmatched.append(record)

    def outcome(self, *, rotation: int = 0) -> MatchOutcome:
        return MatchOutcome(
            pairs=tuple(self.pairs),
            unmatched_records=tuple(self.unmatched),
            unmatched_rows=self.pool.unclaimed_rows(),
            rotation=rotation,
        )


def match_by_identity(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    chain: ComparatorChain | None = None,  # noqa: ARG001
) -> MatchOutcome:
    """Pair each record with the first unclaimed row whose CID has its sequence number."""

    positions_by_sequence: defaultdict[int, deque[int]] = defaultdict(deque)
    for position, row in enumerate(rows):
        sequence_number = parse_sequence_number(row.cid)
        if sequence_number is None:
            log.warning("Row %s has no usable CID: %r", position, row.cid)
            continue
        positions_by_sequence[sequence_number].append(position)

    builder = _PassBuilder(pool=_RowPool(rows))
    for record in records:
        positions = positions_by_sequence.get(record.sequence_number)
        if positions:
            builder.pair(record, positions.popleft())
        else:
            builder.miss(record)
    return builder.outcome()


def match_perfect(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    chain: ComparatorChain,
) -> MatchOutcome:
    """Pair each record with the first unclaimed row that passes every comparison."""

    builder = _PassBuilder(pool=_RowPool(rows))
    for record in records:
        position = next(
            (
                candidate
                for candidate in builder.pool.available()
                if chain.all_match(record, rows[candidate])
            ),
            None,
        )
        if position is None:
            builder.miss(record)
        else:
            builder.pair(record, position)
    return builder.outcome()


def eliminate(
    record: CanonicalRecord,
    rows: Sequence[ExternalRow],
    candidates: Sequence[int],
    *,
    chain: ComparatorChain,
) -> int | None:
    """Narrow ``candidates`` comparison by comparison until one row position is left.

    Returns ``None`` as soon as no candidate survives. If several survive the
    whole chain the rows are indistinguishable and the first one is taken.
    """

    survivors = list(candidates)
    for comparison in chain:
        survivors = [position for position in survivors if comparison(record, rows[position])]
        if not survivors:
            return None
        if len(survivors) == 1:
            return survivors[0]
    return survivors[0] if survivors else None


def _elimination_pass(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    chain: ComparatorChain,
    rotation: int,
) -> MatchOutcome:
    builder = _PassBuilder(pool=_RowPool(rows))
    for record in records:
        position = eliminate(record, rows, builder.pool.available(), chain=chain)
        if position is None:
            builder.miss(record)
        else:
            builder.pair(record, position)
    return builder.outcome(rotation=rotation)


def match_by_elimination(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    chain: ComparatorChain,
) -> MatchOutcome:
    """Successively eliminate rows, rotating the chain until every record is matched.

    Records are processed in canonical ``index`` order. Each rotation moves the
    first comparison to the end and reruns the whole pass from scratch, because
    edited spreadsheet cells can make an early comparison reject the right row.
    When no rotation matches every record, the last rotation's outcome is
    returned with its partial pairs intact.
    """

    if len(rows) < len(records):
        raise InsufficientRowsError(external_count=len(rows), canonical_count=len(records))

    ordered = sorted(records, key=lambda record: record.index)
    if not ordered:
        return MatchOutcome(unmatched_rows=tuple(rows))

    outcome = MatchOutcome()
    for rotation in range(len(chain)):
        outcome = _elimination_pass(
            ordered,
            rows,
            chain=chain.rotated(rotation),
            rotation=rotation,
        )
        log.debug(
            "Elimination rotation %s: matched=%s unmatched=%s",
            rotation,
            len(outcome.pairs),
            len(outcome.unmatched_records),
        )
        if outcome.complete:
            return outcome
    return outcome


def find_match_by_elimination(
    record: CanonicalRecord,
    rows: Sequence[ExternalRow],
    *,
    chain: ComparatorChain,
) -> tuple[int, int] | None:
    """Find a row for a single record, trying every chain rotation in turn.

    Returns ``(row_position, rotation)`` or ``None``.
    """

    candidates = range(len(rows))
    for rotation in range(len(chain)):
        position = eliminate(record, rows, candidates, chain=chain.rotated(rotation))
        if position is not None:
            return position, rotation
    return None


MATCHERS: dict[MatchStrategy, MatchRecords] = {
    MatchStrategy.BY_IDENTITY: match_by_identity,
    MatchStrategy.PERFECT: match_perfect,
    MatchStrategy.BY_ELIMINATION: match_by_elimination,
}


def match_records(
    records: Sequence[CanonicalRecord],
    rows: Sequence[ExternalRow],
    *,
    strategy: MatchStrategy,
    chain: ComparatorChain,
) -> MatchOutcome:
    return MATCHERS[strategy](records, rows, chain=chain)
