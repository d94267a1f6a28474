"""Resolution text that carries its own status keyword.

Reviewers editing the legacy spreadsheet often type the status into the
resolution body ("ACCEPTED - fix typo") instead of the status column. A
leading keyword wins over the column; it is removed from the body together
with any ``:``/``-``/whitespace that follows it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from commentsync.domain.model import ResolutionStatus

STATUS_KEYWORDS: Final[tuple[tuple[str, ResolutionStatus], ...]] = (
    ("ACCEPTED", ResolutionStatus.ACCEPTED),
    ("ACCEPT", ResolutionStatus.ACCEPTED),
    ("REVISED", ResolutionStatus.REVISED),
    ("REVISE", ResolutionStatus.REVISED),
    ("REJECTED", ResolutionStatus.REJECTED),
    ("REJECT", ResolutionStatus.REJECTED),
)

_STATUS_BY_KEYWORD: Final[dict[str, ResolutionStatus]] = dict(STATUS_KEYWORDS)
_KEYWORD_RE = re.compile(
    r"^\s*(?P<keyword>" + "|".join(keyword for keyword, _ in STATUS_KEYWORDS) + r")\b[:\-\s]*",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class Disposition:
    """Status and body split out of one resolution cell."""

    status: ResolutionStatus | None
    body: str
    keyword: str | None = None


def parse_disposition(resolution: str | None, *, status_column: str | None = None) -> Disposition:
    """Split ``resolution`` into status and body.

    Without a leading keyword the status comes from ``status_column`` (first
    letter ``A``/``V``/``J``) and the body is only trimmed.
    """

    value = resolution or ""
    match = _KEYWORD_RE.match(value)
    if match is None:
        return Disposition(status=ResolutionStatus.from_code(status_column), body=value.strip())

    keyword = match.group("keyword").upper()
    return Disposition(
        status=_STATUS_BY_KEYWORD[keyword],
        body=value[match.end() :].strip(),
        keyword=keyword,
    )
