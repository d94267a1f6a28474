from __future__ import annotations

import pytest

from commentsync.domain.model import ResolutionStatus
from commentsync.domain.reconciliation import parse_disposition


def test_keyword_sets_status_and_is_stripped_from_body() -> None:
    disposition = parse_disposition("ACCEPTED - fix typo")

    assert disposition.status is ResolutionStatus.ACCEPTED
    assert disposition.body == "fix typo"
    assert disposition.keyword == "ACCEPTED"


@pytest.mark.parametrize(
    ("resolution", "status", "body"),
    [
        ("Accept: as proposed", ResolutionStatus.ACCEPTED, "as proposed"),
        ("  revised -- see new text", ResolutionStatus.REVISED, "see new text"),
        ("REVISE.", ResolutionStatus.REVISED, "."),
        ("Rejected", ResolutionStatus.REJECTED, ""),
        ("reject:\nout of scope", ResolutionStatus.REJECTED, "out of scope"),
    ],
)
def test_keyword_variants(resolution: str, status: ResolutionStatus, body: str) -> None:
    disposition = parse_disposition(resolution, status_column="J")

    assert disposition.status is status
    assert disposition.body == body


def test_keyword_wins_over_status_column() -> None:
    disposition = parse_disposition("REJECTED - duplicate", status_column="A")

    assert disposition.status is ResolutionStatus.REJECTED


def test_status_column_is_used_without_keyword() -> None:
    disposition = parse_disposition("  Change the figure caption  ", status_column="v")

    assert disposition.status is ResolutionStatus.REVISED
    assert disposition.body == "Change the figure caption"
    assert disposition.keyword is None


def test_word_prefix_is_not_a_keyword() -> None:
    disposition = parse_disposition("Acceptable as is", status_column="V")

    assert disposition.status is ResolutionStatus.REVISED
    assert disposition.body == "Acceptable as is"


@pytest.mark.parametrize("status_column", [None, "", "X", "  "])
def test_unknown_status_column_means_no_status(status_column: str | None) -> None:
    disposition = parse_disposition(None, status_column=status_column)

    assert disposition.status is None
    assert disposition.body == ""
