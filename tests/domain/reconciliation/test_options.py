from __future__ import annotations

import pytest

from commentsync.domain.reconciliation import (
    InvalidConfigurationError,
    MatchStrategy,
    MergePolicy,
    ReconciliationOptions,
    UpdateCategory,
)


def test_parse_canonical_tokens() -> None:
    options = ReconciliationOptions.parse(
        categories=["identity", "placementAndContent", "notes"],
        policy="InsertUnmatchedOnly",
        strategy="Perfect",
    )

    assert options.categories == {
        UpdateCategory.IDENTITY,
        UpdateCategory.PLACEMENT_AND_CONTENT,
        UpdateCategory.NOTES,
    }
    assert options.policy is MergePolicy.INSERT_UNMATCHED_ONLY
    assert options.strategy is MatchStrategy.PERFECT


def test_parse_legacy_tokens() -> None:
    options = ReconciliationOptions.parse(
        categories=["cid", "clausepage", "adhoc", "resolution", "editing"],
        policy="any",
        strategy="comment",
    )

    assert options.categories == {
        UpdateCategory.IDENTITY,
        UpdateCategory.PLACEMENT_AND_CONTENT,
        UpdateCategory.TRIAGE_GROUP,
        UpdateCategory.AD_HOC_OWNER,
        UpdateCategory.NOTES,
        UpdateCategory.DISPOSITION,
        UpdateCategory.EDITORIAL,
    }
    assert options.policy is MergePolicy.APPLY_PARTIAL
    assert options.strategy is MatchStrategy.PERFECT


def test_defaults_are_total_match_by_elimination() -> None:
    options = ReconciliationOptions.parse()

    assert options.categories == frozenset()
    assert options.policy is MergePolicy.REQUIRE_TOTAL_MATCH
    assert options.strategy is MatchStrategy.BY_ELIMINATION


def test_blank_category_tokens_are_ignored() -> None:
    options = ReconciliationOptions.parse(categories=[" notes ", ""])

    assert options.categories == {UpdateCategory.NOTES}


@pytest.mark.parametrize(
    ("kwargs", "option", "value"),
    [
        ({"categories": ["notes", "colour"]}, "update category", "colour"),
        ({"policy": "Sometimes"}, "merge policy", "Sometimes"),
        ({"strategy": "ByGuessing"}, "match strategy", "ByGuessing"),
    ],
)
def test_unknown_tokens_are_rejected(kwargs: dict[str, object], option: str, value: str) -> None:
    with pytest.raises(InvalidConfigurationError) as excinfo:
        ReconciliationOptions.parse(**kwargs)  # type: ignore[arg-type]

    assert excinfo.value.option == option
    assert excinfo.value.value == value
    assert value in str(excinfo.value)


@pytest.mark.parametrize(
    ("policy", "strategy"),
    [("ApplyPartial", "ByElimination"), ("any", "elimination")],
)
def test_partial_apply_with_elimination_is_rejected(policy: str, strategy: str) -> None:
    with pytest.raises(InvalidConfigurationError, match="ByElimination"):
        ReconciliationOptions.parse(policy=policy, strategy=strategy)


def test_invalid_configuration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ReconciliationOptions(
            policy=MergePolicy.APPLY_PARTIAL,
            strategy=MatchStrategy.BY_ELIMINATION,
        )
