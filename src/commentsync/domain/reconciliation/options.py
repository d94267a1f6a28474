"""Caller options for one reconciliation run.

Options are validated in full before any comparison runs. Both the canonical
tokens (``placementAndContent``, ``RequireTotalMatch``, ``ByElimination``) and
the short tokens of the legacy import endpoints (``clausepage``, ``all``,
``elimination``) are accepted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from .contracts import MatchStrategy, MergePolicy, UpdateCategory
from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

LEGACY_CATEGORY_TOKENS: Final[dict[str, tuple[UpdateCategory, ...]]] = {
    "cid": (UpdateCategory.IDENTITY,),
    "clausepage": (UpdateCategory.PLACEMENT_AND_CONTENT,),
    "adhoc": (
        UpdateCategory.TRIAGE_GROUP,
        UpdateCategory.AD_HOC_OWNER,
        UpdateCategory.NOTES,
    ),
    "assignee": (UpdateCategory.ASSIGNEE,),
    "resolution": (UpdateCategory.DISPOSITION,),
    "editing": (UpdateCategory.EDITORIAL,),
}

LEGACY_POLICY_TOKENS: Final[dict[str, MergePolicy]] = {
    "all": MergePolicy.REQUIRE_TOTAL_MATCH,
    "any": MergePolicy.APPLY_PARTIAL,
    "add": MergePolicy.INSERT_UNMATCHED_ONLY,
}

LEGACY_STRATEGY_TOKENS: Final[dict[str, MatchStrategy]] = {
    "cid": MatchStrategy.BY_IDENTITY,
    "comment": MatchStrategy.PERFECT,
    "elimination": MatchStrategy.BY_ELIMINATION,
}


def parse_categories(tokens: Iterable[str]) -> frozenset[UpdateCategory]:
    selected: set[UpdateCategory] = set()
    for raw in tokens:
        token = raw.strip()
        if not token:
            continue
        if token in UpdateCategory:
            selected.add(UpdateCategory(token))
        elif token in LEGACY_CATEGORY_TOKENS:
            selected.update(LEGACY_CATEGORY_TOKENS[token])
        else:
            raise InvalidConfigurationError(
                option="update category",
                value=token,
                allowed=(*UpdateCategory, *LEGACY_CATEGORY_TOKENS),
            )
    return frozenset(selected)


def parse_policy(token: str | MergePolicy) -> MergePolicy:
    value = token.strip()
    if value in MergePolicy:
        return MergePolicy(value)
    if value in LEGACY_POLICY_TOKENS:
        return LEGACY_POLICY_TOKENS[value]
    raise InvalidConfigurationError(
        option="merge policy",
        value=value,
        allowed=(*MergePolicy, *LEGACY_POLICY_TOKENS),
    )


def parse_strategy(token: str | MatchStrategy) -> MatchStrategy:
    value = token.strip()
    if value in MatchStrategy:
        return MatchStrategy(value)
    if value in LEGACY_STRATEGY_TOKENS:
        return LEGACY_STRATEGY_TOKENS[value]
    raise InvalidConfigurationError(
        option="match strategy",
        value=value,
        allowed=(*MatchStrategy, *LEGACY_STRATEGY_TOKENS),
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationOptions:
    """Validated category subset, merge policy and match strategy."""

    categories: frozenset[UpdateCategory] = field(default_factory=frozenset["UpdateCategory"])
    policy: MergePolicy = MergePolicy.REQUIRE_TOTAL_MATCH
    strategy: MatchStrategy = MatchStrategy.BY_ELIMINATION

    def __post_init__(self) -> None:
        if (
            self.policy is MergePolicy.APPLY_PARTIAL
            and self.strategy is MatchStrategy.BY_ELIMINATION
        ):
            raise InvalidConfigurationError(
                option="merge policy",
                value=self.policy.value,
                reason=f"cannot be combined with {self.strategy.value}",
            )

    @classmethod
    def parse(
        cls,
        *,
        categories: Iterable[str] = (),
        policy: str = MergePolicy.REQUIRE_TOTAL_MATCH,
        strategy: str = MatchStrategy.BY_ELIMINATION,
    ) -> ReconciliationOptions:
        """Build options from caller tokens, rejecting anything unknown."""

        return cls(
            categories=parse_categories(categories),
            policy=parse_policy(policy),
            strategy=parse_strategy(strategy),
        )
