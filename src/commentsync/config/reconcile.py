"""Reconciliation defaults for the resolution re-import."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from commentsync.domain.reconciliation.comparators import DEFAULT_CLAUSE_TRUNCATION_LENGTH

from .env import optional_env_var, optional_int_env_var

DEFAULT_MATCH_STRATEGY: Final[str] = "ByElimination"
DEFAULT_MERGE_POLICY: Final[str] = "RequireTotalMatch"
DEFAULT_UPDATE_CATEGORIES: Final[tuple[str, ...]] = (
    "triageGroup",
    "adHocOwner",
    "notes",
    "assignee",
    "disposition",
    "editorial",
)


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Caller defaults; option tokens are validated by the reconciliation engine."""

    clause_truncation_length: int = DEFAULT_CLAUSE_TRUNCATION_LENGTH
    strategy: str = DEFAULT_MATCH_STRATEGY
    policy: str = DEFAULT_MERGE_POLICY
    categories: tuple[str, ...] = DEFAULT_UPDATE_CATEGORIES


def split_tokens(value: str) -> tuple[str, ...]:
    return tuple(token.strip() for token in value.split(",") if token.strip())


def get_reconcile_config() -> ReconcileConfig:
    truncation = optional_int_env_var("COMMENTSYNC_CLAUSE_TRUNCATION")
    strategy = optional_env_var("COMMENTSYNC_MATCH_STRATEGY")
    policy = optional_env_var("COMMENTSYNC_MERGE_POLICY")
    categories = optional_env_var("COMMENTSYNC_UPDATE_CATEGORIES")
    return ReconcileConfig(
        clause_truncation_length=truncation or DEFAULT_CLAUSE_TRUNCATION_LENGTH,
        strategy=strategy or DEFAULT_MATCH_STRATEGY,
        policy=policy or DEFAULT_MERGE_POLICY,
        categories=split_tokens(categories) if categories else DEFAULT_UPDATE_CATEGORIES,
    )
