"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError
from .logging import configure_logging, verbosity_level
from .reconcile import (
    DEFAULT_CLAUSE_TRUNCATION_LENGTH,
    ReconcileConfig,
    get_reconcile_config,
    split_tokens,
)

__all__ = [
    "DEFAULT_CLAUSE_TRUNCATION_LENGTH",
    "ConfigurationError",
    "ReconcileConfig",
    "configure_logging",
    "get_reconcile_config",
    "optional_env_var",
    "optional_int_env_var",
    "split_tokens",
    "verbosity_level",
]
