from __future__ import annotations

import logging

import pytest

from commentsync.config import (
    DEFAULT_CLAUSE_TRUNCATION_LENGTH,
    ConfigurationError,
    ReconcileConfig,
    get_reconcile_config,
    optional_env_var,
    optional_int_env_var,
    split_tokens,
    verbosity_level,
)

ENV_VARS = (
    "COMMENTSYNC_CLAUSE_TRUNCATION",
    "COMMENTSYNC_MATCH_STRATEGY",
    "COMMENTSYNC_MERGE_POLICY",
    "COMMENTSYNC_UPDATE_CATEGORIES",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment() -> None:
    config = get_reconcile_config()

    assert config == ReconcileConfig()
    assert config.clause_truncation_length == DEFAULT_CLAUSE_TRUNCATION_LENGTH == 50
    assert config.strategy == "ByElimination"
    assert config.policy == "RequireTotalMatch"
    assert "disposition" in config.categories


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMENTSYNC_CLAUSE_TRUNCATION", "40")
    monkeypatch.setenv("COMMENTSYNC_MATCH_STRATEGY", "Perfect")
    monkeypatch.setenv("COMMENTSYNC_MERGE_POLICY", " ApplyPartial ")
    monkeypatch.setenv("COMMENTSYNC_UPDATE_CATEGORIES", "notes, assignee,")

    config = get_reconcile_config()

    assert config.clause_truncation_length == 40
    assert config.strategy == "Perfect"
    assert config.policy == "ApplyPartial"
    assert config.categories == ("notes", "assignee")


@pytest.mark.parametrize("value", ["forty", "0"])
def test_invalid_truncation_length(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("COMMENTSYNC_CLAUSE_TRUNCATION", value)

    with pytest.raises(ConfigurationError) as excinfo:
        get_reconcile_config()

    assert excinfo.value.name == "COMMENTSYNC_CLAUSE_TRUNCATION"


def test_blank_values_count_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None
    assert optional_int_env_var("EXAMPLE_VAR") is None


def test_split_tokens() -> None:
    assert split_tokens("a, b,,c ") == ("a", "b", "c")
    assert split_tokens("") == ()


def test_verbosity_level() -> None:
    assert verbosity_level(verbose=True) == logging.DEBUG
    assert verbosity_level(verbose=False) == logging.INFO
