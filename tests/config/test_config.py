"""Tests for environment-backed matcher configuration."""

import pytest

from neighbourhood_match import config as config_module
from neighbourhood_match.application.shortlist import SORT_MODES
from neighbourhood_match.config import (
    DEFAULT_CATALOGUE_PATH,
    MatcherConfig,
    NonNegativeIntegerEnvVarError,
    PositiveIntegerEnvVarError,
    SortModeEnvVarError,
)
from neighbourhood_match.observability import LogLevelError


def _patch_env(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    def fake_getenv(key: str, default: str = "") -> str:
        return env.get(key, default)

    def fake_load_dotenv(dotenv_path: str | None = None) -> bool:
        _ = dotenv_path
        return True

    monkeypatch.setattr(config_module.os, "getenv", fake_getenv)
    monkeypatch.setattr(config_module, "load_dotenv", fake_load_dotenv)


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {})

    config = MatcherConfig.from_env()

    assert config == MatcherConfig()
    assert config.catalogue_path == DEFAULT_CATALOGUE_PATH
    assert config.preferences_path == ""
    assert config.result_limit is None


def test_from_env_reads_all_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(
        monkeypatch,
        {
            "CATALOGUE_PATH": " data/custom.json ",
            "PREFERENCES_PATH": "prefs.json",
            "MIN_MATCH_SCORE": "60",
            "SORT_BY": "Price",
            "RESULT_LIMIT": "5",
            "LOG_LEVEL": "debug",
        },
    )

    config = MatcherConfig.from_env()

    assert config.catalogue_path == "data/custom.json"
    assert config.preferences_path == "prefs.json"
    assert config.min_match_score == 60
    assert config.sort_by == "price"
    assert config.result_limit == 5
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["-1", "high"])
def test_from_env_rejects_invalid_min_match_score(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    _patch_env(monkeypatch, {"MIN_MATCH_SCORE": value})

    with pytest.raises(NonNegativeIntegerEnvVarError, match="MIN_MATCH_SCORE"):
        MatcherConfig.from_env()


@pytest.mark.parametrize("value", ["0", "three"])
def test_from_env_rejects_invalid_result_limit(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    _patch_env(monkeypatch, {"RESULT_LIMIT": value})

    with pytest.raises(PositiveIntegerEnvVarError, match="RESULT_LIMIT"):
        MatcherConfig.from_env()


def test_from_env_rejects_unknown_sort_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {"SORT_BY": "distance"})

    with pytest.raises(SortModeEnvVarError, match="distance"):
        MatcherConfig.from_env()


@pytest.mark.parametrize("mode", SORT_MODES)
def test_from_env_accepts_every_shortlist_sort_mode(
    monkeypatch: pytest.MonkeyPatch, mode: str
) -> None:
    _patch_env(monkeypatch, {"SORT_BY": mode.upper()})

    assert MatcherConfig.from_env().sort_by == mode


def test_from_env_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {"LOG_LEVEL": "verbose"})

    with pytest.raises(LogLevelError, match="verbose"):
        MatcherConfig.from_env()


def test_from_env_blank_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_env(monkeypatch, {"LOG_LEVEL": "  "})

    assert MatcherConfig.from_env().log_level == "INFO"


def test_with_overrides_preserves_fields() -> None:
    base = MatcherConfig(
        catalogue_path="catalogue.json",
        preferences_path="prefs.json",
        min_match_score=50,
        sort_by="safety",
        result_limit=3,
        log_level="DEBUG",
    )

    updated = base.with_overrides(min_match_score=70)

    assert updated.min_match_score == 70
    assert updated.catalogue_path == base.catalogue_path
    assert updated.preferences_path == base.preferences_path
    assert updated.sort_by == base.sort_by
    assert updated.result_limit == base.result_limit
    assert updated.log_level == base.log_level


def test_with_overrides_strips_paths() -> None:
    updated = MatcherConfig().with_overrides(
        catalogue_path=" other.json ", preferences_path=" prefs.json "
    )

    assert updated.catalogue_path == "other.json"
    assert updated.preferences_path == "prefs.json"
