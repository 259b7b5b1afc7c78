"""Tests for config precedence: CLI over config file over environment over defaults."""

from neighbourhood_match.config import MatcherConfig
from neighbourhood_match.config_file import MatcherConfigFile


def test_with_file_overrides_applies_config_file_values() -> None:
    env_config = MatcherConfig(min_match_score=10, sort_by="match", log_level="INFO")
    file_config = MatcherConfigFile(
        catalogue_path="file/catalogue.json",
        preferences_path="file/prefs.json",
        min_match_score=40,
        sort_by="price",
        result_limit=3,
        log_level="DEBUG",
    )

    updated = env_config.with_file_overrides(file_config)

    assert updated == MatcherConfig(
        catalogue_path="file/catalogue.json",
        preferences_path="file/prefs.json",
        min_match_score=40,
        sort_by="price",
        result_limit=3,
        log_level="DEBUG",
    )


def test_with_file_overrides_keeps_env_when_file_value_missing() -> None:
    env_config = MatcherConfig(preferences_path="env/prefs.json", result_limit=7)

    updated = env_config.with_file_overrides(MatcherConfigFile(sort_by="safety"))

    assert updated.preferences_path == "env/prefs.json"
    assert updated.result_limit == 7
    assert updated.sort_by == "safety"


def test_precedence_cli_over_config_file_over_env_over_defaults() -> None:
    env_config = MatcherConfig(min_match_score=10, result_limit=9)
    file_config = MatcherConfigFile(min_match_score=50, sort_by="price")

    final = env_config.with_file_overrides(file_config).with_overrides(sort_by="safety")

    assert final.min_match_score == 50
    assert final.sort_by == "safety"
    assert final.result_limit == 9
    assert final.catalogue_path == MatcherConfig().catalogue_path
