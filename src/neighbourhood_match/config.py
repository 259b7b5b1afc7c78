"""Centralised, injectable configuration for neighbourhood matching."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .application.shortlist import SORT_MODES
from .config_file import MatcherConfigFile
from .observability import parse_log_level

DEFAULT_CATALOGUE_PATH = "data/reference/neighbourhoods.json"


class NonNegativeIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative integer.")


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a positive integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive integer.")


class SortModeEnvVarError(ValueError):
    """Raised when SORT_BY is not a supported sort mode."""

    def __init__(self, value: str) -> None:
        super().__init__(f"SORT_BY must be one of {', '.join(SORT_MODES)} (got {value!r}).")


@dataclass(frozen=True)
class MatcherConfig:
    """Immutable configuration for a match run.

    Load from environment with `MatcherConfig.from_env()` or construct directly for testing.
    """

    # Inputs
    catalogue_path: str = DEFAULT_CATALOGUE_PATH
    preferences_path: str = ""  # empty → default preference profile

    # Result presentation
    min_match_score: int = 0
    sort_by: str = "match"
    result_limit: int | None = None

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            MatcherConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            catalogue_path=os.getenv("CATALOGUE_PATH", DEFAULT_CATALOGUE_PATH).strip()
            or DEFAULT_CATALOGUE_PATH,
            preferences_path=os.getenv("PREFERENCES_PATH", "").strip(),
            min_match_score=_parse_non_negative_int(
                os.getenv("MIN_MATCH_SCORE", ""), env_name="MIN_MATCH_SCORE"
            ),
            sort_by=_parse_sort_mode(os.getenv("SORT_BY", "")),
            result_limit=_parse_optional_positive_int(
                os.getenv("RESULT_LIMIT", ""), env_name="RESULT_LIMIT"
            ),
            log_level=_parse_log_level(os.getenv("LOG_LEVEL", "")),
        )

    def with_overrides(
        self,
        *,
        catalogue_path: str | None = None,
        preferences_path: str | None = None,
        min_match_score: int | None = None,
        sort_by: str | None = None,
        result_limit: int | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            catalogue_path=self.catalogue_path
            if catalogue_path is None
            else catalogue_path.strip(),
            preferences_path=self.preferences_path
            if preferences_path is None
            else preferences_path.strip(),
            min_match_score=self.min_match_score
            if min_match_score is None
            else min_match_score,
            sort_by=self.sort_by if sort_by is None else sort_by,
            result_limit=self.result_limit if result_limit is None else result_limit,
        )

    def with_file_overrides(self, file_config: MatcherConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            catalogue_path=self.catalogue_path
            if file_config.catalogue_path is None
            else file_config.catalogue_path,
            preferences_path=self.preferences_path
            if file_config.preferences_path is None
            else file_config.preferences_path,
            min_match_score=self.min_match_score
            if file_config.min_match_score is None
            else file_config.min_match_score,
            sort_by=self.sort_by if file_config.sort_by is None else file_config.sort_by,
            result_limit=self.result_limit
            if file_config.result_limit is None
            else file_config.result_limit,
            log_level=self.log_level if file_config.log_level is None else file_config.log_level,
        )


def _parse_non_negative_int(value: str, *, env_name: str) -> int:
    """Parse a non-negative integer, defaulting to 0 when unset."""
    text = value.strip()
    if not text:
        return 0
    try:
        parsed = int(text)
    except ValueError as exc:
        raise NonNegativeIntegerEnvVarError(env_name) from exc
    if parsed < 0:
        raise NonNegativeIntegerEnvVarError(env_name)
    return parsed


def _parse_optional_positive_int(value: str, *, env_name: str) -> int | None:
    """Parse an optional positive integer from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_sort_mode(value: str) -> str:
    text = value.strip().lower()
    if not text:
        return "match"
    if text not in SORT_MODES:
        raise SortModeEnvVarError(value)
    return text


def _parse_log_level(value: str) -> str:
    text = value.strip().upper()
    if not text:
        return "INFO"
    parse_log_level(value)
    return text
