"""Typed parsing and validation for matcher config files.

Example file:
    schema_version = 1

    [matcher]
    catalogue_path = "data/reference/neighbourhoods.json"
    preferences_path = "data/reference/preferences.json"
    min_match_score = 60
    sort_by = "safety"
    result_limit = 5
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .application.shortlist import SORT_MODES
from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError
from .io_validation import format_validation_error
from .observability import LOG_LEVELS
from .protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class MatcherConfigFile:
    """Validated matcher config values loaded from a TOML file."""

    catalogue_path: str | None = None
    preferences_path: str | None = None
    min_match_score: int | None = None
    sort_by: str | None = None
    result_limit: int | None = None
    log_level: str | None = None


class _MatcherSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    catalogue_path: str | None = None
    preferences_path: str | None = None
    min_match_score: int | None = None
    sort_by: str | None = None
    result_limit: int | None = None
    log_level: str | None = None

    @field_validator("catalogue_path", "preferences_path")
    @classmethod
    def _validate_non_empty_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator("min_match_score")
    @classmethod
    def _validate_min_match_score(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 0 or value > 100:
            raise ValueError
        return value

    @field_validator("result_limit")
    @classmethod
    def _validate_result_limit(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if value < 1:
            raise ValueError
        return value

    @field_validator("sort_by")
    @classmethod
    def _validate_sort_by(cls, value: str | None) -> str | None:
        if value is None:
            return None
        mode = value.strip().lower()
        if mode not in SORT_MODES:
            raise ValueError
        return mode

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError
        return level


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    matcher: _MatcherSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value


def load_matcher_config_file(*, path: Path, fs: FileSystem) -> MatcherConfigFile:
    """Load and validate a matcher TOML config file."""
    if not fs.exists(path):
        raise ConfigFileNotFoundError(str(path))

    raw_payload = fs.read_text(path)
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), format_validation_error(exc)) from exc

    section = model.matcher
    return MatcherConfigFile(
        catalogue_path=section.catalogue_path,
        preferences_path=section.preferences_path,
        min_match_score=section.min_match_score,
        sort_by=section.sort_by,
        result_limit=section.result_limit,
        log_level=section.log_level,
    )
