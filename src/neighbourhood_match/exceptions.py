"""Custom exceptions for neighbourhood matching.

These exceptions provide clear error handling and enable testing of error paths.
"""

from __future__ import annotations


class MatcherError(Exception):
    """Base exception for all matcher errors."""

    pass


class CatalogueFileNotFoundError(MatcherError):
    """Raised when the neighbourhood catalogue file is missing."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Neighbourhood catalogue not found: {path}\n"
            "Set CATALOGUE_PATH or pass --catalogue with a valid file."
        )


class CatalogueValidationError(MatcherError):
    """Raised when the neighbourhood catalogue fails validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Invalid neighbourhood catalogue {path}: {detail}")


class PreferenceFileNotFoundError(MatcherError):
    """Raised when a preference profile file is missing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Preference profile not found: {path}")


class PreferenceValidationError(MatcherError):
    """Raised when a preference profile fails validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Invalid preference profile {path}: {detail}")


class ConfigFileNotFoundError(MatcherError):
    """Raised when a matcher config file is missing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(MatcherError):
    """Raised when a matcher config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(MatcherError):
    """Raised when a matcher config file fails validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Invalid config file {path}: {detail}")


class MatcherConfigMissingError(MatcherError):
    """Raised when a run is started without configuration."""

    def __init__(self) -> None:
        super().__init__(
            "MatcherConfig is required. Load it once at the entry point with "
            "MatcherConfig.from_env() and pass it through."
        )


class MatchComputationError(MatcherError):
    """Raised when a neighbourhood cannot be scored.

    The whole match run fails; no partial result list is produced.
    """

    def __init__(self, record_id: str, detail: str) -> None:
        self.record_id = record_id
        super().__init__(f"Failed to score neighbourhood {record_id!r}: {detail}")


class NeighbourhoodNotFoundError(MatcherError):
    """Raised when a neighbourhood id is not in the catalogue."""

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Neighbourhood not found in catalogue: {record_id}")


class SortModeError(MatcherError):
    """Raised when an unsupported result sort mode is requested."""

    def __init__(self, sort_by: str, available: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported sort mode {sort_by!r}. Available modes: {', '.join(available)}"
        )
