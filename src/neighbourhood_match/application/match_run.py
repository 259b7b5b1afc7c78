"""Match run: rank the catalogue for a preference profile and write artefacts.

Usage example:
    >>> from neighbourhood_match.application.match_run import run_match
    >>> from neighbourhood_match.config import MatcherConfig
    >>> config = MatcherConfig.from_env()
    >>> fs = ...  # Injected FileSystem from the CLI/composition root
    >>> result = run_match(out_dir="data/processed", config=config, fs=fs)
    >>> result.matches[0].record.name
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

import pandas as pd

from ..config import MatcherConfig
from ..domain.neighbourhoods import CatalogueRecord
from ..domain.preferences import PreferenceProfile
from ..domain.ranking import MatchResult, find_matches
from ..exceptions import MatcherConfigMissingError, NeighbourhoodNotFoundError
from ..infrastructure import LocalFileSystem
from ..observability import get_logger
from ..protocols import FileSystem
from ..schemas import MATCH_OUTPUT_COLUMNS, validate_columns
from .catalogue import find_record, load_catalogue
from .preferences import default_preference_profile, load_preference_profile
from .shortlist import (
    MatchSummary,
    filter_matches,
    limit_matches,
    sort_matches,
    summarise_matches,
)

MATCHES_FILENAME = "neighbourhood_matches.csv"
EXPLAIN_FILENAME = "neighbourhood_matches_explain.json"


@dataclass(frozen=True)
class MatchRunResult:
    """Presented matches, their summary and the written artefact paths."""

    matches: list[MatchResult]
    summary: MatchSummary | None
    outputs: dict[str, Path]


@dataclass(frozen=True)
class MatchExplanation:
    """One neighbourhood's position in the full ranking."""

    rank: int
    total: int
    match: MatchResult


def _require_config(config: MatcherConfig | None) -> MatcherConfig:
    if config is None:
        raise MatcherConfigMissingError()
    return config


def _load_inputs(
    config: MatcherConfig, fs: FileSystem
) -> tuple[tuple[CatalogueRecord, ...], PreferenceProfile]:
    catalogue = load_catalogue(path=Path(config.catalogue_path), fs=fs)
    if config.preferences_path:
        profile = load_preference_profile(path=Path(config.preferences_path), fs=fs)
    else:
        profile = default_preference_profile()
    return catalogue, profile


def _matches_frame(matches: list[MatchResult]) -> pd.DataFrame:
    rows = []
    for rank, match in enumerate(matches, start=1):
        record = match.record
        scores = match.category_scores
        rows.append(
            {
                "rank": rank,
                "neighbourhood_id": record.id,
                "name": record.name,
                "city": record.city,
                "state": record.state,
                "overall_score": match.overall_score,
                "lifestyle_score": scores.lifestyle,
                "demographics_score": scores.demographics,
                "housing_score": scores.housing,
                "safety_score": scores.safety,
                "climate_score": scores.climate,
                "commute_score": scores.commute,
                "median_rent": record.housing.median_rent,
                "median_home_price": record.housing.median_home_price,
                "raw_safety_score": record.safety.safety_score,
                "match_reasons": " | ".join(match.reasons),
            }
        )
    return pd.DataFrame(rows, columns=list(MATCH_OUTPUT_COLUMNS))


def _explain_payload(matches: list[MatchResult]) -> dict[str, object]:
    return {
        "matches": [
            {
                "neighbourhood_id": match.record.id,
                "name": match.record.name,
                "overall_score": match.overall_score,
                "reasons": list(match.reasons),
                "category_scores": asdict(match.category_scores),
            }
            for match in matches
        ]
    }


def run_match(
    out_dir: str | Path = "data/processed",
    config: MatcherConfig | None = None,
    fs: FileSystem | None = None,
) -> MatchRunResult:
    """Rank the catalogue, apply presentation options and write outputs.

    Args:
        out_dir: Directory for output files.
        config: Matcher configuration (required; load at entry point).
        fs: Optional filesystem for testing.

    Returns:
        MatchRunResult with the presented matches, summary and output paths.
    """
    config = _require_config(config)
    fs = fs or LocalFileSystem()
    logger = get_logger("neighbourhood_match.match_run", level=config.log_level)
    out_dir = Path(out_dir)
    fs.mkdir(out_dir, parents=True)

    catalogue, profile = _load_inputs(config, fs)
    logger.info("Ranking: %s neighbourhoods", len(catalogue))

    ranked = find_matches(profile, catalogue)
    presented = sort_matches(ranked, config.sort_by)
    presented = filter_matches(presented, config.min_match_score)
    presented = limit_matches(presented, config.result_limit)
    logger.info(
        "Presenting %s of %s matches (sort=%s, min_score=%s)",
        len(presented),
        len(ranked),
        config.sort_by,
        config.min_match_score,
    )

    df = _matches_frame(presented)
    validate_columns(list(df.columns), frozenset(MATCH_OUTPUT_COLUMNS), "Match output")
    matches_path = out_dir / MATCHES_FILENAME
    fs.write_csv(df, matches_path)
    logger.info("Matches: %s", matches_path)

    explain_path = out_dir / EXPLAIN_FILENAME
    fs.write_json(_explain_payload(presented), explain_path)
    logger.info("Explainability: %s", explain_path)

    return MatchRunResult(
        matches=presented,
        summary=summarise_matches(presented),
        outputs={"matches": matches_path, "explain": explain_path},
    )


def explain_neighbourhood(
    record_id: str,
    config: MatcherConfig | None = None,
    fs: FileSystem | None = None,
) -> MatchExplanation:
    """Score the full catalogue and return one neighbourhood's breakdown and rank."""
    config = _require_config(config)
    fs = fs or LocalFileSystem()

    catalogue, profile = _load_inputs(config, fs)
    record = find_record(catalogue, record_id)
    ranked = find_matches(profile, catalogue)
    for rank, match in enumerate(ranked, start=1):
        if match.record.id == record.id:
            return MatchExplanation(rank=rank, total=len(ranked), match=match)
    raise NeighbourhoodNotFoundError(record.id)
