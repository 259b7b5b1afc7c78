"""Aggregate category scores into ranked neighbourhood matches.

Usage example:
    from neighbourhood_match.domain.ranking import find_matches

    matches = find_matches(profile, catalogue)
    best = matches[0]
    print(best.record.name, best.overall_score, best.reasons)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..exceptions import MatchComputationError
from .neighbourhoods import CatalogueRecord
from .preferences import PreferenceProfile
from .reasons import generate_reasons
from .scoring import CategoryScores, calculate_category_scores

# Category weights for the overall score (sum to 1.0)
LIFESTYLE_WEIGHT = 0.25
DEMOGRAPHICS_WEIGHT = 0.15
HOUSING_WEIGHT = 0.20
SAFETY_WEIGHT = 0.20
CLIMATE_WEIGHT = 0.10
COMMUTE_WEIGHT = 0.10


@dataclass(frozen=True)
class MatchResult:
    """One ranked neighbourhood with its score breakdown and reasons."""

    record: CatalogueRecord
    overall_score: int
    reasons: tuple[str, ...]
    category_scores: CategoryScores


def weighted_total(scores: CategoryScores) -> float:
    """Fixed-weight sum of the category scores, before rounding."""
    total = 0.0
    total += scores.lifestyle * LIFESTYLE_WEIGHT
    total += scores.demographics * DEMOGRAPHICS_WEIGHT
    total += scores.housing * HOUSING_WEIGHT
    total += scores.safety * SAFETY_WEIGHT
    total += scores.climate * CLIMATE_WEIGHT
    total += scores.commute * COMMUTE_WEIGHT
    return total


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding towards +infinity."""
    return math.floor(value + 0.5)


def score_record(record: CatalogueRecord, profile: PreferenceProfile) -> MatchResult:
    """Score a single neighbourhood against a preference profile."""
    scores = calculate_category_scores(record, profile)
    return MatchResult(
        record=record,
        overall_score=round_half_up(weighted_total(scores)),
        reasons=generate_reasons(record, scores),
        category_scores=scores,
    )


def find_matches(
    profile: PreferenceProfile, catalogue: Sequence[CatalogueRecord]
) -> list[MatchResult]:
    """Score every neighbourhood and sort by overall score, highest first.

    Neighbourhoods with equal overall scores keep their catalogue order.

    Raises:
        MatchComputationError: If any neighbourhood cannot be scored. No partial
            result list is returned.
    """
    matches: list[MatchResult] = []
    for record in catalogue:
        try:
            matches.append(score_record(record, profile))
        except (ArithmeticError, AttributeError, TypeError, ValueError) as exc:
            raise MatchComputationError(getattr(record, "id", "<unknown>"), str(exc)) from exc

    return sorted(matches, key=lambda match: match.overall_score, reverse=True)
