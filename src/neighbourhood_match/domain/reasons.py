"""Human-readable match reasons.

Rules are evaluated in a fixed priority order and only the first four that fire are
kept, so the result is always a prefix of the triggered rule list.
"""

from __future__ import annotations

from .neighbourhoods import CatalogueRecord, LifestyleFacet
from .scoring import CategoryScores

MAX_REASONS = 4

LIFESTYLE_REASON_THRESHOLD = 80.0
SAFETY_REASON_THRESHOLD = 85.0
HOUSING_REASON_THRESHOLD = 75.0
WALKABILITY_REASON_THRESHOLD = 85.0
DIVERSITY_REASON_THRESHOLD = 0.7
RESTAURANTS_REASON_THRESHOLD = 100

SAFETY_REASON = "Very safe neighborhood with low crime rates"
HOUSING_REASON = "Good housing value within your budget"
WALKABILITY_REASON = "Highly walkable with easy access to amenities"
DIVERSITY_REASON = "Diverse and inclusive community"


def top_lifestyle_labels(lifestyle: LifestyleFacet, count: int = 2) -> list[str]:
    """Return the highest lifestyle sub-score labels; ties keep declared order."""
    ranked = sorted(lifestyle.ordered(), key=lambda item: item[1], reverse=True)
    return [label for label, _ in ranked[:count]]


def generate_reasons(record: CatalogueRecord, scores: CategoryScores) -> tuple[str, ...]:
    """Build up to four reasons explaining why a neighbourhood matched."""
    reasons: list[str] = []

    if scores.lifestyle > LIFESTYLE_REASON_THRESHOLD:
        labels = top_lifestyle_labels(record.lifestyle)
        reasons.append(f"Excellent {' and '.join(labels)} scene")

    if scores.safety > SAFETY_REASON_THRESHOLD:
        reasons.append(SAFETY_REASON)

    if scores.housing > HOUSING_REASON_THRESHOLD:
        reasons.append(HOUSING_REASON)

    if record.lifestyle.walkability > WALKABILITY_REASON_THRESHOLD:
        reasons.append(WALKABILITY_REASON)

    if record.demographics.diversity_index > DIVERSITY_REASON_THRESHOLD:
        reasons.append(DIVERSITY_REASON)

    restaurants = record.amenities.restaurants
    if restaurants > RESTAURANTS_REASON_THRESHOLD:
        reasons.append(f"Incredible food scene with {restaurants} restaurants")

    return tuple(reasons[:MAX_REASONS])
