"""Domain scoring rules for neighbourhood/preference fit.

Usage example:
    from neighbourhood_match.domain.scoring import calculate_category_scores

    scores = calculate_category_scores(record, profile)
    assert scores.safety == 0.0 or record.safety.safety_score >= profile.safety.min_safety_score

Importance weights scale several sub-factors before they are averaged. With every
importance in 0–10 each category score stays in 0–100; a larger importance can push
a category above 100, and category scores are never re-clamped.
"""

from __future__ import annotations

from dataclasses import dataclass

from .neighbourhoods import CatalogueRecord
from .preferences import PreferenceProfile

# Domain bounds for normalised facets (min, max)
INCOME_BOUNDS = (30_000.0, 200_000.0)
PROPERTY_TAX_BOUNDS = (0.5, 3.0)
RAINY_DAYS_BOUNDS = (30.0, 200.0)
SUNNY_DAYS_BOUNDS = (100.0, 350.0)

# Penalty per unit of distance from the preferred range midpoint
AGE_PENALTY_PER_YEAR = 5.0
TEMPERATURE_PENALTY_PER_DEGREE = 2.0

# Education label → points
EDUCATION_SCORES = {
    "High School": 25.0,
    "Some College": 50.0,
    "Bachelor's Degree": 75.0,
    "Graduate Degree": 100.0,
}
DEFAULT_EDUCATION_SCORE = 50.0

BUDGET_WEIGHT = 2
IMPORTANCE_SCALE = 10


@dataclass(frozen=True)
class CategoryScores:
    """The six per-category scores for one neighbourhood."""

    lifestyle: float
    demographics: float
    housing: float
    safety: float
    climate: float
    commute: float


def normalise_score(value: float, minimum: float, maximum: float) -> float:
    """Rescale value from [minimum, maximum] onto 0–100, clamped."""
    return max(0.0, min(100.0, ((value - minimum) / (maximum - minimum)) * 100))


def _importance(weight: int) -> float:
    return weight / IMPORTANCE_SCALE


def _range_fit(value: float, preferred: tuple[float, float], penalty: float) -> float:
    """100 inside the inclusive range, else a linear penalty from the midpoint."""
    low, high = preferred
    if low <= value <= high:
        return 100.0
    return max(0.0, 100 - abs(value - ((low + high) / 2)) * penalty)


def _ceiling_fit(value: float, ceiling: float) -> float:
    """100 at or under the ceiling, decaying linearly by the relative overshoot."""
    if value <= ceiling:
        return 100.0
    if ceiling <= 0:
        return 0.0
    return max(0.0, 100 - ((value - ceiling) / ceiling) * 100)


def score_lifestyle(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    """Importance-weighted average of the lifestyle sub-scores."""
    lifestyle = record.lifestyle
    weights = profile.lifestyle
    factors = (
        (lifestyle.walkability, weights.walkability_importance),
        (lifestyle.transit, weights.transit_importance),
        (lifestyle.bike, weights.bike_importance),
        (lifestyle.nightlife, weights.nightlife_importance),
        (lifestyle.dining, weights.dining_importance),
        (lifestyle.shopping, weights.shopping_importance),
        (lifestyle.parks, weights.parks_importance),
        (lifestyle.cultural, weights.cultural_importance),
    )

    total_score = 0.0
    total_weight = 0
    for score, weight in factors:
        total_score += score * weight
        total_weight += weight

    return total_score / total_weight if total_weight > 0 else 0.0


def score_demographics(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    """Mean of age fit and importance-scaled income, diversity and education."""
    demo = record.demographics
    prefs = profile.demographics

    age_score = _range_fit(demo.median_age, prefs.preferred_age_range, AGE_PENALTY_PER_YEAR)
    income_score = normalise_score(demo.median_income, *INCOME_BOUNDS)
    diversity_score = demo.diversity_index * 100
    education_score = EDUCATION_SCORES.get(demo.education_level, DEFAULT_EDUCATION_SCORE)

    score = age_score
    score += income_score * _importance(prefs.income_importance)
    score += diversity_score * _importance(prefs.diversity_importance)
    score += education_score * _importance(prefs.education_importance)
    return score / 4


def score_housing(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    """Budget fit (double weight) averaged with property-tax desirability."""
    housing = record.housing
    prefs = profile.housing

    price = housing.median_rent if prefs.housing_type == "rent" else housing.median_home_price
    budget_score = _ceiling_fit(price, prefs.max_budget)
    tax_score = normalise_score(housing.property_tax, *PROPERTY_TAX_BOUNDS)

    score = budget_score * BUDGET_WEIGHT
    score += (100 - tax_score) * _importance(prefs.property_tax_importance)
    return score / (BUDGET_WEIGHT + 1)


def score_safety(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    """Importance-scaled safety score, gated by the minimum safety requirement."""
    safety_score = record.safety.safety_score
    prefs = profile.safety
    if safety_score < prefs.min_safety_score:
        return 0.0
    return safety_score * _importance(prefs.safety_importance)


def score_climate(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    climate = record.climate
    prefs = profile.climate

    temp_score = _range_fit(
        climate.average_temp, prefs.temperature_preference, TEMPERATURE_PENALTY_PER_DEGREE
    )
    # Fewer rainy days is better; more sunny days is better
    rainy_score = normalise_score(climate.rainy_days, *RAINY_DAYS_BOUNDS)
    sunny_score = normalise_score(climate.sunny_days, *SUNNY_DAYS_BOUNDS)

    score = temp_score
    score += (100 - rainy_score) * _importance(prefs.rainy_days_importance)
    score += sunny_score * _importance(prefs.sunny_days_importance)
    return score / 3


def score_commute(record: CatalogueRecord, profile: PreferenceProfile) -> float:
    commute = record.commute
    prefs = profile.commute

    commute_score = _ceiling_fit(commute.average_commute_time, prefs.max_commute_time)
    transit_score = commute.public_transit_access * _importance(prefs.public_transit_importance)

    score = commute_score * _importance(prefs.commute_importance)
    score += transit_score
    return score / 2


def calculate_category_scores(
    record: CatalogueRecord, profile: PreferenceProfile
) -> CategoryScores:
    """Calculate all six category scores for one neighbourhood."""
    return CategoryScores(
        lifestyle=score_lifestyle(record, profile),
        demographics=score_demographics(record, profile),
        housing=score_housing(record, profile),
        safety=score_safety(record, profile),
        climate=score_climate(record, profile),
        commute=score_commute(record, profile),
    )
