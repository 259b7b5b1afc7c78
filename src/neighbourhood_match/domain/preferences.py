"""Domain model for caller preference profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

HousingType = Literal["rent", "buy"]


@dataclass(frozen=True)
class LifestylePreferences:
    """Importance weights for each lifestyle sub-score."""

    walkability_importance: int
    transit_importance: int
    bike_importance: int
    nightlife_importance: int
    dining_importance: int
    shopping_importance: int
    parks_importance: int
    cultural_importance: int


@dataclass(frozen=True)
class DemographicsPreferences:
    preferred_age_range: tuple[float, float]
    income_importance: int
    diversity_importance: int
    education_importance: int


@dataclass(frozen=True)
class HousingPreferences:
    max_budget: float
    housing_type: HousingType
    property_tax_importance: int


@dataclass(frozen=True)
class SafetyPreferences:
    safety_importance: int
    min_safety_score: float


@dataclass(frozen=True)
class ClimatePreferences:
    temperature_preference: tuple[float, float]
    rainy_days_importance: int
    sunny_days_importance: int


@dataclass(frozen=True)
class CommutePreferences:
    max_commute_time: float
    commute_importance: int
    public_transit_importance: int


@dataclass(frozen=True)
class PreferenceProfile:
    """Importance weights and hard constraints for one matching request."""

    lifestyle: LifestylePreferences
    demographics: DemographicsPreferences
    housing: HousingPreferences
    safety: SafetyPreferences
    climate: ClimatePreferences
    commute: CommutePreferences
