"""Loading and validation for preference profiles, plus the default profile.

Usage example:
    from pathlib import Path

    from neighbourhood_match.application.preferences import (
        default_preference_profile,
        load_preference_profile,
    )
    from neighbourhood_match.infrastructure import LocalFileSystem

    profile = load_preference_profile(path=Path("preferences.json"), fs=LocalFileSystem())
    fallback = default_preference_profile()
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.preferences import (
    ClimatePreferences,
    CommutePreferences,
    DemographicsPreferences,
    HousingPreferences,
    LifestylePreferences,
    PreferenceProfile,
    SafetyPreferences,
)
from ..exceptions import PreferenceFileNotFoundError, PreferenceValidationError
from ..io_validation import format_validation_error
from ..protocols import FileSystem

Importance = Annotated[int, Field(ge=0, le=10)]


def _validate_range(value: tuple[float, float]) -> tuple[float, float]:
    low, high = value
    if low > high:
        raise ValueError("range minimum must not exceed maximum")
    return value


class _SectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class _LifestyleModel(_SectionModel):
    walkability_importance: Importance
    transit_importance: Importance
    # The preference form never asks about cycling; 0 leaves bike out of the average.
    bike_importance: Importance = 0
    nightlife_importance: Importance
    dining_importance: Importance
    shopping_importance: Importance
    parks_importance: Importance
    cultural_importance: Importance


class _DemographicsModel(_SectionModel):
    preferred_age_range: tuple[float, float]
    income_importance: Importance
    diversity_importance: Importance
    education_importance: Importance

    @field_validator("preferred_age_range")
    @classmethod
    def _validate_age_range(cls, value: tuple[float, float]) -> tuple[float, float]:
        return _validate_range(value)


class _HousingModel(_SectionModel):
    max_budget: float = Field(gt=0.0)
    housing_type: Literal["rent", "buy"]
    property_tax_importance: Importance


class _SafetyModel(_SectionModel):
    safety_importance: Importance
    min_safety_score: float = Field(ge=0.0, le=100.0)


class _ClimateModel(_SectionModel):
    temperature_preference: tuple[float, float]
    rainy_days_importance: Importance
    sunny_days_importance: Importance

    @field_validator("temperature_preference")
    @classmethod
    def _validate_temperature_range(cls, value: tuple[float, float]) -> tuple[float, float]:
        return _validate_range(value)


class _CommuteModel(_SectionModel):
    max_commute_time: float = Field(gt=0.0)
    commute_importance: Importance
    public_transit_importance: Importance


class _PreferenceProfileModel(_SectionModel):
    lifestyle: _LifestyleModel
    demographics: _DemographicsModel
    housing: _HousingModel
    safety: _SafetyModel
    climate: _ClimateModel
    commute: _CommuteModel


def _to_domain_profile(model: _PreferenceProfileModel) -> PreferenceProfile:
    return PreferenceProfile(
        lifestyle=LifestylePreferences(**model.lifestyle.model_dump()),
        demographics=DemographicsPreferences(
            preferred_age_range=model.demographics.preferred_age_range,
            income_importance=model.demographics.income_importance,
            diversity_importance=model.demographics.diversity_importance,
            education_importance=model.demographics.education_importance,
        ),
        housing=HousingPreferences(**model.housing.model_dump()),
        safety=SafetyPreferences(**model.safety.model_dump()),
        climate=ClimatePreferences(
            temperature_preference=model.climate.temperature_preference,
            rainy_days_importance=model.climate.rainy_days_importance,
            sunny_days_importance=model.climate.sunny_days_importance,
        ),
        commute=CommutePreferences(**model.commute.model_dump()),
    )


def parse_preference_profile(payload: str, *, source: str = "<inline>") -> PreferenceProfile:
    """Validate a JSON preference document and convert it to the domain profile."""
    try:
        model = _PreferenceProfileModel.model_validate_json(payload)
    except ValidationError as exc:
        raise PreferenceValidationError(source, format_validation_error(exc)) from exc
    return _to_domain_profile(model)


def load_preference_profile(*, path: Path, fs: FileSystem) -> PreferenceProfile:
    """Load and validate a preference profile from JSON."""
    if not fs.exists(path):
        raise PreferenceFileNotFoundError(str(path))
    return parse_preference_profile(fs.read_text(path), source=str(path))


def default_preference_profile() -> PreferenceProfile:
    """Return the starting values of the preference form."""
    return PreferenceProfile(
        lifestyle=LifestylePreferences(
            walkability_importance=7,
            transit_importance=6,
            bike_importance=0,
            nightlife_importance=5,
            dining_importance=7,
            shopping_importance=5,
            parks_importance=6,
            cultural_importance=6,
        ),
        demographics=DemographicsPreferences(
            preferred_age_range=(25.0, 45.0),
            income_importance=6,
            diversity_importance=7,
            education_importance=6,
        ),
        housing=HousingPreferences(
            max_budget=3000.0,
            housing_type="rent",
            property_tax_importance=5,
        ),
        safety=SafetyPreferences(safety_importance=8, min_safety_score=70.0),
        climate=ClimatePreferences(
            temperature_preference=(45.0, 75.0),
            rainy_days_importance=5,
            sunny_days_importance=6,
        ),
        commute=CommutePreferences(
            max_commute_time=35.0,
            commute_importance=7,
            public_transit_importance=6,
        ),
    )
