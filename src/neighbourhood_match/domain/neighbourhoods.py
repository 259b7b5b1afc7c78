"""Domain model for catalogue neighbourhood records.

Usage example:
    from neighbourhood_match.domain.neighbourhoods import CatalogueRecord

    record: CatalogueRecord = catalogue[0]
    assert 0 <= record.lifestyle.walkability <= 100
"""

from __future__ import annotations

from dataclasses import dataclass

EDUCATION_LEVELS = (
    "High School",
    "Some College",
    "Bachelor's Degree",
    "Graduate Degree",
)


@dataclass(frozen=True)
class DemographicsFacet:
    """Population profile of a neighbourhood."""

    population: int
    median_age: float
    median_income: float
    education_level: str
    diversity_index: float  # 0.0–1.0


@dataclass(frozen=True)
class LifestyleFacet:
    """Lifestyle sub-scores (0–100), in declared order."""

    walkability: float
    transit: float
    bike: float
    nightlife: float
    dining: float
    shopping: float
    parks: float
    cultural: float

    def ordered(self) -> tuple[tuple[str, float], ...]:
        """Return (label, sub-score) pairs in declared order."""
        return (
            ("walkability", self.walkability),
            ("transit", self.transit),
            ("bike", self.bike),
            ("nightlife", self.nightlife),
            ("dining", self.dining),
            ("shopping", self.shopping),
            ("parks", self.parks),
            ("cultural", self.cultural),
        )


@dataclass(frozen=True)
class AmenitiesFacet:
    """Amenity counts. Used for reasons only, never for scoring."""

    restaurants: int
    bars: int
    cafes: int
    parks: int
    gyms: int
    schools: int
    hospitals: int
    libraries: int


@dataclass(frozen=True)
class HousingFacet:
    median_home_price: float
    median_rent: float
    property_tax: float  # percent
    homeownership_rate: float


@dataclass(frozen=True)
class SafetyFacet:
    crime_rate: float
    safety_score: float


@dataclass(frozen=True)
class ClimateFacet:
    average_temp: float
    rainy_days: int
    sunny_days: int


@dataclass(frozen=True)
class CommuteFacet:
    average_commute_time: float  # minutes
    public_transit_access: float
    walking_commute: float


@dataclass(frozen=True)
class CatalogueRecord:
    """One candidate neighbourhood with its fixed facet data."""

    id: str
    name: str
    city: str
    state: str
    description: str
    image: str
    demographics: DemographicsFacet
    lifestyle: LifestyleFacet
    amenities: AmenitiesFacet
    housing: HousingFacet
    safety: SafetyFacet
    climate: ClimateFacet
    commute: CommuteFacet
