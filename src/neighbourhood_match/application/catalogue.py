"""Loading and strict validation for the neighbourhood catalogue."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..domain.neighbourhoods import (
    AmenitiesFacet,
    CatalogueRecord,
    ClimateFacet,
    CommuteFacet,
    DemographicsFacet,
    HousingFacet,
    LifestyleFacet,
    SafetyFacet,
)
from ..exceptions import (
    CatalogueFileNotFoundError,
    CatalogueValidationError,
    NeighbourhoodNotFoundError,
)
from ..io_validation import format_validation_error
from ..protocols import FileSystem

_SCHEMA_VERSION = 1

Percentage = Annotated[float, Field(ge=0.0, le=100.0)]
Fraction = Annotated[float, Field(ge=0.0, le=1.0)]
Count = Annotated[int, Field(ge=0)]


class _FacetModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class _DemographicsModel(_FacetModel):
    population: Count
    median_age: float = Field(ge=0.0)
    median_income: float = Field(ge=0.0)
    education_level: str
    diversity_index: Fraction


class _LifestyleModel(_FacetModel):
    walkability: Percentage
    transit: Percentage
    bike: Percentage
    nightlife: Percentage
    dining: Percentage
    shopping: Percentage
    parks: Percentage
    cultural: Percentage


class _AmenitiesModel(_FacetModel):
    restaurants: Count
    bars: Count
    cafes: Count
    parks: Count
    gyms: Count
    schools: Count
    hospitals: Count
    libraries: Count


class _HousingModel(_FacetModel):
    median_home_price: float = Field(ge=0.0)
    median_rent: float = Field(ge=0.0)
    property_tax: float = Field(ge=0.0)
    homeownership_rate: Fraction


class _SafetyModel(_FacetModel):
    crime_rate: float = Field(ge=0.0)
    safety_score: Percentage


class _ClimateModel(_FacetModel):
    average_temp: float
    rainy_days: int = Field(ge=0, le=366)
    sunny_days: int = Field(ge=0, le=366)


class _CommuteModel(_FacetModel):
    average_commute_time: float = Field(ge=0.0)
    public_transit_access: Percentage
    walking_commute: float = Field(ge=0.0)


class _NeighbourhoodModel(_FacetModel):
    id: str
    name: str
    city: str
    state: str
    description: str = ""
    image: str = ""
    demographics: _DemographicsModel
    lifestyle: _LifestyleModel
    amenities: _AmenitiesModel
    housing: _HousingModel
    safety: _SafetyModel
    climate: _ClimateModel
    commute: _CommuteModel

    @field_validator("id", "name", "city", "state")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text


class _CatalogueModel(_FacetModel):
    schema_version: int
    neighbourhoods: tuple[_NeighbourhoodModel, ...]

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_unique_ids(self) -> _CatalogueModel:
        ids = [neighbourhood.id for neighbourhood in self.neighbourhoods]
        if len(set(ids)) != len(ids):
            raise ValueError("neighbourhood ids must be unique")
        return self


def _to_domain_record(model: _NeighbourhoodModel) -> CatalogueRecord:
    return CatalogueRecord(
        id=model.id,
        name=model.name,
        city=model.city,
        state=model.state,
        description=model.description,
        image=model.image,
        demographics=DemographicsFacet(**model.demographics.model_dump()),
        lifestyle=LifestyleFacet(**model.lifestyle.model_dump()),
        amenities=AmenitiesFacet(**model.amenities.model_dump()),
        housing=HousingFacet(**model.housing.model_dump()),
        safety=SafetyFacet(**model.safety.model_dump()),
        climate=ClimateFacet(**model.climate.model_dump()),
        commute=CommuteFacet(**model.commute.model_dump()),
    )


def load_catalogue(*, path: Path, fs: FileSystem) -> tuple[CatalogueRecord, ...]:
    """Load and validate a neighbourhood catalogue from JSON, preserving file order."""
    if not fs.exists(path):
        raise CatalogueFileNotFoundError(str(path))

    payload = fs.read_text(path)
    try:
        model = _CatalogueModel.model_validate_json(payload)
    except ValidationError as exc:
        raise CatalogueValidationError(str(path), format_validation_error(exc)) from exc

    return tuple(_to_domain_record(neighbourhood) for neighbourhood in model.neighbourhoods)


def find_record(catalogue: tuple[CatalogueRecord, ...], record_id: str) -> CatalogueRecord:
    """Return the catalogue record with the given id."""
    target = record_id.strip()
    for record in catalogue:
        if record.id == target:
            return record
    raise NeighbourhoodNotFoundError(target)
