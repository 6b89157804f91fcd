"""Query schema (Pydantic models).

This schema is the contract between entity/variable classification and the deterministic data
request builder. A `Query` is only ever constructed from fully validated parts; any missing
ingredient is a hard failure upstream.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_SUPPORTED_YEAR = 2008
MAX_SUPPORTED_YEAR = 2017


class EntityType(StrEnum):
    """Entity types produced by the extraction service (only DATE/LOCATION are consumed)."""

    PERSON = "PERSON"
    LOCATION = "LOCATION"
    ORGANIZATION = "ORGANIZATION"
    COMMERCIAL_ITEM = "COMMERCIAL_ITEM"
    EVENT = "EVENT"
    DATE = "DATE"
    QUANTITY = "QUANTITY"
    TITLE = "TITLE"
    OTHER = "OTHER"


class ClimateVariable(StrEnum):
    """Supported climate variables, valued by their dataset variable names.

    Declaration order matters: the variable classifier resolves ties by this order.
    """

    Temperature = "2m_temperature"
    TotalCloudCover = "total_cloud_cover"
    TotalPrecipitation = "total_precipitation"
    WindSpeed = "10m_wind_speed"


class ExtractedEntity(BaseModel):
    """A typed text span with the extractor's confidence score."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    type: EntityType
    text: str
    confidence: float


class LatLng(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Viewport(BaseModel):
    """A rectangular region given by its north-east and south-west corners."""

    model_config = ConfigDict(frozen=True)

    northeast: LatLng
    southwest: LatLng


class Geometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: LatLng
    viewport: Viewport | None = None
    bounds: Viewport | None = None


class GeocodingResult(BaseModel):
    """A geocoding provider result.

    Only `geometry` is interpreted; any other provider fields are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    formatted_address: str | None = None
    geometry: Geometry


class CoordinateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def validate_range(self) -> CoordinateRange:
        """Validate that the range is well-formed (`min <= max`)."""

        if self.min > self.max:
            raise ValueError("min must be <= max")
        return self


class GeoBoundingBox(BaseModel):
    """A latitude/longitude rectangle in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: CoordinateRange
    longitude: CoordinateRange


class DateRange(BaseModel):
    """The date range endpoints picked from the extracted dates.

    Both endpoints are UTC instants whose years lie in the supported reanalysis window.
    Endpoints are not reordered: `min`/`max` are whatever `select_date_range` picked.
    """

    model_config = ConfigDict(frozen=True)

    min: datetime
    max: datetime

    @field_validator("min", "max")
    @classmethod
    def validate_supported_year(cls, value: datetime) -> datetime:
        """Coerce naive values to UTC and reject years outside the supported window."""

        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        value = value.astimezone(UTC)
        if not MIN_SUPPORTED_YEAR <= value.year <= MAX_SUPPORTED_YEAR:
            raise ValueError(
                f"year must be within [{MIN_SUPPORTED_YEAR}, {MAX_SUPPORTED_YEAR}], got {value.year}"
            )
        return value


class Query(BaseModel):
    """A fully validated climate query."""

    model_config = ConfigDict(frozen=True)

    date_range: DateRange
    geo_result: GeocodingResult
    geo_coordinates: GeoBoundingBox
    variable: ClimateVariable = Field(description="Exactly one variable per query.")
