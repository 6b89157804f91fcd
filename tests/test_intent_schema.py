"""Tests for the Query Pydantic schema and its invariants."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes import paris_result
from pydantic import ValidationError

from climaquery.intent.schema import (
    ClimateVariable,
    CoordinateRange,
    DateRange,
    EntityType,
    ExtractedEntity,
    GeoBoundingBox,
    GeocodingResult,
    Query,
)


def _box() -> GeoBoundingBox:
    return GeoBoundingBox(
        latitude=CoordinateRange(min=48.8, max=48.9),
        longitude=CoordinateRange(min=2.3, max=2.4),
    )


def test_date_range_rejects_years_outside_window() -> None:
    with pytest.raises(ValueError):
        DateRange(min=datetime(2007, 12, 31, tzinfo=UTC), max=datetime(2010, 1, 1, tzinfo=UTC))
    with pytest.raises(ValueError):
        DateRange(min=datetime(2010, 1, 1, tzinfo=UTC), max=datetime(2018, 1, 1, tzinfo=UTC))


def test_date_range_treats_naive_values_as_utc() -> None:
    date_range = DateRange(min=datetime(2015, 3, 1), max=datetime(2015, 3, 2))
    assert date_range.min.tzinfo == UTC
    assert date_range.min.isoformat() == "2015-03-01T00:00:00+00:00"


def test_coordinate_range_requires_min_le_max() -> None:
    with pytest.raises(ValueError):
        CoordinateRange(min=10.0, max=9.0)


def test_query_is_immutable() -> None:
    query = Query(
        date_range=DateRange(
            min=datetime(2015, 3, 1, tzinfo=UTC),
            max=datetime(2015, 3, 1, tzinfo=UTC),
        ),
        geo_result=paris_result(),
        geo_coordinates=_box(),
        variable=ClimateVariable.Temperature,
    )
    with pytest.raises(ValidationError):
        query.variable = ClimateVariable.WindSpeed  # type: ignore[misc]


def test_geocoding_result_keeps_provider_fields() -> None:
    result = GeocodingResult.model_validate(
        {
            "formatted_address": "Paris, France",
            "place_id": "abc123",
            "geometry": {"location": {"lat": 48.85, "lng": 2.35}},
        }
    )
    assert result.model_extra == {"place_id": "abc123"}
    assert result.geometry.viewport is None


def test_extracted_entity_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        ExtractedEntity.model_validate({"type": "WEATHER", "text": "rain", "confidence": 0.5})
    assert ExtractedEntity.model_validate(
        {"type": "DATE", "text": " March 2015 ", "confidence": 0.5}
    ).text == "March 2015"
    assert EntityType("LOCATION") == EntityType.LOCATION
