"""Tests for splitting extracted entities into date and location candidates."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from fakes import entity

from climaquery.intent.entities import classify_entities, rank_entities
from climaquery.intent.errors import NoDatesFoundError, NoLocationsFoundError
from climaquery.intent.schema import EntityType


def test_dates_and_locations_in_confidence_order() -> None:
    classified = classify_entities(
        [
            entity(EntityType.DATE, "June 2012", 0.5),
            entity(EntityType.LOCATION, "Lyon", 0.6),
            entity(EntityType.DATE, "March 2015", 0.9),
            entity(EntityType.LOCATION, "Paris", 0.95),
        ]
    )
    assert classified.dates == (
        datetime(2015, 3, 1, tzinfo=UTC),
        datetime(2012, 6, 1, tzinfo=UTC),
    )
    assert classified.locations == ("Paris", "Lyon")


def test_equal_confidence_keeps_extraction_order() -> None:
    classified = classify_entities(
        [
            entity(EntityType.LOCATION, "Berlin", 0.8),
            entity(EntityType.DATE, "May 2010", 0.8),
            entity(EntityType.LOCATION, "Hamburg", 0.8),
            entity(EntityType.DATE, "May 2011", 0.8),
        ]
    )
    assert classified.locations == ("Berlin", "Hamburg")
    assert [d.year for d in classified.dates] == [2010, 2011]


def test_rank_entities_is_stable() -> None:
    first = entity(EntityType.OTHER, "a", 0.5)
    second = entity(EntityType.OTHER, "b", 0.5)
    top = entity(EntityType.OTHER, "c", 0.7)
    assert rank_entities([first, second, top]) == [top, first, second]


def test_out_of_window_dates_raise_no_dates() -> None:
    with pytest.raises(NoDatesFoundError):
        classify_entities(
            [
                entity(EntityType.DATE, "March 2005", 0.9),
                entity(EntityType.DATE, "June 2020", 0.8),
                entity(EntityType.LOCATION, "Paris", 0.9),
            ]
        )


def test_unparseable_dates_are_dropped() -> None:
    classified = classify_entities(
        [
            entity(EntityType.DATE, "xyzzy plugh", 0.99),
            entity(EntityType.DATE, "March 2015", 0.5),
            entity(EntityType.LOCATION, "Paris", 0.9),
        ]
    )
    assert classified.dates == (datetime(2015, 3, 1, tzinfo=UTC),)


def test_missing_locations_raise() -> None:
    with pytest.raises(NoLocationsFoundError):
        classify_entities([entity(EntityType.DATE, "March 2015", 0.9)])


def test_dates_are_checked_before_locations() -> None:
    with pytest.raises(NoDatesFoundError):
        classify_entities([entity(EntityType.PERSON, "Ada", 0.9)])


def test_other_entity_types_are_ignored() -> None:
    classified = classify_entities(
        [
            entity(EntityType.ORGANIZATION, "Met Office", 0.99),
            entity(EntityType.QUANTITY, "3 degrees", 0.98),
            entity(EntityType.DATE, "2016-08-10", 0.7),
            entity(EntityType.LOCATION, "Rome", 0.6),
        ]
    )
    assert classified.locations == ("Rome",)
    assert classified.dates == (datetime(2016, 8, 10, tzinfo=UTC),)
