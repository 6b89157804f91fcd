"""Entity classification: split extracted entities into date and location candidates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from climaquery.intent.dates import is_supported_year, parse_entity_date
from climaquery.intent.errors import NoDatesFoundError, NoLocationsFoundError
from climaquery.intent.schema import EntityType, ExtractedEntity


@dataclass(frozen=True)
class ClassifiedEntities:
    """Date and location candidates, both in descending confidence order."""

    dates: tuple[datetime, ...]
    locations: tuple[str, ...]


def rank_entities(entities: Iterable[ExtractedEntity]) -> list[ExtractedEntity]:
    """Sort by descending confidence; equal scores keep their extraction order."""

    return sorted(entities, key=lambda entity: -entity.confidence)


def _supported_dates(entities: Iterable[ExtractedEntity]) -> list[datetime]:
    dates: list[datetime] = []
    for entity in entities:
        if entity.type != EntityType.DATE:
            continue
        parsed = parse_entity_date(entity.text)
        if parsed is None or not is_supported_year(parsed):
            continue
        dates.append(parsed)
    return dates


def classify_entities(entities: Iterable[ExtractedEntity]) -> ClassifiedEntities:
    """Classify extracted entities into supported dates and location texts.

    Raises:
        NoDatesFoundError: If no DATE entity parses into the supported year window.
        NoLocationsFoundError: If no LOCATION entity was extracted.
    """

    ranked = rank_entities(entities)

    dates = _supported_dates(ranked)
    locations = [entity.text for entity in ranked if entity.type == EntityType.LOCATION]

    if not dates:
        raise NoDatesFoundError("no supported dates found")
    if not locations:
        raise NoLocationsFoundError("no locations found")

    return ClassifiedEntities(dates=tuple(dates), locations=tuple(locations))
