"""Query assembly: classified entities + variable + geocoding -> validated `Query`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from climaquery.intent.dates import select_date_range
from climaquery.intent.entities import classify_entities
from climaquery.intent.errors import NoLocationsFoundError
from climaquery.intent.geo import bounding_box_from_geometry
from climaquery.intent.schema import DateRange, EntityType, ExtractedEntity, Query
from climaquery.intent.variables import VariableClassifier

if TYPE_CHECKING:
    from climaquery.collaborators import Geocoder

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Build a `Query` from the raw input text and its extracted entities."""

    def __init__(
            self,
            geocoder: Geocoder,
            variable_classifier: VariableClassifier | None = None,
    ) -> None:
        self.geocoder = geocoder
        self.variable_classifier = variable_classifier or VariableClassifier()

    async def build(self, text: str, entities: Iterable[ExtractedEntity]) -> Query:
        """Build a fully populated Query.

        The geocoding lookup is the only await point. All classification errors
        (`NoDatesFoundError`, `NoLocationsFoundError`, `NoVariableFoundError`) and geocoder errors
        propagate unchanged; no partial Query is ever returned. A query without any LOCATION
        entity fails with `NoLocationsFoundError` whatever its dates are.
        """

        entities = list(entities)
        if not any(entity.type == EntityType.LOCATION for entity in entities):
            raise NoLocationsFoundError("no locations found")

        classified = classify_entities(entities)
        variable = self.variable_classifier.classify(text)

        # Highest-confidence location.
        location = classified.locations[0]
        geo_result = await self.geocoder.resolve(location)
        geo_coordinates = bounding_box_from_geometry(geo_result.geometry)

        range_min, range_max = select_date_range(classified.dates)

        logger.info(
            "query built location=%r variable=%s dates=%d",
            location,
            variable.name,
            len(classified.dates),
        )
        return Query(
            date_range=DateRange(min=range_min, max=range_max),
            geo_result=geo_result,
            geo_coordinates=geo_coordinates,
            variable=variable,
        )
