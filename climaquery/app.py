"""Application composition root.

This module wires together configuration and the external service clients for a query session.
"""

from __future__ import annotations

from dataclasses import dataclass

from climaquery.collaborators import ClimateDataClient, EntityExtractor, Geocoder
from climaquery.config.settings import Settings
from climaquery.intent.builder import QueryBuilder
from climaquery.intent.variables import VariableClassifier


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    extractor: EntityExtractor
    query_builder: QueryBuilder
    data_client: ClimateDataClient


def create_app(
        settings: Settings,
        *,
        extractor: EntityExtractor,
        geocoder: Geocoder,
        data_client: ClimateDataClient,
) -> App:
    """Create the application container with the default variable vocabulary."""

    query_builder = QueryBuilder(geocoder, VariableClassifier())
    return App(
        settings=settings,
        extractor=extractor,
        query_builder=query_builder,
        data_client=data_client,
    )
