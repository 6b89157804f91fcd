"""Contracts for the external services the query pipeline talks to.

Concrete clients (NER engine, geocoding provider, climate data store) live outside this package.
Their failures are never translated here; they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from climaquery.intent.schema import ExtractedEntity, GeocodingResult
from climaquery.request.schema import DataRequest, ResultLink

logger = logging.getLogger(__name__)


class EntityExtractor(Protocol):
    async def extract(self, text: str) -> list[ExtractedEntity]:
        """Extract typed, scored entities from text. May return types other than DATE/LOCATION."""


class Geocoder(Protocol):
    async def resolve(self, location_text: str) -> GeocodingResult:
        """Resolve a location name to its best geocoding result."""


class ClimateDataClient(Protocol):
    """A climate data store: submit a request, resolve the result link, fetch the payload."""

    async def submit(self, request: DataRequest) -> ResultLink: ...

    async def resolve(self, link: ResultLink) -> ResultLink: ...

    async def fetch(self, link: ResultLink) -> dict[str, Any]: ...


async def run_data_request(request: DataRequest, client: ClimateDataClient) -> dict[str, Any]:
    """Submit a data request and return the fetched result payload.

    The three calls are made strictly in sequence: submit -> resolve -> fetch. Nothing is retried.
    """

    submitted = await client.submit(request)
    logger.debug("submitted dataset=%s link=%s", request.dataset_name, submitted.link)

    resolved = await client.resolve(submitted)
    logger.debug("resolved link=%s", resolved.link)

    return await client.fetch(resolved)
