"""Query interpretation orchestration (entity extraction, then query assembly)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from climaquery.intent.builder import QueryBuilder
from climaquery.intent.schema import Query

if TYPE_CHECKING:
    from climaquery.collaborators import EntityExtractor


async def interpret_query(text: str, *, extractor: EntityExtractor, builder: QueryBuilder) -> Query:
    """Interpret free text into a validated Query.

    Strategy:
        1) Ask the extraction service for typed, scored entities.
        2) Build the Query from the text and those entities.
    """

    entities = await extractor.extract(text)
    return await builder.build(text, entities)
