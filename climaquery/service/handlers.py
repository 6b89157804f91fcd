"""Query handler: free text in, reply (message + request + result) out.

Hard contract: every incoming query produces exactly one `QueryReply`. Unsupported input yields a
targeted message telling the user what was missing; internal errors yield a generic message and
are logged internally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import monotonic
from typing import Any

from climaquery.app import App
from climaquery.collaborators import run_data_request
from climaquery.intent.errors import QueryError, QueryErrorKind
from climaquery.intent.parser import interpret_query
from climaquery.intent.schema import Query
from climaquery.request.builder import build_data_request
from climaquery.request.schema import DataRequest

logger = logging.getLogger(__name__)

ERROR_MESSAGES: dict[QueryErrorKind, str] = {
    QueryErrorKind.no_dates_found: (
        "I couldn't find a date between 2008 and 2017 in your query."
    ),
    QueryErrorKind.no_locations_found: "I couldn't find a location in your query.",
    QueryErrorKind.no_variable_found: (
        "I couldn't tell whether you're asking about temperature, cloud cover, rain or wind."
    ),
}
EMPTY_QUERY_MESSAGE = "Please ask a question about the weather, a place and a date."
FAILURE_MESSAGE = "Something went wrong while answering your query. Please try again later."
SUCCESS_MESSAGE = "Here is the climate data for your query."


@dataclass(frozen=True)
class QueryReply:
    """Outcome of a single handled query."""

    ok: bool
    message: str
    query: Query | None = None
    request: DataRequest | None = None
    result: dict[str, Any] | None = None
    error: QueryErrorKind | None = None


async def handle_query(text: str | None, app: App) -> QueryReply:
    """Handle one free-text query end to end and always return a reply."""

    started = monotonic()

    raw_text = (text or "").strip()
    if not raw_text:
        return QueryReply(ok=False, message=EMPTY_QUERY_MESSAGE)

    # noinspection PyBroadException
    try:
        query = await interpret_query(
            raw_text,
            extractor=app.extractor,
            builder=app.query_builder,
        )
        request = build_data_request(
            query,
            dataset_name=app.settings.dataset_name,
            data_format=app.settings.data_format,
        )
        result = await run_data_request(request, app.data_client)
    except QueryError as exc:
        # Unsupported input -> targeted message (no stack trace needed).
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("unsupported reason=%s latency_ms=%d", exc.kind, latency_ms)
        return QueryReply(ok=False, message=ERROR_MESSAGES[exc.kind], error=exc.kind)
    except Exception:
        # Handler boundary: collaborator failures must still produce a reply, without leaking
        # details.
        logger.exception("handler failed")
        return QueryReply(ok=False, message=FAILURE_MESSAGE)

    latency_ms = int((monotonic() - started) * 1000)
    logger.info(
        "handled variable=%s year=%s month=%s day=%s latency_ms=%d",
        query.variable.name,
        request.options.year,
        request.options.month,
        request.options.day,
        latency_ms,
    )
    return QueryReply(ok=True, message=SUCCESS_MESSAGE, query=query, request=request, result=result)
