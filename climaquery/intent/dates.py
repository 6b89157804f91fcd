"""Permissive English date parsing and date-range selection (UTC).

Entity texts are free-form ("March 2015", "last summer", "2015-03-01"). Missing components are
filled with the earliest value (first month, first day, midnight), and every parsed instant is
returned as an aware UTC datetime.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

import dateparser
from dateparser.conf import Settings as DateparserSettings

from climaquery.intent.schema import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR

logger = logging.getLogger(__name__)

_DATEPARSER_SETTINGS = DateparserSettings().replace(
    PREFER_DAY_OF_MONTH="first",
    PREFER_MONTH_OF_YEAR="first",
    TIMEZONE="UTC",
    TO_TIMEZONE="UTC",
    RETURN_AS_TIMEZONE_AWARE=True,
)


def parse_entity_date(text: str) -> datetime | None:
    """Parse a date entity text.

    Returns:
        An aware UTC datetime, or `None` if the text is not a recognizable date.
    """

    value = (text or "").strip()
    if not value:
        return None

    dt = dateparser.parse(value, languages=["en"], settings=_DATEPARSER_SETTINGS)
    if not dt:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def is_supported_year(value: datetime) -> bool:
    """Whether the instant falls inside the reanalysis coverage window (2008-2017 inclusive)."""

    return MIN_SUPPORTED_YEAR <= value.year <= MAX_SUPPORTED_YEAR


def select_date_range(dates: Sequence[datetime]) -> tuple[datetime, datetime]:
    """Pick the `(min, max)` endpoints from confidence-ordered dates.

    The endpoints are the first and last elements of `dates` as given, not the chronological
    extremes. The chronological order is only logged for diagnostics.
    """

    if not dates:
        raise ValueError("at least one date is required")

    chronological = sorted(dates)
    logger.debug(
        "date range candidates=%d earliest=%s latest=%s",
        len(dates),
        chronological[0].isoformat(),
        chronological[-1].isoformat(),
    )
    return dates[0], dates[-1]
