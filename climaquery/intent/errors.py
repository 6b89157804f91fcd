"""Query interpretation errors.

Each error is terminal for the current query. The `kind` lets callers pick a targeted message
without matching on exception classes.
"""

from __future__ import annotations

from enum import StrEnum


class QueryErrorKind(StrEnum):
    no_dates_found = "no_dates_found"
    no_locations_found = "no_locations_found"
    no_variable_found = "no_variable_found"


class QueryError(ValueError):
    """Raised when the input cannot be turned into a complete Query."""

    kind: QueryErrorKind


class NoDatesFoundError(QueryError):
    """No DATE entity parsed into the supported year window."""

    kind = QueryErrorKind.no_dates_found


class NoLocationsFoundError(QueryError):
    """No LOCATION entity was extracted."""

    kind = QueryErrorKind.no_locations_found


class NoVariableFoundError(QueryError):
    """No climate-variable vocabulary matched the input keywords."""

    kind = QueryErrorKind.no_variable_found
