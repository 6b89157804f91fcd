"""Deterministic data request builder.

The builder converts a validated `Query` into a `DataRequest`. It cannot fail: every Query is
validated upstream, and the same Query always yields an identical request.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from climaquery.intent.schema import CoordinateRange, DateRange, GeoBoundingBox, Query
from climaquery.request.schema import (
    DEFAULT_DATASET_NAME,
    DataFormat,
    DataRequest,
    DataRequestOptions,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class RequestInstant:
    """Calendar components of the representative instant (UTC)."""

    year: str
    month: str
    day: str
    # Derived for completeness; the dataset is queried at daily granularity so it is not sent.
    hour: str


def _to_epoch_ms(value: datetime) -> int:
    return (value - _EPOCH) // _ONE_MS


def midpoint(date_range: DateRange) -> datetime:
    """Return the midpoint of the range endpoints, rounded to the millisecond (half up)."""

    total_ms = _to_epoch_ms(date_range.min) + _to_epoch_ms(date_range.max)
    mid_ms = (total_ms + 1) // 2
    return _EPOCH + timedelta(milliseconds=mid_ms)


def request_instant(date_range: DateRange) -> RequestInstant:
    instant = midpoint(date_range)
    return RequestInstant(
        year=f"{instant.year:04d}",
        month=f"{instant.month:02d}",
        day=f"{instant.day:02d}",
        hour=f"{instant.hour:02d}",
    )


def format_degrees(value: float) -> str:
    """Render decimal degrees as the shortest round-tripping string (`2.0` -> `"2"`)."""

    text = repr(float(value))
    if "e" in text or "E" in text:
        text = f"{value:.12f}".rstrip("0").rstrip(".")
    elif text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def _grid_step(axis: CoordinateRange) -> str:
    return str(math.ceil(axis.max - axis.min))


def grid_for(box: GeoBoundingBox) -> tuple[str, str]:
    """Grid resolution per axis: the ceiling of the box span, so larger boxes get coarser cells."""

    return _grid_step(box.latitude), _grid_step(box.longitude)


def area_for(box: GeoBoundingBox) -> tuple[str, str, str, str]:
    """Area as `[north, west, south, east]`."""

    lat, lon = box.latitude, box.longitude
    return (
        format_degrees(lat.max),
        format_degrees(lon.min),
        format_degrees(lat.min),
        format_degrees(lon.max),
    )


def build_data_request(
        query: Query,
        *,
        dataset_name: str = DEFAULT_DATASET_NAME,
        data_format: DataFormat = DataFormat.grib,
) -> DataRequest:
    """Build the data store request for a validated Query."""

    instant = request_instant(query.date_range)
    options = DataRequestOptions(
        variable=query.variable,
        product_type="reanalysis",
        grid=grid_for(query.geo_coordinates),
        area=area_for(query.geo_coordinates),
        year=instant.year,
        month=instant.month,
        day=instant.day,
        format=data_format,
    )
    return DataRequest(dataset_name=dataset_name, options=options)
