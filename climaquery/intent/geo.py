"""Geocoding geometry to bounding-box conversion."""

from __future__ import annotations

from climaquery.intent.schema import CoordinateRange, GeoBoundingBox, Geometry, Viewport


def _viewport_to_box(viewport: Viewport) -> GeoBoundingBox:
    ne, sw = viewport.northeast, viewport.southwest

    west, east = sw.lng, ne.lng
    if east < west:
        # Crosses the antimeridian (e.g. Fiji: west 177, east -178): keep the east edge past 180.
        east += 360.0

    return GeoBoundingBox(
        latitude=CoordinateRange(min=min(sw.lat, ne.lat), max=max(sw.lat, ne.lat)),
        longitude=CoordinateRange(min=west, max=east),
    )


def bounding_box_from_geometry(geometry: Geometry) -> GeoBoundingBox:
    """Derive a bounding box from a geocoding geometry.

    Preference order: `viewport`, then `bounds`, then the single `location` point (a degenerate
    box with `min == max` on both axes). A viewport spanning the antimeridian yields a longitude
    range whose `max` exceeds 180, so its width stays the true east-west extent.
    """

    region = geometry.viewport or geometry.bounds
    if region is not None:
        return _viewport_to_box(region)

    point = geometry.location
    return GeoBoundingBox(
        latitude=CoordinateRange(min=point.lat, max=point.lat),
        longitude=CoordinateRange(min=point.lng, max=point.lng),
    )
