"""Bounding-box membership, overlap, and map-tile helpers.

Boxes follow the ``BoundingBox`` convention: ``west > east`` means the box
crosses the antimeridian. Feature longitudes may be stored in any range
(USGS publishes some bodies in 0-360) and are normalised here, at the
point of use.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from planetary_atlas.geometry.coordinates import normalize_longitude
from planetary_atlas.models.region import BoundingBox

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from planetary_atlas.models.feature import Feature
    from planetary_atlas.models.region import Region

logger = logging.getLogger("planetary_atlas.geometry.bounds")

DEFAULT_AREA_SIZE_DEG = 20.0

# Web Mercator cuts off where the projected map becomes square
MAX_MERCATOR_LATITUDE = 85.0511287798


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------


def point_in_bounds(lat: float, lon: float, box: BoundingBox) -> bool:
    """Return whether ``(lat, lon)`` lies inside *box* (edges inclusive).

    The point and both longitude edges are normalised to [-180, 180] first,
    so boxes written in 0-360 degrees behave like their -180..180 form.
    If ``west <= east`` the longitude must fall in ``[west, east]``. If
    ``west > east`` the box crosses the antimeridian and the longitude
    matches when ``lon >= west or lon <= east``. A box spanning 360 degrees
    or more accepts every longitude.
    """
    if not (box.south <= lat <= box.north):
        return False
    if box.west <= box.east and box.east - box.west >= 360.0:
        return True

    lon = normalize_longitude(lon)
    west = normalize_longitude(box.west)
    east = normalize_longitude(box.east)
    if west <= east:
        return west <= lon <= east
    return lon >= west or lon <= east


def filter_by_bounds(features: Iterable[Feature], box: BoundingBox) -> list[Feature]:
    """Return the features whose position lies in *box*, preserving input order."""
    selected = [f for f in features if point_in_bounds(f.latitude, f.longitude, box)]
    logger.debug("Bounds filter kept %d feature(s) in %s", len(selected), box)
    return selected


# ---------------------------------------------------------------------------
# Overlap
# ---------------------------------------------------------------------------


def boxes_intersect(a: BoundingBox, b: BoundingBox) -> bool:
    """Return whether two boxes overlap (separating-axis test on raw edges).

    Boxes that cross the antimeridian are not unwrapped; ``boxes_overlap``
    handles those.
    """
    return not (a.east < b.west or a.west > b.east or a.north < b.south or a.south > b.north)


def boxes_overlap(a: BoundingBox, b: BoundingBox) -> bool:
    """Return whether two boxes overlap, in any longitude convention.

    Both boxes are normalised to -180..180 and split at the antimeridian
    before the raw-edge test, so wrapping and 0-360 boxes are handled.
    """
    return any(boxes_intersect(p, q) for p in _normalized_parts(a) for q in _normalized_parts(b))


def find_intersecting_regions(box: BoundingBox, regions: Sequence[Region]) -> list[Region]:
    """Return the regions whose bounds overlap *box*, in catalog order."""
    return [region for region in regions if boxes_overlap(box, region.bounds)]


def split_at_antimeridian(box: BoundingBox) -> list[BoundingBox]:
    """Split a wrapping box into its eastern and western halves.

    Ordinary boxes are returned unchanged as a single-element list. The
    halves can be passed to ``boxes_intersect`` individually.
    """
    if not box.crosses_antimeridian:
        return [box]
    return [
        BoundingBox(north=box.north, south=box.south, west=box.west, east=180.0),
        BoundingBox(north=box.north, south=box.south, west=-180.0, east=box.east),
    ]


def _normalized_parts(box: BoundingBox) -> list[BoundingBox]:
    if box.east - box.west >= 360.0:
        return [BoundingBox(north=box.north, south=box.south, west=-180.0, east=180.0)]
    normalized = BoundingBox(
        north=box.north,
        south=box.south,
        west=normalize_longitude(box.west),
        east=normalize_longitude(box.east),
    )
    return split_at_antimeridian(normalized)


# ---------------------------------------------------------------------------
# Selection helpers
# ---------------------------------------------------------------------------


def default_area_bounds(
    center_lat: float, center_lon: float, size_deg: float = DEFAULT_AREA_SIZE_DEG
) -> BoundingBox:
    """Return a square selection of *size_deg* centred on a point.

    Latitudes are clamped to the poles; longitudes are left unwrapped.
    """
    half = size_deg / 2.0
    return BoundingBox(
        north=min(center_lat + half, 90.0),
        south=max(center_lat - half, -90.0),
        east=center_lon + half,
        west=center_lon - half,
    )


def tile_coordinates(lat: float, lon: float, zoom: int) -> tuple[int, int, int]:
    """Return the ``(x, y, z)`` web-map tile containing ``(lat, lon)``.

    Latitudes beyond the Mercator limit map to the edge row, and the
    longitude is wrapped first, so indices stay within ``[0, 2**zoom)``.
    """
    n = 2**zoom
    lat = max(-MAX_MERCATOR_LATITUDE, min(MAX_MERCATOR_LATITUDE, lat))
    lat_rad = math.radians(lat)
    lon = normalize_longitude(lon)
    x = math.floor((lon + 180.0) / 360.0 * n)
    y = math.floor((1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) / math.pi) / 2.0 * n)
    return (_clamp_index(x, n), _clamp_index(y, n), zoom)


def _clamp_index(index: int, n: int) -> int:
    return max(0, min(n - 1, index))


def tile_bounds(x: int, y: int, zoom: int) -> BoundingBox:
    """Return the latitude/longitude bounds of web-map tile ``(x, y, zoom)``."""
    n = 2**zoom
    west = x / n * 360.0 - 180.0
    east = (x + 1) / n * 360.0 - 180.0
    north = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * y / n))))
    south = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * (y + 1) / n))))
    return BoundingBox(north=north, south=south, east=east, west=west)
