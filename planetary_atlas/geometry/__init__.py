"""Geometry helpers: sphere transforms and bounding-box selection."""

from planetary_atlas.geometry.bounds import (
    boxes_intersect,
    boxes_overlap,
    default_area_bounds,
    filter_by_bounds,
    find_intersecting_regions,
    point_in_bounds,
    split_at_antimeridian,
    tile_bounds,
    tile_coordinates,
)
from planetary_atlas.geometry.coordinates import normalize_longitude, to_cartesian, to_spherical

__all__ = [
    "boxes_intersect",
    "boxes_overlap",
    "default_area_bounds",
    "filter_by_bounds",
    "find_intersecting_regions",
    "normalize_longitude",
    "point_in_bounds",
    "split_at_antimeridian",
    "tile_bounds",
    "tile_coordinates",
    "to_cartesian",
    "to_spherical",
]
