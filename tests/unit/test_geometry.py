"""Tests for sphere conversions and bounding-box helpers.

Covers:
- to_cartesian / to_spherical inverse pair and the axis convention
- point_in_bounds for ordinary, antimeridian-crossing and 0-360 boxes
- filter_by_bounds ordering
- Overlap tests and antimeridian splitting
"""

from __future__ import annotations

import math

import pytest

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
from planetary_atlas.models.feature import Feature
from planetary_atlas.models.region import BoundingBox, Region


class TestSphereConversions:
    """Latitude/longitude to sphere and back."""

    def test_north_pole_is_positive_y(self) -> None:
        x, y, z = to_cartesian(90.0, 0.0)
        assert y == pytest.approx(1.0)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert z == pytest.approx(0.0, abs=1e-12)

    def test_origin_meridian_on_x_axis(self) -> None:
        assert to_cartesian(0.0, 0.0) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)

    def test_longitude_increases_clockwise(self) -> None:
        _, _, z = to_cartesian(0.0, 90.0)
        assert z == pytest.approx(-1.0)

    def test_radius_scales(self) -> None:
        x, y, z = to_cartesian(12.0, 34.0, radius=3.0)
        assert math.sqrt(x * x + y * y + z * z) == pytest.approx(3.0)

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(0.0, 0.0), (45.0, 45.0), (-43.31, -11.36), (18.65, -133.8), (-60.0, 179.5)],
    )
    def test_round_trip(self, lat: float, lon: float) -> None:
        back_lat, back_lon = to_spherical(*to_cartesian(lat, lon, radius=2.5))
        assert back_lat == pytest.approx(lat, abs=1e-9)
        assert back_lon == pytest.approx(lon, abs=1e-9)

    def test_origin_maps_to_nan(self) -> None:
        lat, lon = to_spherical(0.0, 0.0, 0.0)
        assert math.isnan(lat)
        assert math.isnan(lon)

    def test_nan_propagates(self) -> None:
        assert all(math.isnan(v) for v in to_cartesian(math.nan, 0.0))


class TestNormalizeLongitude:
    def test_in_range_unchanged(self) -> None:
        assert normalize_longitude(-133.8) == -133.8

    def test_wraps_east(self) -> None:
        assert normalize_longitude(198.0) == pytest.approx(-162.0)

    def test_wraps_west(self) -> None:
        assert normalize_longitude(-190.0) == pytest.approx(170.0)


class TestPointInBounds:
    """Box membership, edges inclusive."""

    box = BoundingBox(north=10.0, south=-10.0, east=20.0, west=-20.0)
    wrapping = BoundingBox(north=10.0, south=-10.0, east=-170.0, west=170.0)

    def test_inside(self) -> None:
        assert point_in_bounds(0.0, 0.0, self.box)

    def test_edges_inclusive(self) -> None:
        assert point_in_bounds(10.0, 20.0, self.box)
        assert point_in_bounds(-10.0, -20.0, self.box)

    def test_outside_latitude(self) -> None:
        assert not point_in_bounds(11.0, 0.0, self.box)

    def test_outside_longitude(self) -> None:
        assert not point_in_bounds(0.0, 21.0, self.box)

    def test_antimeridian_box_accepts_far_east(self) -> None:
        assert point_in_bounds(0.0, 179.0, self.wrapping)

    def test_antimeridian_box_accepts_far_west(self) -> None:
        assert point_in_bounds(0.0, -175.0, self.wrapping)

    def test_antimeridian_box_rejects_prime_meridian(self) -> None:
        assert not point_in_bounds(0.0, 0.0, self.wrapping)

    def test_point_in_0_360_matches_box(self) -> None:
        assert point_in_bounds(0.0, 185.0, self.wrapping)

    def test_box_in_0_360(self) -> None:
        box = BoundingBox(north=-40.0, south=-65.0, east=350.0, west=300.0)
        assert point_in_bounds(-50.0, -30.0, box)
        assert point_in_bounds(-50.0, 330.0, box)
        assert not point_in_bounds(-50.0, 10.0, box)

    def test_full_circle_box_accepts_everything(self) -> None:
        box = BoundingBox(north=-60.0, south=-90.0, east=360.0, west=0.0)
        assert point_in_bounds(-70.0, -179.0, box)
        assert point_in_bounds(-70.0, 90.0, box)


class TestFilterByBounds:
    def test_preserves_input_order(self) -> None:
        features = [
            Feature("B", latitude=1.0, longitude=1.0),
            Feature("Outside", latitude=50.0, longitude=1.0),
            Feature("A", latitude=-1.0, longitude=-1.0),
        ]
        box = BoundingBox(north=10.0, south=-10.0, east=10.0, west=-10.0)
        assert [f.name for f in filter_by_bounds(features, box)] == ["B", "A"]

    def test_empty(self) -> None:
        assert filter_by_bounds([], BoundingBox(1.0, 0.0, 1.0, 0.0)) == []


class TestOverlap:
    def test_overlapping(self) -> None:
        a = BoundingBox(north=10.0, south=0.0, east=10.0, west=0.0)
        b = BoundingBox(north=15.0, south=5.0, east=15.0, west=5.0)
        assert boxes_intersect(a, b)

    def test_touching_edges_overlap(self) -> None:
        a = BoundingBox(north=10.0, south=0.0, east=10.0, west=0.0)
        b = BoundingBox(north=10.0, south=0.0, east=20.0, west=10.0)
        assert boxes_intersect(a, b)

    def test_disjoint(self) -> None:
        a = BoundingBox(north=10.0, south=0.0, east=10.0, west=0.0)
        b = BoundingBox(north=10.0, south=0.0, east=30.0, west=20.0)
        assert not boxes_intersect(a, b)

    def test_regions_in_catalog_order(self) -> None:
        regions = [
            Region("First", "Mare", BoundingBox(10.0, 0.0, 10.0, 0.0)),
            Region("Far", "Mare", BoundingBox(80.0, 70.0, 10.0, 0.0)),
            Region("Second", "Mare", BoundingBox(5.0, -5.0, 5.0, -5.0)),
        ]
        selection = BoundingBox(north=6.0, south=1.0, east=6.0, west=1.0)
        assert [r.name for r in find_intersecting_regions(selection, regions)] == [
            "First",
            "Second",
        ]

    def test_overlap_with_wrapping_region(self) -> None:
        region = BoundingBox(north=45.0, south=15.0, east=-175.0, west=165.0)
        selection = BoundingBox(north=40.0, south=20.0, east=-178.0, west=178.0)
        assert not boxes_intersect(selection, region)
        assert boxes_overlap(selection, region)

    def test_overlap_with_0_360_region(self) -> None:
        region = BoundingBox(north=-40.0, south=-65.0, east=350.0, west=300.0)
        assert boxes_overlap(BoundingBox(north=-50.0, south=-60.0, east=-20.0, west=-40.0), region)
        assert not boxes_overlap(BoundingBox(north=-50.0, south=-60.0, east=40.0, west=20.0),
                                 region)

    def test_overlap_full_circle_region(self) -> None:
        region = BoundingBox(north=-60.0, south=-90.0, east=360.0, west=0.0)
        assert boxes_overlap(BoundingBox(north=-70.0, south=-80.0, east=-100.0, west=-120.0),
                             region)

    def test_split_ordinary_box(self) -> None:
        box = BoundingBox(north=1.0, south=0.0, east=1.0, west=0.0)
        assert split_at_antimeridian(box) == [box]

    def test_split_wrapping_box(self) -> None:
        box = BoundingBox(north=10.0, south=-10.0, east=-170.0, west=170.0)
        east_half, west_half = split_at_antimeridian(box)
        assert (east_half.west, east_half.east) == (170.0, 180.0)
        assert (west_half.west, west_half.east) == (-180.0, -170.0)


class TestSelectionHelpers:
    def test_default_area_is_centred(self) -> None:
        box = default_area_bounds(0.0, 100.0)
        assert (box.north, box.south, box.east, box.west) == (10.0, -10.0, 110.0, 90.0)

    def test_default_area_clamps_poles(self) -> None:
        box = default_area_bounds(85.0, 0.0)
        assert box.north == 90.0

    def test_tile_contains_its_point(self) -> None:
        x, y, z = tile_coordinates(18.65, -133.8, 4)
        bounds = tile_bounds(x, y, z)
        assert point_in_bounds(18.65, -133.8, bounds)

    def test_zoom_zero_single_tile(self) -> None:
        assert tile_coordinates(0.0, 0.0, 0) == (0, 0, 0)

    @pytest.mark.parametrize(
        ("lat", "lon", "expected"),
        [
            (90.0, 0.0, (8, 0, 4)),
            (-90.0, 0.0, (8, 15, 4)),
            (0.0, 180.0, (15, 8, 4)),
            (0.0, -180.0, (0, 8, 4)),
            (0.0, 190.0, (0, 8, 4)),
        ],
    )
    def test_indices_stay_in_range(
        self, lat: float, lon: float, expected: tuple[int, int, int]
    ) -> None:
        assert tile_coordinates(lat, lon, 4) == expected
