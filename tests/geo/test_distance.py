"""Tests for haversine distance and unit conversion."""

from __future__ import annotations

import math

import pytest

from activity_player.geo import (
    EARTH_RADIUS_KM,
    MILES_PER_KM,
    great_circle_km,
    km_to_miles,
    segment_miles,
)


def test_same_point_is_zero():
    assert great_circle_km(47.6, -122.3, 47.6, -122.3) == 0.0


def test_one_degree_along_equator():
    expected = EARTH_RADIUS_KM * math.pi / 180
    assert great_circle_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected, rel=1e-9)
    assert great_circle_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.195, abs=1e-3)


def test_one_degree_along_meridian_matches_equator():
    assert great_circle_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(
        great_circle_km(0.0, 0.0, 0.0, 1.0), rel=1e-9
    )


def test_distance_is_symmetric():
    a = great_circle_km(51.5007, -0.1246, 40.6892, -74.0445)
    b = great_circle_km(40.6892, -74.0445, 51.5007, -0.1246)
    assert a == pytest.approx(b)


def test_london_to_new_york():
    """Big Ben to the Statue of Liberty is roughly 5575 km."""
    d = great_circle_km(51.5007, -0.1246, 40.6892, -74.0445)
    assert d == pytest.approx(5574.8, abs=1.0)


def test_longitude_shrinks_with_latitude():
    at_equator = great_circle_km(0.0, 0.0, 0.0, 1.0)
    at_sixty = great_circle_km(60.0, 0.0, 60.0, 1.0)
    assert at_sixty == pytest.approx(at_equator / 2, rel=1e-3)


def test_km_to_miles():
    assert km_to_miles(1.0) == MILES_PER_KM
    assert km_to_miles(0.0) == 0.0
    assert km_to_miles(10.0) == pytest.approx(6.21371192)


class TestSegmentMiles:
    def test_reads_points_as_lon_lat(self):
        a = (10.0, 50.0)
        b = (10.0, 51.0)
        assert segment_miles(a, b) == pytest.approx(
            km_to_miles(great_circle_km(50.0, 10.0, 51.0, 10.0))
        )

    def test_x_is_longitude(self):
        """Moving one degree in x at 60° latitude covers half an equator degree."""
        one_lon_at_sixty = segment_miles((0.0, 60.0), (1.0, 60.0))
        one_lat = segment_miles((0.0, 60.0), (0.0, 61.0))
        assert one_lon_at_sixty == pytest.approx(one_lat / 2, rel=1e-3)
