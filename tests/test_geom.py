"""Test module for svggraph.geom

The tests are run using pytest.
These tests ensure that all functions and interfaces in src/svggraph/geom.py
remain working correctly after changes and refactoring.
"""

import math

import numpy as np
import pytest

from svggraph.geom import CoordinateMapper, GeomMath, Point

###############################################################################
# Point Tests
###############################################################################


class TestPoint:
    """Test class for Point value type."""

    def test_point_is_immutable(self):
        """Points are frozen value types."""
        point = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.x = 3.0  # type: ignore[misc]

    def test_point_unpacks_like_tuple(self):
        """Points unpack and index like (x, y)."""
        x, y = Point(1.5, -2.0)
        assert (x, y) == (1.5, -2.0)
        assert Point(1.5, -2.0)[1] == -2.0
        assert len(Point(0, 0)) == 2

    def test_point_arithmetic(self):
        """Addition and subtraction are componentwise."""
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) - Point(3, 4) == Point(-2, -2)

    def test_points_feed_numpy(self):
        """A sequence of points converts into an (n, 2) array."""
        arr = np.array([tuple(p) for p in (Point(0, 1), Point(2, 3))], dtype=np.float64)
        assert arr.shape == (2, 2)
        assert np.allclose(arr, [[0, 1], [2, 3]])


###############################################################################
# GeomMath Tests
###############################################################################


class TestGeomMath:
    """Test class for GeomMath functionality."""

    def test_lerp(self):
        """Linear interpolation at start, end and in between."""
        assert GeomMath.lerp(0.0, 10.0, 0.0) == 0.0
        assert GeomMath.lerp(0.0, 10.0, 1.0) == 10.0
        assert GeomMath.lerp(0.0, 10.0, 0.3) == pytest.approx(3.0)

    def test_lerp_point_thirty_percent(self):
        """Endpoint control point: 30% towards the neighbor."""
        result = GeomMath.lerp_point(Point(0, 0), Point(10, 20), 0.3)
        assert result.x == pytest.approx(3.0)
        assert result.y == pytest.approx(6.0)

    def test_reflect(self):
        """Point reflection through a center."""
        assert GeomMath.reflect(Point(12, 10), Point(10, 10)) == Point(8, 10)
        assert GeomMath.reflect(Point(1, 2), Point(0, 0)) == Point(-1, -2)

    @pytest.mark.parametrize(
        "point, center",
        [
            (Point(1.0, 2.0), Point(0.0, 0.0)),
            (Point(12.333, 10.0), Point(10.0, 10.0)),
            (Point(-5.5, 7.25), Point(3.0, -1.5)),
            (Point(0.0, 0.0), Point(0.0, 0.0)),
        ],
    )
    def test_reflect_is_involution(self, point, center):
        """Reflecting twice through the same center returns the original point."""
        assert GeomMath.reflect(GeomMath.reflect(point, center), center) == point

    def test_slope_ratio(self):
        """Absolute ratio |dy| / |dx|."""
        assert GeomMath.slope_ratio(Point(0, 0), Point(10, 10)) == 1.0
        assert GeomMath.slope_ratio(Point(8, 0), Point(10, 10)) == 5.0

    def test_slope_ratio_vertical_is_inf(self):
        """Zero horizontal distance gives an infinite ratio instead of raising."""
        assert GeomMath.slope_ratio(Point(10, 0), Point(10, 10)) == math.inf

    def test_slope_ratio_coincident_is_nan(self):
        """Coincident points give nan, which never exceeds a threshold."""
        ratio = GeomMath.slope_ratio(Point(10, 10), Point(10, 10))
        assert math.isnan(ratio)
        assert not ratio > 3


###############################################################################
# CoordinateMapper Tests
###############################################################################


class TestCoordinateMapper:
    """Test class for the domain to canvas mapping."""

    def test_map_origin(self):
        """The origin maps to (10, 110)."""
        assert CoordinateMapper.map_point(Point(0, 0)) == Point(10, 110)

    def test_map_flips_y(self):
        """Larger y values map higher up, i.e. to smaller canvas y."""
        assert CoordinateMapper.map_point(Point(25, 100)) == Point(35, 10)

    def test_point_to_string_origin(self):
        """Serialization uses 2 decimal digits."""
        assert CoordinateMapper.point_to_string(Point(0, 0)) == "10.00,110.00"

    def test_point_to_string_rounds(self):
        """Coordinates are rounded to 2 decimal digits."""
        assert CoordinateMapper.point_to_string(Point(2.3333333, 12.666666)) == "12.33,97.33"

    def test_points_to_string_separator(self):
        """Pairs are separated by single spaces without leading or trailing space."""
        result = CoordinateMapper.points_to_string([Point(0, 0), Point(50, 50)])
        assert result == "10.00,110.00 60.00,60.00"

    def test_points_to_pairs(self):
        """Pairs are formatted string tuples."""
        assert CoordinateMapper.points_to_pairs([Point(0, 0)]) == [("10.00", "110.00")]

    def test_point_to_string_rounds_ties_away_from_zero(self):
        """An exact tie (38.125) rounds up, not to the even digit."""
        assert CoordinateMapper.point_to_string(Point(28.125, 0)) == "38.13,110.00"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (38.125, "38.13"),
            (0.125, "0.13"),
            (-0.125, "-0.13"),
            (103.75, "103.75"),
            (1.005, "1.00"),  # binary value is slightly below the tie
            (-0.001, "-0.00"),
            (-0.0, "0.00"),
            (0.0, "0.00"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_format_fixed(self, value, expected):
        """Fixed-point formatting of the exact binary value."""
        assert CoordinateMapper.format_fixed(value) == expected

    def test_format_fixed_digits(self):
        """The number of decimal digits is configurable."""
        assert CoordinateMapper.format_fixed(2.5, 0) == "3"
        assert CoordinateMapper.format_fixed(1.0625, 3) == "1.063"
