"""Handling geometries"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, List, Sequence, Tuple

from svggraph.common import CANVAS_HEIGHT, CANVAS_PAD


###############################################################################
# Point
###############################################################################
@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Iterates and indexes like a (x, y) tuple, so a sequence of Points
    can be handed directly to numpy.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __len__(self) -> int:
        return 2

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def lerp(a: float, b: float, t: float) -> float:
        """Linear interpolation between a (t=0) and b (t=1)."""
        return a + t * (b - a)

    @staticmethod
    def lerp_point(a: Point, b: Point, t: float) -> Point:
        """Linear interpolation between two points, componentwise."""
        return Point(GeomMath.lerp(a.x, b.x, t), GeomMath.lerp(a.y, b.y, t))

    @staticmethod
    def reflect(point: Point, center: Point) -> Point:
        """
        Point reflection of _point_ through _center_.

        The reflection is an involution: reflect(reflect(p, c), c) == p.

        Args:
            point (Point): the point to reflect
            center (Point): the center of the reflection

        Returns:
            Point: the reflected point, i.e. 2 * center - point
        """
        return Point(2 * center.x - point.x, 2 * center.y - point.y)

    @staticmethod
    def slope_ratio(point: Point, center: Point) -> float:
        """
        Absolute slope |dy| / |dx| of the line from _center_ to _point_.

        Never raises: a vertical line gives inf, coincident points give nan
        (nan never compares greater than any threshold).
        """
        dy = abs(point.y - center.y)
        dx = abs(point.x - center.x)
        if dx == 0.0:
            return float("inf") if dy > 0.0 else float("nan")
        return dy / dx


###############################################################################
# Box
###############################################################################
@dataclass(frozen=True)
class Box:
    """
    Rectangular box given by its top-left corner and its dimensions (SVG convention).

    Attributes:
        x (float): The x-coordinate of the top-left corner.
        y (float): The y-coordinate of the top-left corner.
        width (float): The width of the box.
        height (float): The height of the box.
    """

    x: float
    y: float
    width: float
    height: float


###############################################################################
# CoordinateMapper
###############################################################################
class CoordinateMapper:
    """Maps domain-space points into canvas space: x padded, y flipped."""

    @staticmethod
    def map_point(point: Point, pad: float = CANVAS_PAD, canvas_height: float = CANVAS_HEIGHT) -> Point:
        """
        Map a domain point into canvas space.

        Args:
            point (Point): domain-space point
            pad (float, optional): x padding. Defaults to CANVAS_PAD (10).
            canvas_height (float, optional): y-flip axis. Defaults to CANVAS_HEIGHT (110).

        Returns:
            Point: (x + pad, canvas_height - y)
        """
        return Point(point.x + pad, canvas_height - point.y)

    @staticmethod
    def format_fixed(value: float, digits: int = 2) -> str:
        """
        Format _value_ with a fixed number of decimal digits.

        The exact binary value is rounded, ties away from zero, so 38.125
        becomes "38.13" (not "38.12" as with format(value, ".2f")). Zero has
        no sign; non-finite values print as "NaN", "Infinity" or "-Infinity".

        Args:
            value (float): the number to format
            digits (int, optional): number of decimal digits. Defaults to 2.

        Returns:
            str: the formatted number
        """
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            value = 0.0
        quantum = Decimal(1).scaleb(-digits)
        return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")

    @staticmethod
    def point_to_pair(point: Point) -> Tuple[str, str]:
        """Map a domain point and format both coordinates with 2 decimal digits."""
        mapped = CoordinateMapper.map_point(point)
        return (CoordinateMapper.format_fixed(mapped.x), CoordinateMapper.format_fixed(mapped.y))

    @staticmethod
    def point_to_string(point: Point) -> str:
        """Map a domain point and serialize it as "x.xx,y.yy"."""
        return ",".join(CoordinateMapper.point_to_pair(point))

    @staticmethod
    def points_to_pairs(points: Sequence[Point]) -> List[Tuple[str, str]]:
        """Map and format a sequence of domain points."""
        return [CoordinateMapper.point_to_pair(point) for point in points]

    @staticmethod
    def points_to_string(points: Sequence[Point]) -> str:
        """Map and serialize a sequence of domain points, separated by single spaces."""
        return " ".join(CoordinateMapper.point_to_string(point) for point in points)
