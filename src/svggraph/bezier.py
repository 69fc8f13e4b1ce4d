"""Cubic Bezier curve sampling for the spline polyline."""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from svggraph.common import DEFAULT_STEP
from svggraph.geom import Point

# Step counts below this are evaluated in pure Python, above with NumPy
_NUMPY_MIN_STEPS: int = 70

ControlPoints = Union[Sequence[Point], Sequence[Tuple[float, float]], NDArray[np.float64]]


class BezierCurve:
    """Class to handle cubic Bezier curve evaluation and sampling.

    All methods evaluate the closed-form Bernstein polynomial
        B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
    at a fixed number of samples. The first sample is always exactly P0
    and the last sample is always exactly P3.
    """

    @staticmethod
    def evaluate(a: Point, c1: Point, c2: Point, b: Point, t: float) -> Point:
        """Evaluate the cubic Bezier curve (a, c1, c2, b) at parameter t."""
        omt = 1.0 - t
        omt2 = omt * omt
        omt3 = omt2 * omt
        t2 = t * t
        t3 = t2 * t
        x = omt3 * a.x + 3.0 * omt2 * t * c1.x + 3.0 * omt * t2 * c2.x + t3 * b.x
        y = omt3 * a.y + 3.0 * omt2 * t * c1.y + 3.0 * omt * t2 * c2.y + t3 * b.y
        return Point(x, y)

    @staticmethod
    def steps_from_step(step: float) -> int:
        """
        Number of segments for a parameter step, i.e. round(1 / step).

        Raises:
            ValueError: If step is not within (0, 1]
        """
        if not 0.0 < step <= 1.0:
            raise ValueError(f"step must be within (0, 1], got {step}")
        return max(1, int(round(1.0 / step)))

    @classmethod
    def polygonize_cubic_curve_python(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve using pure Python evaluation at t = i / steps.
        """
        pt0, pt1, pt2, pt3 = points
        p0x, p0y = float(pt0[0]), float(pt0[1])
        p1x, p1y = float(pt1[0]), float(pt1[1])
        p2x, p2y = float(pt2[0]), float(pt2[1])
        p3x, p3y = float(pt3[0]), float(pt3[1])

        result = np.empty((steps + 1, 2), dtype=np.float64)
        result[0] = (p0x, p0y)
        for i in range(1, steps):
            t = i / steps
            omt = 1.0 - t
            omt2 = omt * omt
            omt3 = omt2 * omt
            t2 = t * t
            t3 = t2 * t
            result[i, 0] = omt3 * p0x + 3.0 * omt2 * t * p1x + 3.0 * omt * t2 * p2x + t3 * p3x
            result[i, 1] = omt3 * p0y + 3.0 * omt2 * t * p1y + 3.0 * omt * t2 * p2y + t3 * p3y
        result[steps] = (p3x, p3y)
        return result

    @classmethod
    def polygonize_cubic_curve_numpy(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve using vectorized NumPy evaluation.
        """
        points_array = np.array([tuple(point) for point in points], dtype=np.float64)

        t = np.linspace(0, 1, steps + 1, dtype=np.float64)

        # Cubic Bezier basis functions
        omt = 1 - t
        omt2 = omt**2
        omt3 = omt2 * omt
        t2 = t**2
        t3 = t2 * t

        # degenerate (non-finite) control points must not warn or raise
        with np.errstate(invalid="ignore", over="ignore"):
            result = np.empty((steps + 1, 2), dtype=np.float64)
            result[:, 0] = (
                omt3 * points_array[0, 0]
                + 3 * omt2 * t * points_array[1, 0]
                + 3 * omt * t2 * points_array[2, 0]
                + t3 * points_array[3, 0]
            )
            result[:, 1] = (
                omt3 * points_array[0, 1]
                + 3 * omt2 * t * points_array[1, 1]
                + 3 * omt * t2 * points_array[2, 1]
                + t3 * points_array[3, 1]
            )

        # pin the end points
        result[0] = points_array[0]
        result[-1] = points_array[3]
        return result

    @classmethod
    def polygonize_cubic_curve(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.
        Uses pure Python for small step counts, NumPy for larger ones.

        Args:
            points: Control points, exactly 4: start, control1, control2, end
            steps: Number of segments to divide the curve into (>= 1)

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the polygonized points (x, y)

        Raises:
            ValueError: If steps is smaller than 1 or not exactly 4 points are given
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        if len(points) != 4:
            raise ValueError(f"cubic Bezier curve needs 4 points, got {len(points)}")
        if steps < _NUMPY_MIN_STEPS:
            return cls.polygonize_cubic_curve_python(points, steps)
        return cls.polygonize_cubic_curve_numpy(points, steps)

    @classmethod
    def sample(cls, a: Point, c1: Point, c2: Point, b: Point, step: float = DEFAULT_STEP) -> List[Point]:
        """
        Sample the cubic Bezier curve from _a_ to _b_ into a polyline.

        Samples t = 0, step, 2*step, ... with a fixed sample count of
        round(1 / step) + 1, the last sample being exactly t = 1.

        Args:
            a (Point): start point
            c1 (Point): first control point (outgoing handle of a)
            c2 (Point): second control point (incoming handle of b)
            b (Point): end point
            step (float, optional): parameter step. Defaults to 0.01 (101 samples).

        Returns:
            List[Point]: the samples; first == a, last == b
        """
        steps = cls.steps_from_step(step)
        polygon = cls.polygonize_cubic_curve((a, c1, c2, b), steps)
        samples = [Point(float(x), float(y)) for x, y in polygon]
        samples[0] = a
        samples[-1] = b
        return samples
