"""Cardinal / square hybrid spline through an ordered sequence of joints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from svggraph.bezier import BezierCurve
from svggraph.common import DEFAULT_STEP, DEFAULT_TENSION, DEFAULT_THRESHOLD, ENDPOINT_LERP
from svggraph.geom import GeomMath, Point

logger = logging.getLogger(__name__)

ControlPointPair = Tuple[Point, Point]


@dataclass(frozen=True)
class Segment:
    """One cubic Bezier piece between two adjacent joints."""

    start: Point
    c1: Point
    c2: Point
    end: Point

    def sample(self, step: float = DEFAULT_STEP) -> List[Point]:
        """Sample this segment into a polyline, see BezierCurve.sample."""
        return BezierCurve.sample(self.start, self.c1, self.c2, self.end, step)


###############################################################################
# ControlPointSolver
###############################################################################
class ControlPointSolver:
    """Derives the Bezier control points of a joint from its two neighbors."""

    @staticmethod
    def solve(
        v0: Point,
        v1: Point,
        targ: Point,
        tension: float = DEFAULT_TENSION,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> ControlPointPair:
        """
        Calculate the control points of _targ_ using its two adjacent joints.

        Creates a cardinal or "square" spline depending on the slope towards
        each neighbor. If a neighbor is steeper than _threshold_ (|dy/dx|),
        the handle towards it is flattened to horizontal to avoid the curve
        overshooting. The handles stay mirrored through _targ_, but C1
        continuity is no longer guaranteed across the joint.

        The v0 check runs first and the v1 check second; if both trigger,
        the v1 result wins.

        Args:
            v0 (Point): the joint before targ
            v1 (Point): the joint after targ
            targ (Point): the joint to calculate control points for
            tension (float, optional): scale of the control point vectors. Defaults to 0.35.
            threshold (float, optional): max |dy/dx| ratio. Defaults to 3.

        Returns:
            Tuple[Point, Point]: (incoming, outgoing) control points of targ
        """
        # cardinal control points
        x = ((v1.x - v0.x) * tension) / 3 + targ.x
        y = ((v1.y - v0.y) * tension) / 3 + targ.y

        c1 = Point(x, y)
        c0 = GeomMath.reflect(c1, targ)

        # incoming slope
        if GeomMath.slope_ratio(v0, targ) > threshold:
            c0 = Point(v0.x, targ.y)
            c1 = GeomMath.reflect(c0, targ)

        # outgoing slope
        if GeomMath.slope_ratio(v1, targ) > threshold:
            c1 = Point(v1.x, targ.y)
            c0 = GeomMath.reflect(c1, targ)

        return c0, c1

    @staticmethod
    def endpoint(targ: Point, neighbor: Point, t: float = ENDPOINT_LERP) -> Point:
        """Single control point of a first or last joint: 30% of the way towards its only neighbor."""
        return GeomMath.lerp_point(targ, neighbor, t)


###############################################################################
# SplineBuilder
###############################################################################
class SplineBuilder:
    """Builds one continuous multi-segment spline through all joints."""

    @staticmethod
    def _check_joints(joints: Sequence[Point]) -> None:
        if len(joints) < 2:
            raise ValueError(f"spline needs at least 2 joints, got {len(joints)}")

    @classmethod
    def control_points(
        cls,
        joints: Sequence[Point],
        tension: float = DEFAULT_TENSION,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> List[Point]:
        """
        Control points of all joints as flat list [c_first, c0_1, c1_1, ..., c_last].

        The list has 2 * len(joints) - 2 entries, segment i uses
        entries 2*i and 2*i + 1.

        Raises:
            ValueError: If less than 2 joints are given
        """
        cls._check_joints(joints)

        controls = [ControlPointSolver.endpoint(joints[0], joints[1])]
        for i in range(1, len(joints) - 1):
            c0, c1 = ControlPointSolver.solve(joints[i - 1], joints[i + 1], joints[i], tension, threshold)
            controls.extend((c0, c1))
        controls.append(ControlPointSolver.endpoint(joints[-1], joints[-2]))
        return controls

    @classmethod
    def segments(
        cls,
        joints: Sequence[Point],
        tension: float = DEFAULT_TENSION,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> List[Segment]:
        """The spline as len(joints) - 1 cubic Bezier segments."""
        controls = cls.control_points(joints, tension, threshold)
        return [
            Segment(joints[i], controls[2 * i], controls[2 * i + 1], joints[i + 1]) for i in range(len(joints) - 1)
        ]

    @classmethod
    def build(
        cls,
        joints: Sequence[Point],
        tension: float = DEFAULT_TENSION,
        threshold: float = DEFAULT_THRESHOLD,
        step: float = DEFAULT_STEP,
    ) -> List[Point]:
        """
        Sample the spline through _joints_ into one flattened polyline.

        The samples of all segments are concatenated in order, so the joint
        shared by two segments appears twice (end of one, start of the next).

        Args:
            joints (Sequence[Point]): at least 2 joints in domain space
            tension (float, optional): Defaults to 0.35.
            threshold (float, optional): Defaults to 3.
            step (float, optional): Bezier parameter step. Defaults to 0.01.

        Returns:
            List[Point]: the polyline in domain space
        """
        polyline: List[Point] = []
        segments = cls.segments(joints, tension, threshold)
        for segment in segments:
            polyline.extend(segment.sample(step))
        logger.debug("spline: %d joints, %d segments, %d samples", len(joints), len(segments), len(polyline))
        return polyline
