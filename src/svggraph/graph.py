"""Graph layout: builds the ordered list of immutable draw commands for a percentile graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, List, Mapping, Sequence, Tuple, Union

from svggraph.common import (
    CANVAS_HEIGHT,
    DEBUG_FILL,
    DEBUG_JOINT_RADIUS,
    DEFAULT_STEP,
    DEFAULT_TENSION,
    DEFAULT_THRESHOLD,
    JOINT_X_SPAN,
    JOINT_X_START,
    JOINT_Y_SCALE,
    STYLE_DEBUG_CONTROL,
    STYLE_FRAME,
    STYLE_LINE_MAJOR,
    STYLE_LINE_MINOR,
    STYLE_SIDE_PANEL,
    STYLE_SPLINE,
    STYLE_TEXT_MAJOR,
    STYLE_TEXT_MINOR,
    TEXT_ANCHOR,
    TEXT_FILL,
    DrawCmds,
)
from svggraph.geom import Box, CoordinateMapper, Point
from svggraph.spline import SplineBuilder

logger = logging.getLogger(__name__)

# Frame geometry inside the 120x120 viewbox
FRAME_LEFT_PANEL = Box(9, 9, 26, 102)
FRAME_RIGHT_PANEL = Box(85, 9, 26, 102)
FRAME_BORDER = Box(9, 9, 102, 102)
LINE_X1: float = 9
LINE_X2: float = 111
LABEL_LEFT_X: float = 22
LABEL_RIGHT_X: float = 98


###############################################################################
# Draw commands
###############################################################################
@dataclass(frozen=True)
class Rect:
    """Rectangle draw command."""

    kind: ClassVar[DrawCmds] = "rect"

    box: Box
    style: str
    debug: bool = False


@dataclass(frozen=True)
class Line:
    """Straight line draw command."""

    kind: ClassVar[DrawCmds] = "line"

    x1: float
    y1: float
    x2: float
    y2: float
    style: str
    debug: bool = False


@dataclass(frozen=True)
class Text:
    """Text draw command, anchored at (x, y)."""

    kind: ClassVar[DrawCmds] = "text"

    x: float
    y: float
    text: str
    style: str
    anchor: str = TEXT_ANCHOR
    fill: str = TEXT_FILL
    debug: bool = False


@dataclass(frozen=True)
class Polyline:
    """
    Polyline draw command.

    Attributes:
        points (Tuple[Tuple[str, str], ...]): canvas-space coordinates, already
            formatted with 2 decimal digits
        style (str): inline SVG style
        debug (bool): True if the command belongs to the debug layer
    """

    kind: ClassVar[DrawCmds] = "polyline"

    points: Tuple[Tuple[str, str], ...]
    style: str
    debug: bool = False

    @property
    def points_string(self) -> str:
        """The SVG points attribute: "x.xx,y.yy" pairs separated by single spaces."""
        return " ".join(f"{x},{y}" for x, y in self.points)

    @classmethod
    def from_domain(cls, points: Sequence[Point], style: str, debug: bool = False) -> Polyline:
        """Create a polyline from domain-space points."""
        return cls(tuple(CoordinateMapper.points_to_pairs(points)), style, debug)


@dataclass(frozen=True)
class Circle:
    """Circle draw command (canvas space)."""

    kind: ClassVar[DrawCmds] = "circle"

    cx: float
    cy: float
    r: float
    fill: str
    debug: bool = False


DrawCommand = Union[Rect, Line, Text, Polyline, Circle]


###############################################################################
# Helpers
###############################################################################
def format_number(value: float) -> str:
    """Format a number the way it is printed on the graph: 75 not 75.0, 12.5 stays 12.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def joints_from_values(values: Sequence[float]) -> List[Point]:
    """
    Place the values as joints in domain space.

    Joint i sits at x = 25 + i * 50 / (n - 1) and y = 100 * values[i].

    Raises:
        ValueError: If less than 2 values are given
    """
    if len(values) < 2:
        raise ValueError(f"graph needs at least 2 values, got {len(values)}")
    dist = JOINT_X_SPAN / (len(values) - 1)
    return [Point(JOINT_X_START + i * dist, JOINT_Y_SCALE * value) for i, value in enumerate(values)]


###############################################################################
# GraphBuilder
###############################################################################
@dataclass(frozen=True)
class GraphConfig:
    """Parameters of a graph: spline shape and debug output."""

    tension: float = DEFAULT_TENSION
    threshold: float = DEFAULT_THRESHOLD
    step: float = DEFAULT_STEP
    debug: bool = False


class GraphBuilder:
    """Builds the draw commands of a graph: frame, reference lines with labels, spline."""

    def __init__(self, config: GraphConfig = GraphConfig()):
        self.config = config

    def frame(self) -> List[DrawCommand]:
        """Shaded side panels and the border."""
        return [
            Rect(FRAME_LEFT_PANEL, STYLE_SIDE_PANEL),
            Rect(FRAME_RIGHT_PANEL, STYLE_SIDE_PANEL),
            Rect(FRAME_BORDER, STYLE_FRAME),
        ]

    def reference_line(self, label: str, value: float) -> List[DrawCommand]:
        """
        A horizontal line at _value_ with the label on the left and "value%" on the right.

        Labels longer than one character get a thin dark line and small text.
        """
        y = CANVAS_HEIGHT - value
        minor = len(label) > 1
        text_style = STYLE_TEXT_MINOR if minor else STYLE_TEXT_MAJOR
        return [
            Line(LINE_X1, y, LINE_X2, y, STYLE_LINE_MINOR if minor else STYLE_LINE_MAJOR),
            Text(LABEL_LEFT_X, y - 1, label, text_style),
            Text(LABEL_RIGHT_X, y - 1, f"{format_number(value)}%", text_style),
        ]

    def spline(self, values: Sequence[float]) -> List[DrawCommand]:
        """The spline through _values_ plus, in debug mode, its joints and control handles."""
        joints = joints_from_values(values)
        polyline = SplineBuilder.build(joints, self.config.tension, self.config.threshold, self.config.step)
        commands: List[DrawCommand] = [Polyline.from_domain(polyline, STYLE_SPLINE)]

        if self.config.debug:
            for joint in joints:
                mapped = CoordinateMapper.map_point(joint)
                commands.append(Circle(mapped.x, mapped.y, DEBUG_JOINT_RADIUS, DEBUG_FILL, debug=True))
            controls = SplineBuilder.control_points(joints, self.config.tension, self.config.threshold)
            for i in range(1, len(joints) - 1):
                handle = (controls[2 * i - 1], joints[i], controls[2 * i])
                commands.append(Polyline.from_domain(handle, STYLE_DEBUG_CONTROL, debug=True))
        return commands

    def build(self, reference_lines: Mapping[str, float], values: Sequence[float]) -> List[DrawCommand]:
        """
        All draw commands of the graph in drawing order.

        Args:
            reference_lines (Mapping[str, float]): label -> height (0..100) of a horizontal line
            values (Sequence[float]): at least 2 values in [0, 1] the spline passes through

        Returns:
            List[DrawCommand]: frame, reference lines, spline (and debug marks)
        """
        commands = self.frame()
        for label, value in reference_lines.items():
            commands.extend(self.reference_line(label, value))
        commands.extend(self.spline(values))
        logger.debug("graph: %d reference lines, %d draw commands", len(reference_lines), len(commands))
        return commands
