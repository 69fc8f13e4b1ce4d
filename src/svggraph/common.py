"""Central module containing constants and definitions for graph rendering and spline geometry."""

from __future__ import annotations

from typing import Literal

###############################################################################
# Types
###############################################################################


DrawCmds = Literal[  # Type-Definition for draw commands handed to the SVG page
    # Rectangle (x, y, width, height) - frame and shaded side panels
    "rect",
    # Line (x1, y1, x2, y2) - horizontal reference line
    "line",
    # Text (x, y, text) - reference line label
    "text",
    # Polyline (points) - the sampled spline
    "polyline",
    # Circle (cx, cy, r) - debug mark of a joint
    "circle",
]


###############################################################################
# Canvas
###############################################################################

VIEWBOX_SIZE: float = 120.0  # viewBox="0 0 120 120"
CANVAS_PAD: float = 10.0  # x padding of domain coordinates
CANVAS_HEIGHT: float = VIEWBOX_SIZE - CANVAS_PAD  # y-flip axis (110)

DEFAULT_TARGET_ID = "svg-graph"

###############################################################################
# Spline
###############################################################################

DEFAULT_TENSION: float = 0.35  # scale of the cardinal tangent
DEFAULT_THRESHOLD: float = 3.0  # max |dy/dx| before the tangent is flattened
DEFAULT_STEP: float = 0.01  # bezier parameter step -> 101 samples per segment
ENDPOINT_LERP: float = 0.3  # endpoint control point: 30% towards the neighbor

JOINT_X_START: float = 25.0  # x of the first joint (domain space)
JOINT_X_SPAN: float = 50.0  # x distance between first and last joint
JOINT_Y_SCALE: float = 100.0  # joint values in [0, 1] -> [0, 100]

###############################################################################
# Styles
###############################################################################

STYLE_SIDE_PANEL = "fill:#11111122;stroke:none;"
STYLE_FRAME = "fill:none;stroke-width:0.4;stroke:black;"
STYLE_LINE_MINOR = "stroke:#111;stroke-width:0.05;"  # labels longer than one char
STYLE_LINE_MAJOR = "stroke:#666;stroke-width:0.2;"
STYLE_TEXT_MINOR = "font:2.5px serif;"
STYLE_TEXT_MAJOR = "font:4px serif;"
STYLE_SPLINE = "fill:none;stroke:red;stroke-width:0.4"
STYLE_DEBUG_CONTROL = "stroke:red;stroke-width:0.2;fill:none;"

TEXT_FILL = "blue"
TEXT_ANCHOR = "middle"
DEBUG_FILL = "red"
DEBUG_JOINT_RADIUS: float = 0.5
