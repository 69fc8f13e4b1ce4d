"""Test module for svggraph.graph

The tests are run using pytest.
These tests ensure that the graph draw commands keep their layout,
styling and order after changes and refactoring.
"""

import pytest

from svggraph.geom import Box, Point
from svggraph.graph import (
    Circle,
    GraphBuilder,
    GraphConfig,
    Line,
    Polyline,
    Rect,
    Text,
    format_number,
    joints_from_values,
)

###############################################################################
# Helper Tests
###############################################################################


class TestHelpers:
    """Test joint placement and number formatting."""

    def test_joints_from_values_three(self):
        """Three values span x from 25 to 75, y scaled by 100."""
        joints = joints_from_values([0.0, 0.5, 1.0])
        assert joints == [Point(25, 0), Point(50, 50), Point(75, 100)]

    def test_joints_from_values_five(self):
        """Joints are evenly spaced over a width of 50."""
        joints = joints_from_values([0.1, 0.25, 0.5, 0.75, 0.9])
        assert [joint.x for joint in joints] == [25, 37.5, 50, 62.5, 75]
        assert joints[1].y == pytest.approx(25.0)

    def test_joints_from_values_too_few(self):
        """At least two values are needed."""
        with pytest.raises(ValueError):
            joints_from_values([0.5])

    @pytest.mark.parametrize(
        "value, expected",
        [(75, "75"), (75.0, "75"), (12.5, "12.5"), (0, "0"), (-3.0, "-3")],
    )
    def test_format_number(self, value, expected):
        """Integral values print without a fractional part."""
        assert format_number(value) == expected


###############################################################################
# GraphBuilder Tests
###############################################################################


class TestGraphBuilder:
    """Test the draw commands of a graph."""

    reference_lines = {"Q1": 25, "M": 50}
    values = [0.0, 0.5, 1.0]

    def test_command_order(self):
        """Frame, then line + two texts per reference line, then the spline."""
        commands = GraphBuilder().build(self.reference_lines, self.values)
        kinds = [command.kind for command in commands]
        assert kinds == ["rect"] * 3 + ["line", "text", "text"] * 2 + ["polyline"]

    def test_frame(self):
        """Two shaded side panels and a border."""
        rects = GraphBuilder().frame()
        assert [rect.box for rect in rects] == [Box(9, 9, 26, 102), Box(85, 9, 26, 102), Box(9, 9, 102, 102)]
        assert rects[0].style == "fill:#11111122;stroke:none;"
        assert rects[2].style == "fill:none;stroke-width:0.4;stroke:black;"

    def test_reference_line_long_label(self):
        """Labels longer than one character: thin dark line, small text."""
        line, left, right = GraphBuilder().reference_line("Q1", 25)
        assert line == Line(9, 85, 111, 85, "stroke:#111;stroke-width:0.05;")
        assert left == Text(22, 84, "Q1", "font:2.5px serif;")
        assert right == Text(98, 84, "25%", "font:2.5px serif;")

    def test_reference_line_short_label(self):
        """Single character labels: thicker grey line, large text."""
        line, left, right = GraphBuilder().reference_line("M", 50)
        assert line.style == "stroke:#666;stroke-width:0.2;"
        assert left.style == right.style == "font:4px serif;"
        assert left.anchor == "middle"
        assert left.fill == "blue"
        assert right.text == "50%"

    def test_spline_polyline(self):
        """The spline is one polyline from the first to the last mapped joint."""
        commands = GraphBuilder().spline(self.values)
        assert len(commands) == 1
        polyline = commands[0]
        assert isinstance(polyline, Polyline)
        assert polyline.style == "fill:none;stroke:red;stroke-width:0.4"
        assert len(polyline.points) == 2 * 101
        assert polyline.points[0] == ("35.00", "110.00")
        assert polyline.points[101] == ("60.00", "60.00")
        assert polyline.points[-1] == ("85.00", "10.00")

    def test_points_string(self):
        """The points string joins "x.xx,y.yy" pairs with single spaces."""
        polyline = GraphBuilder().spline(self.values)[0]
        points_string = polyline.points_string
        assert points_string.startswith("35.00,110.00 ")
        assert points_string.endswith(" 85.00,10.00")
        assert len(points_string.split(" ")) == 202
        assert points_string == points_string.strip()

    def test_points_round_ties_away_from_zero(self):
        """Seventeen values put joint 1 at x=28.125, serialized as 38.13."""
        values = [i / 16 for i in range(17)]
        polyline = GraphBuilder().spline(values)[0]
        assert polyline.points[101] == ("38.13", "103.75")
        assert "38.13,103.75" in polyline.points_string

    def test_config_reaches_spline(self):
        """The step of the configuration controls the sample count."""
        polyline = GraphBuilder(GraphConfig(step=0.1)).spline(self.values)[0]
        assert len(polyline.points) == 2 * 11

    def test_debug_marks(self):
        """Debug mode adds a circle per joint and a handle per interior joint, flagged as debug."""
        commands = GraphBuilder(GraphConfig(debug=True)).spline(self.values)
        circles = [command for command in commands if isinstance(command, Circle)]
        handles = [command for command in commands if isinstance(command, Polyline) and command.debug]
        assert len(circles) == 3
        assert len(handles) == 1
        assert all(circle.debug for circle in circles)
        assert (circles[0].cx, circles[0].cy) == (35, 110)
        assert handles[0].points[1] == ("60.00", "60.00")
        assert not commands[0].debug

    def test_no_debug_marks_by_default(self):
        """Without debug mode no debug commands are produced."""
        commands = GraphBuilder().build(self.reference_lines, self.values)
        assert not any(command.debug for command in commands)

    def test_commands_are_immutable(self):
        """Draw commands are frozen."""
        command = GraphBuilder().frame()[0]
        assert isinstance(command, Rect)
        with pytest.raises(AttributeError):
            command.style = "fill:none;"  # type: ignore[misc]
