"""SVG page the graph draw commands are rendered onto."""

from __future__ import annotations

import copy
import gzip
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Sequence, Union

import svgwrite
import svgwrite.base
import svgwrite.container
from svgwrite.extensions import Inkscape

from svggraph.common import DEFAULT_TARGET_ID, VIEWBOX_SIZE
from svggraph.graph import Circle, DrawCommand, GraphBuilder, GraphConfig, Line, Polyline, Rect, Text

logger = logging.getLogger(__name__)


class RenderTargetError(LookupError):
    """Raised if a graph should be drawn into a render target the page does not have."""

    def __init__(self, target_id: str):
        super().__init__(f'Unable to draw graph! No element with id "{target_id}"')
        self.target_id = target_id


@dataclass
class SvgGraphPage:
    """A page (canvas) described by SVG with a 120x120 viewbox to draw the graph into.

    The viewbox uses SVG coordinates (left-to-right and top-to-bottom); the
    y-flip of the graph is done by the CoordinateMapper.
    Contains groups/layers:
        - main       -- editable->locked=False  --  hidden->display="block"
            - <targets>  -- (group) render targets, "svg-graph" by default
        - debug      -- editable->locked=False  --  hidden->display="none"
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group
    targets: Dict[str, svgwrite.container.Group]

    def __init__(
        self,
        canvas_width_mm: float = VIEWBOX_SIZE,
        canvas_height_mm: float = VIEWBOX_SIZE,
        target_ids: Sequence[str] = (DEFAULT_TARGET_ID,),
    ):
        """
        Initialize the SVG page.

        Args:
            canvas_width_mm (float, optional): The width of the canvas in millimeters. Defaults to 120.
            canvas_height_mm (float, optional): The height of the canvas in millimeters. Defaults to 120.
            target_ids (Sequence[str], optional): ids of the render target groups. Defaults to ("svg-graph",).
        """
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{canvas_width_mm}mm", f"{canvas_height_mm}mm"),
            viewBox=f"0 0 {VIEWBOX_SIZE:g} {VIEWBOX_SIZE:g}",
            profile="full",
        )

        # Initialize Inkscape extension for layer support
        self._inkscape = Inkscape(self.drawing)

        # Define layers
        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

        self.targets = {}
        for target_id in target_ids:
            self.add_target(target_id)

    def add_target(self, target_id: str) -> svgwrite.container.Group:
        """Add a render target group with the given id to the main layer (or return the existing one)."""
        if target_id not in self.targets:
            self.targets[target_id] = self.main_layer.add(self.drawing.g(id=target_id))
        return self.targets[target_id]

    def target(self, target_id: str) -> svgwrite.container.Group:
        """
        The render target group with the given id.

        Raises:
            RenderTargetError: If the page has no such target
        """
        group = self.targets.get(target_id)
        if group is None:
            raise RenderTargetError(target_id)
        return group

    def element(self, command: DrawCommand) -> svgwrite.base.BaseElement:
        """Create the SVG element for a draw command."""
        if isinstance(command, Rect):
            return self.drawing.rect(
                insert=(command.box.x, command.box.y),
                size=(command.box.width, command.box.height),
                style=command.style,
            )
        if isinstance(command, Line):
            return self.drawing.line(start=(command.x1, command.y1), end=(command.x2, command.y2), style=command.style)
        if isinstance(command, Text):
            return self.drawing.text(
                command.text,
                insert=(command.x, command.y),
                style=command.style,
                text_anchor=command.anchor,
                fill=command.fill,
            )
        if isinstance(command, Polyline):
            # points are preformatted strings, svgwrite joins them as "x,y x,y ..."
            return self.drawing.polyline(points=list(command.points), style=command.style)
        if isinstance(command, Circle):
            return self.drawing.circle(center=(command.cx, command.cy), r=command.r, fill=command.fill)
        raise ValueError(f"Unknown draw command {command!r}")

    def draw(self, commands: Iterable[DrawCommand], target_id: str = DEFAULT_TARGET_ID) -> int:
        """Render draw commands into the target; debug commands go to the debug layer.

        Args:
            commands (Iterable[DrawCommand]): commands in drawing order
            target_id (str, optional): id of the render target. Defaults to "svg-graph".

        Returns:
            int: number of rendered commands

        Raises:
            RenderTargetError: If the page has no such target
        """
        group = self.target(target_id)
        count = 0
        for command in commands:
            element = self.element(command)
            if command.debug:
                self.debug_layer.add(element)
            else:
                group.add(element)
            count += 1
        logger.debug("rendered %d draw commands into %r", count, target_id)
        return count

    def draw_graph(
        self,
        reference_lines: Mapping[str, float],
        values: Sequence[float],
        target_id: str = DEFAULT_TARGET_ID,
        config: Optional[GraphConfig] = None,
    ) -> int:
        """
        Draw a graph: frame, reference lines with labels and the spline through _values_.

        The render target is checked before any geometry is computed.

        Args:
            reference_lines (Mapping[str, float]): label -> height (0..100) of a horizontal line
            values (Sequence[float]): at least 2 values in [0, 1]
            target_id (str, optional): id of the render target. Defaults to "svg-graph".
            config (GraphConfig, optional): spline parameters. Defaults to GraphConfig().

        Returns:
            int: number of rendered commands
        """
        self.target(target_id)
        commands = GraphBuilder(config or GraphConfig()).build(reference_lines, values)
        return self.draw(commands, target_id)

    def assemble(self, include_debug_layer: bool = False) -> svgwrite.Drawing:
        """Assemble a copy of the drawing with its layers; the page itself stays unchanged."""
        return self.assemble_tree(
            copy.deepcopy(self.drawing),
            copy.deepcopy(self.main_layer),
            copy.deepcopy(self.debug_layer),
            include_debug_layer,
        )

    def tostring(self, include_debug_layer: bool = False) -> str:
        """The page as SVG string."""
        return self.assemble(include_debug_layer).tostring()

    def save_as(
        self,
        filename: Union[str, Path],
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        drawing_for_save = self.assemble(include_debug_layer)

        # setup IO:
        svg_buffer = io.StringIO()
        drawing_for_save.write(svg_buffer, pretty=pretty, indent=indent)
        output_data = svg_buffer.getvalue().encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        # save file:
        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)
        logger.info("saved %s (%d bytes)", filename, len(output_data))

    @classmethod
    def assemble_tree(
        cls,
        drawing: svgwrite.Drawing,
        main_layer: svgwrite.container.Group,
        debug_layer: Optional[svgwrite.container.Group] = None,
        include_debug_layer: bool = False,
    ) -> svgwrite.Drawing:
        """Assemble a tree out of the given SVG elements.

        Args:
            drawing (svgwrite.Drawing): The main SVG drawing element.
            main_layer (svgwrite.container.Group): The main layer of the drawing.
            debug_layer (svgwrite.container.Group): The debug layer of the drawing.
            include_debug_layer (bool, optional): Include the debug layer in the tree. Defaults to False.

        Returns:
            svgwrite.Drawing: The given drawing with assembled SVG drawing elements.
        """
        drawing.add(main_layer)
        if include_debug_layer and debug_layer is not None:
            drawing.add(debug_layer)
        return drawing


def main():
    """Main"""

    output_filename = Path("data/output/example/svg/svg_graph.svg")
    output_filename.parent.mkdir(parents=True, exist_ok=True)

    reference_lines = {"Q1": 25, "Median": 50, "Q3": 75, "P10": 10, "P90": 90, "A": 100, "F": 0}
    values = [0.05, 0.22, 0.48, 0.81, 0.97]

    page = SvgGraphPage()
    page.draw_graph(reference_lines, values, config=GraphConfig(debug=True))

    print(f"save file {output_filename} ...")
    page.save_as(output_filename, include_debug_layer=True, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
