"""
Pythagoras Tree Construction
============================
Pure geometry of the fractal: every call builds the whole tree from scratch
out of the current parameters and surface size. Nothing is cached between
renders.

Each rectangle is given by its two base points. The two top corners are
derived by rotating the base by 90 degrees, then the top edge is split by an
apex point into the bases of the two child rectangles.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from pythagorastree.model.geometry_primitives import Line, Point, Vector
from pythagorastree.model.surface import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeParameters:
    """
    The four values a tree is drawn from.

    Attributes:
        size: Base length of the root rectangle in pixels.
        depth: Remaining recursion budget below the root rectangle.
        x_offset: Horizontal displacement subtracted from every apex point.
        y_offset: Vertical displacement subtracted from every apex point.
    """
    size: float = 200
    depth: int = 8
    x_offset: float = 0
    y_offset: float = 0


def rectangle_count(depth: int) -> int:
    """Number of rectangles in a full tree of the given depth."""
    return 2 ** (max(depth, 0) + 1) - 1


def root_base(params: TreeParameters, width: float, height: float) -> tuple[Point, Point]:
    """Base of the root rectangle: horizontally centred, lying on the bottom edge."""
    center_x = width / 2
    return (
        Point(center_x - params.size / 2, height),
        Point(center_x + params.size / 2, height),
    )


def rectangle_corners(base_left: Point, base_right: Point) -> tuple[Point, Point]:
    """
    Derive the top corners of the rectangle standing on the given base.

    Returns:
        (top_left, top_right). Both sides have the length of the base.
    """
    side = (base_right - base_left).perpendicular()
    return base_left + side, base_right + side


def rectangle_edges(base_left: Point, base_right: Point) -> list[Line]:
    """The four strokes of a rectangle: bottom, right, left, top."""
    top_left, top_right = rectangle_corners(base_left, base_right)
    return [
        Line(base_left, base_right),
        Line(base_right, top_right),
        Line(base_left, top_left),
        Line(top_left, top_right),
    ]


def apex_point(top_left: Point, top_right: Point, x_offset: float = 0.0, y_offset: float = 0.0) -> Point:
    """
    Third point of the triangle erected on the top edge.

    Without offsets this is the apex of the right isosceles triangle over the
    edge. The offsets are then subtracted as they are, whatever the level.
    """
    half = (top_right - top_left) / 2
    return top_left + half + half.perpendicular() - Vector(x_offset, y_offset)


def draw_subtree(
    base_left: Point,
    base_right: Point,
    depth: int,
    params: TreeParameters,
    emit: Callable[[Line], None],
) -> None:
    """
    Emit the rectangle on (base_left, base_right) and, while depth remains,
    both of its subtrees. The left subtree is emitted completely before the right one.
    """
    for edge in rectangle_edges(base_left, base_right):
        emit(edge)
    if depth <= 0:
        return

    top_left, top_right = rectangle_corners(base_left, base_right)
    apex = apex_point(top_left, top_right, params.x_offset, params.y_offset)
    draw_subtree(top_left, apex, depth - 1, params, emit)
    draw_subtree(apex, top_right, depth - 1, params, emit)


def build_tree(params: TreeParameters, width: float, height: float) -> list[Line]:
    """Return the segments of the whole tree, in stroke order, for a surface of the given size."""
    segments: list[Line] = []
    base_left, base_right = root_base(params, width, height)
    draw_subtree(base_left, base_right, params.depth, params, segments.append)
    return segments


def stroke_line(surface: Surface, line: Line) -> None:
    surface.begin_path()
    surface.move_to(line.start.x, line.start.y)
    surface.line_to(line.end.x, line.end.y)
    surface.stroke()
    surface.close_path()


def render(params: TreeParameters, surface: Surface, width: float, height: float) -> None:
    """
    Resize (and thereby clear) the surface and paint the complete tree on it.

    Args:
        params: Current tree parameters.
        surface: Target of the path commands.
        width: Current width of the drawable area.
        height: Current height of the drawable area.
    """
    surface.set_size(width, height)

    base_left, base_right = root_base(params, width, height)
    draw_subtree(base_left, base_right, params.depth, params, lambda line: stroke_line(surface, line))

    logger.debug(
        "Rendered %d rectangles (size=%s, depth=%s, offset=(%s, %s)) on %sx%s surface",
        rectangle_count(params.depth), params.size, params.depth,
        params.x_offset, params.y_offset, width, height,
    )
