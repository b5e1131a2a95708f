import math

import pytest

from pythagorastree.model.geometry_primitives import Line, Point, Vector
from pythagorastree.model.surface import SegmentRecorder
from pythagorastree.model.tree import (
    TreeParameters,
    apex_point,
    build_tree,
    draw_subtree,
    rectangle_corners,
    rectangle_count,
    rectangle_edges,
    render,
    root_base,
)


def _distance(a: Point, b: Point) -> float:
    return math.dist((a.x, a.y), (b.x, b.y))


def _dot(u: Vector, v: Vector) -> float:
    return u.x * v.x + u.y * v.y


def test_root_base_is_centred_on_bottom_edge():
    params = TreeParameters(size=200, depth=0)

    left, right = root_base(params, 400, 300)

    assert left == Point(100, 300)
    assert right == Point(300, 300)


def test_depth_zero_draws_single_rectangle():
    params = TreeParameters(size=200, depth=0)

    segments = build_tree(params, 400, 400)

    assert len(segments) == 4
    assert segments[0] == Line(Point(100, 400), Point(300, 400))


def test_worked_example_depth_one():
    params = TreeParameters(size=200, depth=1)

    segments = build_tree(params, 400, 400)

    assert len(segments) == 12
    # root: bottom, right, left, top
    assert segments[:4] == [
        Line(Point(100, 400), Point(300, 400)),
        Line(Point(300, 400), Point(300, 200)),
        Line(Point(100, 400), Point(100, 200)),
        Line(Point(100, 200), Point(300, 200)),
    ]
    # left child stands on (top_left, apex), right child on (apex, top_right)
    assert segments[4] == Line(Point(100, 200), Point(200, 100))
    assert segments[8] == Line(Point(200, 100), Point(300, 200))


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 5, 8])
def test_rectangle_count(depth):
    segments = build_tree(TreeParameters(size=50, depth=depth), 800, 600)

    assert rectangle_count(depth) == 2 ** (depth + 1) - 1
    assert len(segments) == 4 * rectangle_count(depth)


@pytest.mark.parametrize("depth", [0, -1, -5])
def test_non_positive_depth_draws_root_only(depth):
    segments = build_tree(TreeParameters(size=100, depth=depth), 400, 400)

    assert len(segments) == 4
    assert rectangle_count(depth) == 1


@pytest.mark.parametrize("base", [
    ((100.0, 400.0), (300.0, 400.0)),
    ((0.0, 0.0), (3.0, 4.0)),
    ((10.0, -5.0), (-7.5, 12.25)),
    ((50.0, 50.0), (50.0, 20.0)),
])
def test_rectangle_corners_are_a_rotation_of_the_base(base):
    p, q = Point(*base[0]), Point(*base[1])

    top_left, top_right = rectangle_corners(p, q)

    base_length = _distance(p, q)
    assert math.isclose(_distance(top_left, p), base_length)
    assert math.isclose(_distance(top_right, q), base_length)
    assert math.isclose(_dot(top_left - p, q - p), 0.0, abs_tol=1e-9)
    assert math.isclose(_dot(top_right - q, q - p), 0.0, abs_tol=1e-9)
    # a true rectangle: the top edge is parallel to the base and of the same length
    top_edge = top_right - top_left
    assert (top_edge.x, top_edge.y) == pytest.approx(((q - p).x, (q - p).y))


def test_rectangle_corners_on_tilted_base():
    top_left, top_right = rectangle_corners(Point(10.0, -5.0), Point(-7.5, 12.25))

    assert top_left == Point(27.25, 12.5)
    assert top_right == Point(9.75, 29.75)


def test_rectangle_extends_up_from_bottom_edge():
    top_left, top_right = rectangle_corners(Point(0, 100), Point(50, 100))

    assert top_left.y < 100
    assert top_right.y < 100


def test_rectangle_edges_order():
    p, q = Point(0, 10), Point(10, 10)
    top_left, top_right = rectangle_corners(p, q)

    assert rectangle_edges(p, q) == [
        Line(p, q),
        Line(q, top_right),
        Line(p, top_left),
        Line(top_left, top_right),
    ]


def test_apex_without_offsets_is_right_isosceles():
    top_left, top_right = Point(100, 200), Point(300, 200)

    apex = apex_point(top_left, top_right)

    assert apex == Point(200, 100)
    middle = Point(200, 200)
    assert math.isclose(_distance(apex, middle), _distance(top_left, top_right) / 2)
    assert math.isclose(_distance(apex, top_left), _distance(apex, top_right))
    assert math.isclose(_dot(top_left - apex, top_right - apex), 0.0, abs_tol=1e-9)


def test_apex_on_tilted_edge():
    top_left, top_right = Point(0, 0), Point(6, 8)

    apex = apex_point(top_left, top_right)

    assert math.isclose(_distance(apex, Point(3, 4)), 5.0)
    assert math.isclose(_dot(top_left - apex, top_right - apex), 0.0, abs_tol=1e-9)


def test_apex_offsets_are_subtracted():
    top_left, top_right = Point(100, 200), Point(300, 200)

    assert apex_point(top_left, top_right, 15, -30) == Point(200 - 15, 100 + 30)


def test_offsets_shift_first_apex_and_leave_root_untouched():
    plain = build_tree(TreeParameters(size=200, depth=1), 400, 400)
    skewed = build_tree(TreeParameters(size=200, depth=1, x_offset=40, y_offset=-25), 400, 400)

    assert skewed[:4] == plain[:4]
    # bottom edges of the children end / start at the apex
    assert skewed[4].end == Point(plain[4].end.x - 40, plain[4].end.y + 25)
    assert skewed[8].start == Point(plain[8].start.x - 40, plain[8].start.y + 25)


def test_offsets_are_not_scaled_per_level():
    top_left, top_right = Point(0, 100), Point(10, 100)
    small = apex_point(top_left, top_right, 5, 5)
    small_plain = apex_point(top_left, top_right)

    top_left, top_right = Point(0, 100), Point(1000, 100)
    big = apex_point(top_left, top_right, 5, 5)
    big_plain = apex_point(top_left, top_right)

    assert small_plain - small == big_plain - big


def test_left_subtree_is_drawn_before_right():
    params = TreeParameters(size=200, depth=2)

    segments = build_tree(params, 400, 400)

    # root, then the left child with its two children, then the right child
    left_child_base = segments[4]
    right_child_base = segments[4 * 4]
    assert left_child_base.start == Point(100, 200)
    assert right_child_base.end == Point(300, 200)
    assert left_child_base.end == right_child_base.start


def test_both_branches_share_one_apex():
    emitted = []
    params = TreeParameters(size=120, depth=1, x_offset=7, y_offset=3)

    draw_subtree(Point(0, 500), Point(120, 500), params.depth, params, emitted.append)

    assert emitted[4].end == emitted[8].start


def test_degenerate_inputs_do_not_raise():
    zero = build_tree(TreeParameters(size=0, depth=3), 0, 0)
    assert len(zero) == 4 * rectangle_count(3)
    assert all(line.start == line.end == Point(0, 0) for line in zero)

    negative = build_tree(TreeParameters(size=-50, depth=2), 100, 100)
    assert len(negative) == 4 * rectangle_count(2)


def test_render_strokes_every_segment_on_the_surface():
    params = TreeParameters(size=80, depth=4, x_offset=3, y_offset=-2)
    surface = SegmentRecorder()

    result = render(params, surface, 640, 480)

    assert result is None
    assert (surface.width, surface.height) == (640, 480)
    assert surface.segments == build_tree(params, 640, 480)


def test_render_is_idempotent():
    params = TreeParameters(size=150, depth=6, x_offset=-12, y_offset=9)
    first, second = SegmentRecorder(), SegmentRecorder()

    render(params, first, 500, 500)
    render(params, second, 500, 500)
    assert first.segments == second.segments

    # rendering again on the same surface replaces, not appends
    render(params, first, 500, 500)
    assert first.segments == second.segments


def test_surface_size_is_read_on_every_render():
    params = TreeParameters(size=100, depth=2)
    surface = SegmentRecorder()

    render(params, surface, 400, 400)
    assert surface.segments[0] == Line(Point(150, 400), Point(250, 400))
    assert max(max(line.start.y, line.end.y) for line in surface.segments) == 400

    render(params, surface, 800, 600)
    assert surface.segments[0] == Line(Point(350, 600), Point(450, 600))
    assert max(max(line.start.y, line.end.y) for line in surface.segments) == 600
