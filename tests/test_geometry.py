import math

import pytest

from circumdraw.geometry import (
    Circle,
    circle_from_points,
    circle_vertices,
    parse_float,
    parse_int,
)


@pytest.mark.parametrize(
    "points",
    [
        ((0, 0), (2, 0), (0, 2)),
        ((100, 50), (300, 400), (700, 120)),
        ((-5, 3), (12, -8), (40, 40)),
    ],
)
def test_circle_passes_through_all_points(points):
    circle = circle_from_points(*points)
    assert isinstance(circle, Circle)
    for x, y in points:
        assert math.hypot(x - circle.center_x, y - circle.center_y) == pytest.approx(circle.radius)


def test_right_triangle_centre_is_hypotenuse_midpoint():
    circle = circle_from_points((0, 0), (4, 0), (0, 6))
    assert circle.center == pytest.approx((2.0, 3.0))


def test_point_order_does_not_matter():
    a = circle_from_points((10, 10), (50, 80), (90, 20))
    b = circle_from_points((90, 20), (10, 10), (50, 80))
    assert a.center == pytest.approx(b.center)
    assert a.radius == pytest.approx(b.radius)


@pytest.mark.parametrize(
    "points",
    [
        ((0, 0), (1, 1), (2, 2)),
        ((5, 5), (5, 5), (5, 5)),
        ((0, 3), (10, 3), (20, 3)),
    ],
)
def test_collinear_points_give_none(points):
    assert circle_from_points(*points) is None


def test_vertices_lie_on_circle():
    verts = circle_vertices(20.0, -7.0, 15.0, 200)
    assert len(verts) == 200
    for x, y in verts:
        assert math.hypot(x - 20.0, y + 7.0) == pytest.approx(15.0)


def test_first_vertex_is_at_angle_zero():
    verts = circle_vertices(3.0, 4.0, 5.0, 100)
    assert verts[0] == pytest.approx((8.0, 4.0))


def test_vertices_are_evenly_spaced():
    verts = circle_vertices(0.0, 0.0, 10.0, 12)
    gaps = [math.dist(verts[i], verts[(i + 1) % 12]) for i in range(12)]
    assert max(gaps) == pytest.approx(min(gaps))


def test_zero_steps_gives_no_vertices():
    assert circle_vertices(1.0, 1.0, 1.0, 0) == []


def test_negative_steps_rejected():
    with pytest.raises(ValueError):
        circle_vertices(0.0, 0.0, 1.0, -1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [("12", 12), ("  7", 7), ("-4", -4), ("15px", 15), ("", 0), ("abc", 0), (None, 0)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("2.5", 2.5), (" 3", 3.0), ("-1.5", -1.5), (".5", 0.5), ("4.0mm", 4.0), ("", 0.0), ("x", 0.0)],
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected