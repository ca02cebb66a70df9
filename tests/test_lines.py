import math

import pytest

from flatgeom import (
    LINE_X_AXIS,
    LINE_Y_AXIS,
    ORIGIN,
    Line,
    Point,
    Ray,
    Segment,
    SlopeType,
    Vector,
    filter_points_on_ray,
    is_equal_pair,
    is_equal_points,
    rotate_or_translate_to_x_axis,
)


def test_vertical_line_scenario():
    line = Line(2, 0, 5)
    assert line.is_vertical()
    assert line.x_for_y(0) == pytest.approx(2.5)
    assert line.x_for_y(100) == pytest.approx(2.5)
    assert math.isnan(line.y_for_x(0))
    assert str(line) == "2x=5"


def test_horizontal_line():
    line = Line(0, 2, 5)
    assert line.is_horizontal()
    assert line.y_for_x(-40) == pytest.approx(2.5)
    assert math.isnan(line.x_for_y(0))
    assert str(line) == "2y=5"


@pytest.mark.parametrize(
    "abc, slope",
    [
        ((0, 0, 1), SlopeType.UNKNOWN),
        ((0, 3, 1), SlopeType.HORIZONTAL),
        ((3, 0, 1), SlopeType.VERTICAL),
        ((1, -1, 0), SlopeType.OBLIQUE_MIXED),
        ((-2, 5, 0), SlopeType.OBLIQUE_MIXED),
        ((1, 1, 0), SlopeType.OBLIQUE_SAME),
        ((-1, -4, 2), SlopeType.OBLIQUE_SAME),
        ((1e-12, 3, 1), SlopeType.HORIZONTAL),
        ((3, -1e-12, 1), SlopeType.VERTICAL),
    ],
)
def test_slope_classification(abc, slope):
    assert Line(*abc).slope is slope


def test_near_zero_coefficients_are_snapped():
    line = Line(1e-12, 3, -1e-10)
    assert line.abc() == (0.0, 3.0, 0.0)


def test_line_strings():
    assert str(Line(3, 5, 7)) == "3x+5y=7"
    assert str(Line(3, -5, 7)) == "3x-5y=7"
    assert str(Line(0, 0, 12)) == "0x+0y=12"


def test_unknown_line_reports_error():
    line = Line(0, 0, 12)
    assert line.is_unknown()
    err = line.or_err()
    assert err is not None and err.is_pos_inf
    assert math.isnan(line.x_for_y(1)) and math.isnan(line.y_for_x(1))
    # NaN in a coefficient wins over the degenerate direction
    assert Line(0, 0, math.nan).or_err().is_nan


def test_line_from_points_contains_both():
    p1, p2 = Point(2, 3), Point(4, 4)
    line = Line.from_points(p1, p2)
    for p in (p1, p2):
        assert line.a * p.x + line.b * p.y == pytest.approx(line.c)
    assert line.y_for_x(6) == pytest.approx(5.0)
    assert line.x_for_y(2) == pytest.approx(0.0)
    assert is_equal_pair(line.vector(), Vector(2, 1).normalize())


@pytest.mark.parametrize(
    "abc, angle",
    [
        ((2, 2, 0), 0.75 * math.pi),
        ((6, 2, 2), 1.8925468811868438),
        ((14, -42, 7), 0.3217505543958438),
        ((1, 0, 3), 0.5 * math.pi),
    ],
)
def test_line_angle(abc, angle):
    assert Line(*abc).angle() == pytest.approx(angle)


def test_line_normalization():
    unit = Line(2, 2, 0).normalize_unit()
    assert unit.abc() == pytest.approx((math.sqrt(0.5), math.sqrt(0.5), 0.0))

    nx = Line(4, 2, 8).normalize_x()
    assert nx.abc() == pytest.approx((1.0, 0.5, 2.0))
    ny = Line(4, 2, 8).normalize_y()
    assert ny.abc() == pytest.approx((2.0, 1.0, 4.0))

    # a horizontal line has no x normal form
    assert Line(0, 2, 5).normalize_x().or_err() is not None
    assert Line(2, 0, 5).normalize_y().or_err() is not None


@pytest.mark.parametrize(
    "abc",
    [(3, 4, 10), (-2, 5, 1), (14, -42, 7), (2, 0, 5), (0, -3, 6)],
)
def test_normalize_unit_is_idempotent(abc):
    line = Line(*abc)
    once = line.normalize_unit()
    twice = once.normalize_unit()
    assert math.hypot(once.a, once.b) == pytest.approx(1.0)
    assert twice.abc() == pytest.approx(once.abc())
    assert twice.slope is once.slope is line.slope
    for v in (-3.0, 0.0, 4.5):
        for fn in ("x_for_y", "y_for_x"):
            expected = getattr(line, fn)(v)
            assert getattr(once, fn)(v) == pytest.approx(expected, nan_ok=True)
            assert getattr(twice, fn)(v) == pytest.approx(expected, nan_ok=True)


def test_axis_constants():
    assert LINE_X_AXIS.is_horizontal()
    assert LINE_Y_AXIS.is_vertical()
    assert LINE_X_AXIS.y_for_x(12) == 0.0


def test_ray_normalizes_direction():
    ray = Ray(ORIGIN, Vector.from_theta(0.5).scale(10))
    assert ray.direction.magnitude() == pytest.approx(1.0)
    assert str(ray) == "Ray(Point({0, 0}), Vector(Point({0.877582562, 0.479425539})))"
    assert ray.angle() == pytest.approx(0.5)
    assert ray.invert().angle() == pytest.approx(0.5 + math.pi)
    assert Ray(ORIGIN, Vector(0, 0)).or_err().is_nan


def test_segment_accessors():
    seg = Segment(Point(5, 0), Point(0, 5))
    assert seg.length() == pytest.approx(7.0710678118655)
    assert seg.angle() == pytest.approx(0.75 * math.pi)
    assert str(seg) == "Segment(Point({5, 0}), Point({0, 5}))"
    assert seg.reverse() == Segment(Point(0, 5), Point(5, 0))
    assert seg.limits() == (0, 5, 0, 5)
    box = seg.bounding_box()
    assert box.min == Point(0, 0) and box.max == Point(5, 5)
    assert Segment.from_vector(Point(1, 1), Vector(2, 3)).end == Point(3, 4)


def test_segment_errors_prefer_nan():
    assert Segment(Point(0, 0), Point(1, 1)).or_err() is None
    err = Segment(Point(math.inf, 0), Point(math.nan, 1)).or_err()
    assert err.is_nan


def test_rotate_or_translate_to_x_axis():
    oblique = Line.from_points(Point(0, 1), Point(1, 2))
    for p in rotate_or_translate_to_x_axis(oblique, [Point(0, 1), Point(2, 3), Point(-4, -3)]):
        assert p.y == pytest.approx(0.0, abs=1e-9)

    moved = rotate_or_translate_to_x_axis(Line(0, 1, 3), [Point(5, 3), Point(1, 4)])
    assert moved == [Point(5, 0), Point(1, 1)]

    vertical = rotate_or_translate_to_x_axis(Line(1, 0, 2), [Point(2, 7), Point(2, -1)])
    assert all(p.y == pytest.approx(0.0, abs=1e-9) for p in vertical)

    pts = [Point(1, 2)]
    assert rotate_or_translate_to_x_axis(Line(0, 0, 1), pts) == pts


def test_filter_points_on_ray():
    ray = Ray(Point(1, 1), Vector(1, 0))
    pts = [Point(5, 1), Point(-5, 1), Point(1, 1), Point(3, 2)]
    assert filter_points_on_ray(ray, pts) == [Point(5, 1), Point(1, 1)]


def test_is_equal_points():
    a = Segment(Point(0, 0), Point(1, 1))
    assert is_equal_points(a, Segment(Point(0, 0), Point(1.000001, 1)))
    assert not is_equal_points(a, a.reverse())
