"""Parametric curves and cubic Bezier curves.

A :class:`ParamCurve` is nothing more than a pair of derivable polynomials
and a parameter domain. :class:`Bezier` keeps its four control points and
the two cubics derived from them, and offers the heavier analysis used by
the intersection layer: canonical alignment, curve classification,
inflection points and subdivision.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .config import IntersectionConfig, get_intersection_config
from .numbers import clamp, divide, first_error, human_format, is_equal, is_zero
from .points import (
    ORIGIN,
    Point,
    Vector,
    limits_points,
    rotate_points,
    scale_points,
    translate_points,
)
from .polynomials import Cubic, Linear, Quadratic, Quartic
from .quadrature import integrate
from .shapes import Polygon, Rectangle
from .types import Derivable, NonRealValueError

BEZIER_CUBIC_MATRIX = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [-3.0, 3.0, 0.0, 0.0],
        [3.0, -6.0, 3.0, 0.0],
        [-1.0, 3.0, -3.0, 1.0],
    ]
)
BEZIER_CUBIC_MATRIX.setflags(write=False)


def _cubic_coefficients(values: Sequence[float]) -> Tuple[float, float, float, float]:
    # reversed control values times the basis gives (a, b, c, d), highest first
    a, b, c, d = np.asarray(values, dtype=float)[::-1] @ BEZIER_CUBIC_MATRIX
    return float(a), float(b), float(c), float(d)


def _bernstein_coefficients(values: Sequence[float]) -> List[float]:
    """Power-basis coefficients (highest first) of a Bernstein polynomial."""

    n = len(values) - 1
    basis = np.zeros((n + 1, n + 1))
    for j in range(n + 1):
        for i in range(j + 1):
            basis[j, i] = math.comb(n, j) * math.comb(j, i) * (-1) ** (j - i)
    return [float(v) for v in (basis @ np.asarray(values, dtype=float))[::-1]]


def _snap_roots(roots: Sequence[float], lo: float, hi: float) -> List[float]:
    kept: List[float] = []
    for root in roots:
        if is_zero(root - lo):
            root = lo
        elif is_zero(hi - root):
            root = hi
        if lo <= root <= hi:
            kept.append(root)
    return kept


def _arc_length(dx: Derivable, dy: Derivable, lo: float, hi: float) -> float:
    return integrate(lambda t: math.hypot(dx.at(t), dy.at(t)), lo, hi)


def _search_length(
    prefix_length: Callable[[float], float],
    total: float,
    target: float,
    lo: float,
    hi: float,
    config: IntersectionConfig,
) -> float:
    """Find the parameter whose prefix length is close to *target*.

    Damped proportional search: the guess moves by the length error as a
    fraction of the total, scaled by a window that shrinks every step.
    """

    if target <= 0 or total <= 0:
        return lo
    if target >= total:
        return hi
    span = hi - lo
    t = lo + span * target / total
    window = 1.0
    while window > config.split_length_tolerance:
        error = (target - prefix_length(t)) / total
        t = clamp(lo, t + error * span * window, hi)
        window *= config.split_length_shrink
    return t


@dataclass(frozen=True)
class ParamCurve:
    x: Derivable
    y: Derivable
    t_min: float = 0.0
    t_max: float = 1.0

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            if not isinstance(getattr(self, name), Derivable):
                raise TypeError(f"ParamCurve component {name!r} must be derivable")

    def point_at(self, t: float) -> Point:
        t = clamp(self.t_min, t, self.t_max)
        return Point(self.x.at(t), self.y.at(t))

    def tangent_at(self, t: float) -> Tuple[Vector, Vector]:
        """Unit tangent and unit normal at *t*."""

        t = clamp(self.t_min, t, self.t_max)
        tangent = Vector(self.x.derivative().at(t), self.y.derivative().at(t)).normalize()
        return tangent, tangent.rotate(0.5 * math.pi)

    def roots(self) -> Tuple[List[float], List[float]]:
        return (
            _snap_roots(self.x.roots(), self.t_min, self.t_max),
            _snap_roots(self.y.roots(), self.t_min, self.t_max),
        )

    def bounding_box(self) -> Rectangle:
        candidates = [self.t_min, self.t_max]
        candidates += self.x.derivative().roots()
        candidates += self.y.derivative().roots()
        pts = [self.point_at(t) for t in candidates if self.t_min <= t <= self.t_max]
        min_x, max_x, min_y, max_y = limits_points(pts)
        return Rectangle(Point(min_x, min_y), Point(max_x, max_y))

    def length(self) -> float:
        return _arc_length(self.x.derivative(), self.y.derivative(), self.t_min, self.t_max)

    def approx_length(self, steps: int) -> float:
        """Sum of *steps* chords; always at most :meth:`length`."""

        if steps <= 0:
            raise ValueError(f"steps must be positive, got {steps}")
        span = self.t_max - self.t_min
        prev = self.point_at(self.t_min)
        total = 0.0
        for h in range(1, steps + 1):
            curr = self.point_at(self.t_min + span * h / steps)
            total += prev.distance_to(curr)
            prev = curr
        return total

    def split_at(self, t: float) -> Tuple["ParamCurve", "ParamCurve"]:
        t = clamp(self.t_min, t, self.t_max)
        return (
            ParamCurve(self.x, self.y, self.t_min, t),
            ParamCurve(self.x, self.y, t, self.t_max),
        )

    def split_at_length(
        self, target: float, *, config: Optional[IntersectionConfig] = None
    ) -> Tuple["ParamCurve", "ParamCurve"]:
        config = config or get_intersection_config()
        dx, dy = self.x.derivative(), self.y.derivative()
        t = _search_length(
            lambda u: _arc_length(dx, dy, self.t_min, u),
            self.length(),
            target,
            self.t_min,
            self.t_max,
            config,
        )
        return self.split_at(t)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error(
            list(self.x.coefficients()) + list(self.y.coefficients()) + [self.t_min, self.t_max]
        )

    def __str__(self) -> str:
        return (
            f"Curve({self.x.text('t', False)}, {self.y.text('t', False)}, t, "
            f"{human_format(self.t_min)}, {human_format(self.t_max)})"
        )


def param_linear(p1: Point, p2: Point) -> ParamCurve:
    xs = _bernstein_coefficients([p1.x, p2.x])
    ys = _bernstein_coefficients([p1.y, p2.y])
    return ParamCurve(Linear(*xs), Linear(*ys))


def param_quadratic(p1: Point, p2: Point, p3: Point) -> ParamCurve:
    xs = _bernstein_coefficients([p1.x, p2.x, p3.x])
    ys = _bernstein_coefficients([p1.y, p2.y, p3.y])
    return ParamCurve(Quadratic(*xs), Quadratic(*ys))


def param_cubic(p1: Point, p2: Point, p3: Point, p4: Point) -> ParamCurve:
    """Cubic Bezier as a plain parametric curve; see :class:`Bezier` for more."""

    xs = _cubic_coefficients([p1.x, p2.x, p3.x, p4.x])
    ys = _cubic_coefficients([p1.y, p2.y, p3.y, p4.y])
    return ParamCurve(Cubic(*xs), Cubic(*ys))


def param_quartic(p1: Point, p2: Point, p3: Point, p4: Point, p5: Point) -> ParamCurve:
    pts = (p1, p2, p3, p4, p5)
    xs = _bernstein_coefficients([p.x for p in pts])
    ys = _bernstein_coefficients([p.y for p in pts])
    return ParamCurve(Quartic(*xs), Quartic(*ys))


class BezierCurveType(Enum):
    """Canonical classification of a cubic Bezier (see pomax, bezierinfo#canonical)."""

    PLAIN = "plain"
    LOOP = "loop"
    LOOP_BEGIN = "loop-begin"
    LOOP_END = "loop-end"
    CUSP = "cusp"
    SINGLE_INFLECTION = "single-inflection"
    DOUBLE_INFLECTION = "double-inflection"


class Bezier:
    """Cubic Bezier curve over ``t`` in ``[0, 1]``."""

    def __init__(self, p1: Point, p2: Point, p3: Point, p4: Point):
        self._points: Tuple[Point, Point, Point, Point] = (p1, p2, p3, p4)
        self._x = Cubic(*_cubic_coefficients([p.x for p in self._points]))
        self._y = Cubic(*_cubic_coefficients([p.y for p in self._points]))

    @property
    def x(self) -> Cubic:
        return self._x

    @property
    def y(self) -> Cubic:
        return self._y

    @property
    def begin(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[3]

    def points(self) -> List[Point]:
        return list(self._points)

    def point_at(self, t: float) -> Point:
        return Point(self._x.at(t), self._y.at(t))

    def tangent_at(self, t: float) -> Tuple[Vector, Vector]:
        """Tangent (not normalised) and the matching normal at *t*."""

        i, j = self._x.derivative().at(t), self._y.derivative().at(t)
        return Vector(i, j), Vector(-j, i)

    def roots(self) -> Tuple[List[float], List[float]]:
        return _snap_roots(self._x.roots(), 0.0, 1.0), _snap_roots(self._y.roots(), 0.0, 1.0)

    def bounding_box(self) -> Rectangle:
        candidates = [0.0, 1.0] + self._x.derivative().roots() + self._y.derivative().roots()
        pts = [self.point_at(t) for t in candidates if 0.0 <= t <= 1.0]
        min_x, max_x, min_y, max_y = limits_points(pts)
        return Rectangle(Point(min_x, min_y), Point(max_x, max_y))

    def fast_box(self) -> Rectangle:
        """Box around the control points; cheap and never smaller than the curve."""

        min_x, max_x, min_y, max_y = limits_points(self._points)
        return Rectangle(Point(min_x, min_y), Point(max_x, max_y))

    def align_on_x(self) -> Tuple[Vector, float, float, "Bezier"]:
        """Move the curve so it starts at the origin and ends on ``(1, 0)``.

        Returns the translation, the rotation angle, the scale and the aligned
        curve. When the end points coincide the scale is zero and no scaling
        is applied.
        """

        translate = self._points[0].vector_to(ORIGIN)
        pts = translate_points(translate, self._points)
        theta = -ORIGIN.vector_to(pts[3]).angle()
        pts = rotate_points(theta, ORIGIN, pts)
        scale = pts[3].x
        if not is_zero(scale):
            pts = scale_points(Vector(1.0 / scale, 1.0 / scale), pts)
        return translate, theta, scale, Bezier(*pts)

    def tight_box(self) -> Polygon:
        """Oriented bounding box, aligned with the chord from begin to end."""

        translate, theta, scale, aligned = self.align_on_x()
        box = aligned.bounding_box()
        lo, hi = box.min, box.max
        corners = [lo, Point(hi.x, lo.y), hi, Point(lo.x, hi.y)]
        if not is_zero(scale):
            corners = scale_points(Vector(scale, scale), corners)
        corners = rotate_points(-theta, ORIGIN, corners)
        corners = translate_points(translate.invert(), corners)
        return Polygon(*corners)

    def curve_type(self) -> BezierCurveType:
        pts = translate_points(self._points[0].vector_to(ORIGIN), self._points)
        x2, y2 = pts[1].units()
        x3, y3 = pts[2].units()
        x4, y4 = pts[3].units()

        y42 = divide(y4, y2)
        y32 = divide(y3, y2)
        x = divide(x4 - x2 * y42, x3 - x2 * y32)
        y = y42 + x * (1 - y32)

        if y > 1:
            return BezierCurveType.SINGLE_INFLECTION
        if y <= 1 and x <= 1:
            cusp = (-x * x + 2 * x + 3) / 4
            if x <= 0:
                loop_begin = (-x * x + 3 * x) / 3
                if is_equal(y, loop_begin):
                    return BezierCurveType.LOOP_BEGIN
                if loop_begin < y < cusp:
                    return BezierCurveType.LOOP
            if 0 <= x <= 1:
                loop_end = (math.sqrt(3) * math.sqrt(4 * x - x * x) - x) / 2
                if is_equal(y, loop_end):
                    return BezierCurveType.LOOP_END
                if loop_end < y < cusp:
                    return BezierCurveType.LOOP
            if is_equal(y, cusp):
                return BezierCurveType.CUSP
            if y > cusp:
                return BezierCurveType.DOUBLE_INFLECTION
        return BezierCurveType.PLAIN

    def inflection_points(self) -> List[float]:
        """Sorted parameters in ``[0, 1]`` where the curvature changes sign."""

        aligned = self.align_on_x()[3].points()
        a = aligned[2].x * aligned[1].y
        b = aligned[3].x * aligned[1].y
        c = aligned[1].x * aligned[2].y
        d = aligned[3].x * aligned[2].y
        equation = Quadratic(-3 * a + 2 * b + 3 * c - d, 3 * a - b - 3 * c, c - a)
        return sorted(t for t in equation.roots() if 0.0 <= t <= 1.0)

    def length(self) -> float:
        return _arc_length(self._x.derivative(), self._y.derivative(), 0.0, 1.0)

    def approx_length(self, steps: int) -> float:
        """Sum of *steps* chords; cheaper but shorter than :meth:`length`."""

        if steps <= 0:
            raise ValueError(f"steps must be positive, got {steps}")
        prev = self.point_at(0.0)
        total = 0.0
        for h in range(1, steps + 1):
            curr = self.point_at(h / steps)
            total += prev.distance_to(curr)
            prev = curr
        return total

    def split_at(self, t: float) -> Tuple["Bezier", "Bezier"]:
        t = clamp(0.0, t, 1.0)
        z = t - 1
        left = np.array(
            [
                [1.0, 0.0, 0.0, 0.0],
                [-z, t, 0.0, 0.0],
                [z * z, -2 * z * t, t * t, 0.0],
                [-(z ** 3), 3 * z * z * t, -3 * z * t * t, t ** 3],
            ]
        )
        right = np.array(
            [
                [-(z ** 3), 3 * z * z * t, -3 * z * t * t, t ** 3],
                [0.0, z * z, -2 * z * t, t * t],
                [0.0, 0.0, -z, t],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        coords = np.array([p.units() for p in self._points])
        return (
            Bezier(*(Point(x, y) for x, y in left @ coords)),
            Bezier(*(Point(x, y) for x, y in right @ coords)),
        )

    def split_at_length(
        self, target: float, *, config: Optional[IntersectionConfig] = None
    ) -> Tuple["Bezier", "Bezier"]:
        config = config or get_intersection_config()
        dx, dy = self._x.derivative(), self._y.derivative()
        t = _search_length(
            lambda u: _arc_length(dx, dy, 0.0, u), self.length(), target, 0.0, 1.0, config
        )
        return self.split_at(t)

    def to_param_curve(self) -> ParamCurve:
        return ParamCurve(self._x, self._y, 0.0, 1.0)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error(v for p in self._points for v in p.units())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bezier):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return "Bezier({}, {}, {}, {})".format(*(repr(p) for p in self._points))

    def __str__(self) -> str:
        return f"Bezier[ Curve({self._x.text('t', False)}, {self._y.text('t', False)}, t, 0, 1) ]"


__all__ = [
    "BEZIER_CUBIC_MATRIX",
    "ParamCurve",
    "param_linear",
    "param_quadratic",
    "param_cubic",
    "param_quartic",
    "BezierCurveType",
    "Bezier",
]
