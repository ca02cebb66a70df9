"""Implicit lines, rays and segments.

A :class:`Line` is stored as the coefficient triple of ``ax + by = c``. The
slope classification is derived once, after coefficients within
``ZERO_EPSILON`` of zero have been snapped to exactly zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .numbers import divide, first_error, human_format, is_zero, signbit, snap_zero
from .points import ORIGIN, Point, Vector, is_equal_pair, limits_points, rotate_points, translate_points
from .types import Limits, NonRealValueError


class SlopeType(Enum):
    UNKNOWN = "unknown"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    # a and b of different sign: the line rises left to right
    OBLIQUE_MIXED = "oblique-mixed"
    OBLIQUE_SAME = "oblique-same"


@dataclass(frozen=True)
class Line:
    a: float
    b: float
    c: float
    slope: SlopeType = field(init=False, compare=False)

    def __post_init__(self) -> None:
        a, b, c = snap_zero(self.a), snap_zero(self.b), snap_zero(self.c)
        if a == 0 and b == 0:
            slope = SlopeType.UNKNOWN
        elif a == 0:
            slope = SlopeType.HORIZONTAL
        elif b == 0:
            slope = SlopeType.VERTICAL
        elif signbit(a) != signbit(b):
            slope = SlopeType.OBLIQUE_MIXED
        else:
            slope = SlopeType.OBLIQUE_SAME
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "slope", slope)

    @classmethod
    def from_vector(cls, point: Point, vector: Vector) -> "Line":
        """Line through *point* running along *vector*."""

        a, b = vector.j, -vector.i
        return cls(a, b, point.x * vector.j - point.y * vector.i)

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        return cls.from_vector(p1, p1.vector_to(p2))

    def abc(self) -> Tuple[float, float, float]:
        return (self.a, self.b, self.c)

    def coefficients(self) -> Tuple[float, float, float]:
        return self.abc()

    def is_horizontal(self) -> bool:
        return self.slope is SlopeType.HORIZONTAL

    def is_vertical(self) -> bool:
        return self.slope is SlopeType.VERTICAL

    def is_unknown(self) -> bool:
        return self.slope is SlopeType.UNKNOWN

    def vector(self) -> Vector:
        """Unit direction vector ``(-b, a)``."""

        return Vector(-self.b, self.a).normalize()

    def angle(self) -> float:
        return self.vector().angle()

    def x_for_y(self, y: float) -> float:
        if self.slope is SlopeType.VERTICAL:
            return self.c / self.a
        if self.slope in (SlopeType.HORIZONTAL, SlopeType.UNKNOWN):
            return math.nan
        return -self.b * y / self.a + self.c / self.a

    def y_for_x(self, x: float) -> float:
        if self.slope is SlopeType.HORIZONTAL:
            return self.c / self.b
        if self.slope in (SlopeType.VERTICAL, SlopeType.UNKNOWN):
            return math.nan
        return -self.a * x / self.b + self.c / self.b

    def normalize_x(self) -> "Line":
        """Scale so ``a == 1``. Undefined (non-real) for horizontal lines."""

        return Line(1.0, divide(self.b, self.a), divide(self.c, self.a))

    def normalize_y(self) -> "Line":
        """Scale so ``b == 1``. Undefined (non-real) for vertical lines."""

        return Line(divide(self.a, self.b), 1.0, divide(self.c, self.b))

    def normalize_unit(self) -> "Line":
        norm = math.hypot(self.a, self.b)
        return Line(divide(self.a, norm), divide(self.b, norm), divide(self.c, norm))

    def or_err(self) -> Optional[NonRealValueError]:
        err = first_error(self.abc())
        if err is None and self.slope is SlopeType.UNKNOWN:
            err = NonRealValueError(math.inf)
        return err

    def __str__(self) -> str:
        a, b, c = (human_format(v) for v in self.abc())
        if self.slope is SlopeType.UNKNOWN:
            return f"0x+0y={c}"
        if self.slope is SlopeType.HORIZONTAL:
            return f"{b}y={c}"
        if self.slope is SlopeType.VERTICAL:
            return f"{a}x={c}"
        sign = "-" if self.b < 0 else "+"
        return f"{a}x{sign}{human_format(abs(self.b))}y={c}"


LINE_X_AXIS = Line(0.0, 1.0, 0.0)
LINE_Y_AXIS = Line(1.0, 0.0, 0.0)


@dataclass(frozen=True)
class Ray:
    """Half line starting at ``begin``; ``direction`` is normalised on construction."""

    begin: Point
    direction: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normalize())

    def angle(self) -> float:
        return self.direction.angle()

    def invert(self) -> "Ray":
        return Ray(self.begin, self.direction.invert())

    def line(self) -> Line:
        return Line.from_vector(self.begin, self.direction)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error((self.begin.x, self.begin.y, self.direction.i, self.direction.j))

    def __str__(self) -> str:
        return f"Ray({self.begin}, {self.direction})"


@dataclass(frozen=True)
class Segment:
    begin: Point
    end: Point

    @classmethod
    def from_vector(cls, begin: Point, vector: Vector) -> "Segment":
        return cls(begin, begin.add(vector))

    def points(self) -> List[Point]:
        return [self.begin, self.end]

    def limits(self) -> Limits:
        return limits_points(self.points())

    def bounding_box(self):
        from .shapes import Rectangle

        return Rectangle(self.begin, self.end)

    def length(self) -> float:
        return self.begin.vector_to(self.end).magnitude()

    def angle(self) -> float:
        return self.begin.vector_to(self.end).angle()

    def line(self) -> Line:
        return Line.from_points(self.begin, self.end)

    def reverse(self) -> "Segment":
        return Segment(self.end, self.begin)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error((self.begin.x, self.begin.y, self.end.x, self.end.y))

    def __str__(self) -> str:
        return f"Segment({self.begin}, {self.end})"


def rotate_or_translate_to_x_axis(line: Line, points: Sequence[Point]) -> List[Point]:
    """Move *points* with the transform that maps *line* onto the X axis."""

    if line.is_unknown():
        return list(points)
    if line.is_horizontal():
        y = line.y_for_x(0.0)
        if is_zero(y):
            return list(points)
        return translate_points(Point(0.0, y).vector_to(ORIGIN), points)
    origin = Point(line.x_for_y(0.0), 0.0)
    return rotate_points(-line.angle(), origin, points)


def filter_points_on_ray(ray: Ray, points: Sequence[Point]) -> List[Point]:
    """Keep the points lying on the half line described by *ray*."""

    kept: List[Point] = []
    for point in points:
        if is_equal_pair(point, ray.begin):
            kept.append(point)
        elif is_equal_pair(ray.begin.vector_to(point).normalize(), ray.direction):
            kept.append(point)
    return kept


def is_equal_points(a, b) -> bool:
    """Compare two point-ordered shapes vertex by vertex."""

    left, right = a.points(), b.points()
    if len(left) != len(right):
        return False
    return all(is_equal_pair(p, q) for p, q in zip(left, right))


__all__ = [
    "SlopeType",
    "Line",
    "LINE_X_AXIS",
    "LINE_Y_AXIS",
    "Ray",
    "Segment",
    "rotate_or_translate_to_x_axis",
    "filter_points_on_ray",
    "is_equal_points",
]
