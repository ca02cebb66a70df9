from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .lines import Segment
from .numbers import first_error, human_format
from .points import Point, Vector, limits_points
from .types import Limits, NonRealValueError


class Polygon:
    """Closed polygon; the order of the points is its winding."""

    def __init__(self, *points: Point):
        if len(points) < 3:
            raise ValueError(f"Polygon requires at least 3 points, got {len(points)}")
        self._points: Tuple[Point, ...] = tuple(points)

    def points(self) -> List[Point]:
        return list(self._points)

    def sides(self) -> List[Segment]:
        pts = self._points
        return [Segment(pts[h], pts[(h + 1) % len(pts)]) for h in range(len(pts))]

    def perimeter(self) -> float:
        return sum(side.length() for side in self.sides())

    def signed_area(self) -> float:
        """Shoelace area, positive for anticlockwise winding."""

        pts = self._points
        total = 0.0
        for h, p in enumerate(pts):
            q = pts[(h + 1) % len(pts)]
            total += p.x * q.y - q.x * p.y
        return 0.5 * total

    def area(self) -> float:
        return abs(self.signed_area())

    def angles(self) -> List[float]:
        """Interior angle at every vertex, in point order."""

        pts = self._points
        counterclockwise = self.signed_area() >= 0
        result: List[float] = []
        for h, current in enumerate(pts):
            to_prev = current.vector_to(pts[h - 1])
            to_next = current.vector_to(pts[(h + 1) % len(pts)])
            if counterclockwise:
                theta = math.atan2(to_next.cross(to_prev), to_next.dot(to_prev))
            else:
                theta = math.atan2(to_prev.cross(to_next), to_prev.dot(to_next))
            result.append(theta % (2.0 * math.pi))
        return result

    def limits(self) -> Limits:
        return limits_points(self._points)

    def bounding_box(self) -> "Rectangle":
        min_x, max_x, min_y, max_y = self.limits()
        return Rectangle(Point(min_x, min_y), Point(max_x, max_y))

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error(v for p in self._points for v in p.units())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"Polygon{self._points!r}"

    def __str__(self) -> str:
        return "Polygon(" + ", ".join(str(p) for p in self._points) + ")"


def _span(a: float, b: float) -> Tuple[float, float]:
    # NaN poisons both ends so or_err can report it
    if math.isnan(a) or math.isnan(b):
        return math.nan, math.nan
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle; the two corners are reordered into ``(min, max)``."""

    min: Point
    max: Point

    def __post_init__(self) -> None:
        lo_x, hi_x = _span(self.min.x, self.max.x)
        lo_y, hi_y = _span(self.min.y, self.max.y)
        object.__setattr__(self, "min", Point(lo_x, lo_y))
        object.__setattr__(self, "max", Point(hi_x, hi_y))

    def points(self) -> List[Point]:
        return [self.min, self.max]

    def corners(self) -> List[Point]:
        lo, hi = self.min, self.max
        return [lo, Point(lo.x, hi.y), hi, Point(hi.x, lo.y)]

    def dims(self) -> Tuple[float, float]:
        return self.width(), self.height()

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def limits(self) -> Limits:
        return self.min.x, self.max.x, self.min.y, self.max.y

    def contains(self, point: Point) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def union(self, *others: "Rectangle") -> "Rectangle":
        """Smallest rectangle covering this one and *others*."""

        pts = [p for r in (self,) + others for p in r.points()]
        min_x, max_x, min_y, max_y = limits_points(pts)
        return Rectangle(Point(min_x, min_y), Point(max_x, max_y))

    def to_polygon(self) -> Polygon:
        return Polygon(*self.corners())

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error(v for p in self.points() for v in p.units())

    def __str__(self) -> str:
        return f"Rectangle[ {self.to_polygon()} ]"


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", abs(float(self.radius)))

    def bounding_box(self) -> Rectangle:
        offset = Vector(self.radius, self.radius)
        return Rectangle(self.center.add(offset), self.center.add(offset.invert()))

    def point_at(self, theta: float) -> Point:
        return self.center.add(Vector.from_theta(theta).scale(self.radius))

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error((self.center.x, self.center.y, self.radius))

    def __str__(self) -> str:
        x, y = self.center.units()
        x_op, y_op = "-", "-"
        if x < 0:
            x_op, x = "+", -x
        if y < 0:
            y_op, y = "+", -y
        return (
            f"(x{x_op}{human_format(x)})^2+(y{y_op}{human_format(y)})^2"
            f"={human_format(self.radius)}^2"
        )


def clip_segment_to_rectangle(rect: Rectangle, segment: Segment) -> List[Segment]:
    """Liang-Barsky clip; returns the visible part of *segment* or ``[]``."""

    x0, y0 = segment.begin.units()
    x1, y1 = segment.end.units()
    dx, dy = x1 - x0, y1 - y0
    min_x, max_x, min_y, max_y = rect.limits()

    p = (-dx, dx, -dy, dy)
    q = (x0 - min_x, max_x - x0, y0 - min_y, max_y - y0)

    u1, u2 = 0.0, 1.0
    for pk, qk in zip(p, q):
        if pk == 0:
            if qk < 0:
                return []
            continue
        ratio = qk / pk
        if pk < 0:
            u1 = max(u1, ratio)
        else:
            u2 = min(u2, ratio)
    if u1 > u2:
        return []
    return [Segment(Point(x0 + u1 * dx, y0 + u1 * dy), Point(x0 + u2 * dx, y0 + u2 * dy))]


SQUARE = Polygon(Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))
TRIANGLE_EQUILATERAL = Polygon(Point(0, 0), Point(0.866025404, -0.5), Point(0.866025404, 0.5))


__all__ = [
    "Polygon",
    "Rectangle",
    "Circle",
    "SQUARE",
    "TRIANGLE_EQUILATERAL",
    "clip_segment_to_rectangle",
]
