from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .numbers import first_error, human_format, is_equal, is_zero, maximum, minimum, snap_zero
from .types import Coordinates, Limits, NonRealValueError


class Quadrant(Enum):
    """Direction class of a vector: an open quadrant or a half axis."""

    NONE = "none"
    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"
    XPOS = "x+"
    YPOS = "y+"
    XNEG = "x-"
    YNEG = "y-"


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def units(self) -> Coordinates:
        return (self.x, self.y)

    def add(self, vector: "Vector") -> "Point":
        return Point(self.x + vector.i, self.y + vector.j)

    def vector_to(self, other: "Point") -> "Vector":
        return Vector(other.x - self.x, other.y - self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error((self.x, self.y))

    def __str__(self) -> str:
        return f"Point({{{human_format(self.x)}, {human_format(self.y)}}})"


@dataclass(frozen=True)
class Vector:
    """Free vector. Components within ``ZERO_EPSILON`` of zero are stored as ``0``."""

    i: float
    j: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "i", snap_zero(self.i))
        object.__setattr__(self, "j", snap_zero(self.j))

    @classmethod
    def from_theta(cls, theta: float) -> "Vector":
        return cls(math.cos(theta), math.sin(theta))

    @property
    def quadrant(self) -> Quadrant:
        i, j = self.i, self.j
        if i > 0 and j > 0:
            return Quadrant.Q1
        if i < 0 and j > 0:
            return Quadrant.Q2
        if i < 0 and j < 0:
            return Quadrant.Q3
        if i > 0 and j < 0:
            return Quadrant.Q4
        if i > 0 and j == 0:
            return Quadrant.XPOS
        if i < 0 and j == 0:
            return Quadrant.XNEG
        if i == 0 and j > 0:
            return Quadrant.YPOS
        if i == 0 and j < 0:
            return Quadrant.YNEG
        return Quadrant.NONE

    def units(self) -> Coordinates:
        return (self.i, self.j)

    def magnitude(self) -> float:
        return math.hypot(self.i, self.j)

    def angle(self) -> float:
        """Direction in ``[0, 2π)``; NaN for the zero vector."""

        if self.quadrant is Quadrant.NONE:
            return math.nan
        theta = math.atan2(self.j, self.i)
        if theta < 0:
            theta += 2.0 * math.pi
        return theta

    def rotate(self, theta: float) -> "Vector":
        """Anticlockwise rotation by *theta* radians."""

        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return Vector(cos_t * self.i - sin_t * self.j, sin_t * self.i + cos_t * self.j)

    def scale(self, factor: float) -> "Vector":
        return Vector(self.i * factor, self.j * factor)

    def scale_units(self, mx: float, my: float) -> "Vector":
        return Vector(self.i * mx, self.j * my)

    def skew_units(self, sx: float, sy: float) -> "Vector":
        return Vector(self.i + sx * self.j, sy * self.i + self.j)

    def invert(self) -> "Vector":
        return Vector(-self.i, -self.j)

    def normalize(self) -> "Vector":
        magnitude = self.magnitude()
        if self.quadrant is Quadrant.NONE or is_zero(magnitude):
            return VECTOR_NAN
        return self.scale(1.0 / magnitude)

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.i + other.i, self.j + other.j)

    def dot(self, other: "Vector") -> float:
        return self.i * other.i + self.j * other.j

    def cross(self, other: "Vector") -> float:
        return self.i * other.j - self.j * other.i

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error((self.i, self.j))

    def __str__(self) -> str:
        return f"Vector(Point({{{human_format(self.i)}, {human_format(self.j)}}}))"


ORIGIN = Point(0.0, 0.0)
POINT_NAN = Point(math.nan, math.nan)
VECTOR_ZERO = Vector(0.0, 0.0)
VECTOR_NAN = Vector(math.nan, math.nan)


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)


def _from_array(coords: np.ndarray) -> List[Point]:
    return [Point(float(x), float(y)) for x, y in coords]


def rotate_points(theta: float, origin: Point, points: Sequence[Point]) -> List[Point]:
    """Rotate *points* anticlockwise by *theta* around *origin*."""

    cos_t, sin_t = math.cos(theta), math.sin(theta)
    rotation = np.array([[cos_t, -sin_t], [sin_t, cos_t]])
    offsets = (_as_array(points) - [origin.x, origin.y]) @ rotation.T
    offsets[np.abs(offsets) < 1e-9] = 0.0
    return _from_array(offsets + [origin.x, origin.y])


def translate_points(vector: Vector, points: Sequence[Point]) -> List[Point]:
    # homogeneous coordinates, the last column carries the offset
    transform = np.array([[1.0, 0.0, vector.i], [0.0, 1.0, vector.j], [0.0, 0.0, 1.0]])
    coords = _as_array(points)
    homogeneous = np.hstack([coords, np.ones((len(coords), 1))])
    return _from_array((homogeneous @ transform.T)[:, :2])


def shear_points(vector: Vector, points: Sequence[Point]) -> List[Point]:
    transform = np.array([[1.0, vector.i], [vector.j, 1.0]])
    return _from_array(_as_array(points) @ transform.T)


def scale_points(vector: Vector, points: Sequence[Point]) -> List[Point]:
    transform = np.diag([vector.i, vector.j])
    return _from_array(_as_array(points) @ transform.T)


def limits_points(points: Iterable[Point]) -> Limits:
    """Return ``(min_x, max_x, min_y, max_y)``."""

    points = list(points)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return minimum(xs), maximum(xs), minimum(ys), maximum(ys)


def sort_points(points: Iterable[Point]) -> List[Point]:
    """Lexicographic sort on ``(x, y)``."""

    return sorted(points, key=lambda p: (p.x, p.y))


def is_equal_pair(a, b) -> bool:
    """Compare two pair-like values (points or vectors) component wise."""

    ax, ay = a.units()
    bx, by = b.units()
    return is_equal(ax, bx) and is_equal(ay, by)


def is_zero_pair(a) -> bool:
    x, y = a.units()
    return is_zero(x) and is_zero(y)


__all__ = [
    "Quadrant",
    "Point",
    "Vector",
    "ORIGIN",
    "POINT_NAN",
    "VECTOR_ZERO",
    "VECTOR_NAN",
    "rotate_points",
    "translate_points",
    "shear_points",
    "scale_points",
    "limits_points",
    "sort_points",
    "is_equal_pair",
    "is_zero_pair",
]
