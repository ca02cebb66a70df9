"""Pairwise intersections between the geometry primitives.

Every function returns a (possibly empty) list of points, except
:func:`intersection_rectangle_rectangle` which returns zero or one
rectangle. Coincident lines and overlapping collinear segments are reported
as non-intersecting.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from . import logging_utils
from .config import IntersectionConfig, get_intersection_config
from .curves import Bezier
from .lines import Line, Ray, Segment, filter_points_on_ray, rotate_or_translate_to_x_axis
from .numbers import EQUAL_EPSILON, divide, is_equal, is_zero
from .points import Point, is_equal_pair, sort_points
from .shapes import Polygon, Rectangle, clip_segment_to_rectangle
from .types import Limits

logger = logging.getLogger(__name__)


def _within(point: Point, limits: Limits) -> bool:
    # inclusive; the absolute slack keeps hits on a degenerate box edge
    min_x, max_x, min_y, max_y = limits
    return _between(point.x, min_x, max_x) and _between(point.y, min_y, max_y)


def _between(value: float, lo: float, hi: float) -> bool:
    return lo <= value <= hi or is_zero(value - lo) or is_zero(hi - value)


def _parallel(a: Line, b: Line) -> bool:
    # directions are folded into [0, π): opposite directions are parallel too
    diff = abs(math.fmod(a.angle(), math.pi) - math.fmod(b.angle(), math.pi))
    return min(diff, math.pi - diff) < EQUAL_EPSILON


# --- Line dominant intersections ---


def intersection_line_line(a: Line, b: Line) -> List[Point]:
    if a.is_unknown() or b.is_unknown():
        return []
    if _parallel(a, b):
        return []

    if a.is_vertical():
        a, b = b, a
    if b.is_vertical():
        x = b.x_for_y(0.0)
        return [Point(x, a.y_for_x(x))]

    if a.is_horizontal():
        a, b = b, a
    if b.is_horizontal():
        y = b.y_for_x(0.0)
        return [Point(a.x_for_y(y), y)]

    na, nb = a.normalize_y(), b.normalize_y()
    x = divide(nb.c - na.c, nb.a - na.a)
    return [Point(x, b.y_for_x(x))]


def intersection_line_ray(a: Line, b: Ray) -> List[Point]:
    return filter_points_on_ray(b, intersection_line_line(a, b.line()))


def intersection_line_segment(a: Line, b: Segment) -> List[Point]:
    limits = b.limits()
    return [p for p in intersection_line_line(a, b.line()) if _within(p, limits)]


def intersection_line_bezier(a: Line, b: Bezier) -> List[Point]:
    """Crossings of a line with a curve.

    The control points are moved so the line becomes the X axis; the real
    roots of the moved curve's ``y(t)`` in ``[0, 1]`` are then evaluated on
    the original curve.
    """

    if a.is_unknown():
        return []
    if not intersection_rectangle_line(b.bounding_box(), a):
        return []
    moved = Bezier(*rotate_or_translate_to_x_axis(a, b.points()))
    _, y_roots = moved.roots()
    return [b.point_at(t) for t in y_roots]


# --- Ray dominant intersections ---


def intersection_ray_ray(a: Ray, b: Ray) -> List[Point]:
    pts = filter_points_on_ray(a, intersection_line_line(a.line(), b.line()))
    return filter_points_on_ray(b, pts)


def intersection_segment_ray(a: Segment, b: Ray) -> List[Point]:
    return filter_points_on_ray(b, intersection_line_segment(b.line(), a))


# --- Segment dominant intersections ---


def intersection_segment_segment(a: Segment, b: Segment) -> List[Point]:
    a1 = a.end.y - a.begin.y
    b1 = a.begin.x - a.end.x
    c1 = a1 * a.begin.x + b1 * a.begin.y

    a2 = b.end.y - b.begin.y
    b2 = b.begin.x - b.end.x
    c2 = a2 * b.begin.x + b2 * b.begin.y

    det = a1 * b2 - a2 * b1
    if is_zero(det):
        return []
    point = Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)
    if _within(point, a.limits()) and _within(point, b.limits()):
        return [point]
    return []


def intersection_segment_bezier(a: Segment, b: Bezier) -> List[Point]:
    limits = a.limits()
    return [p for p in intersection_line_bezier(a.line(), b) if _within(p, limits)]


# --- Rectangle dominant intersections ---


def intersection_rectangle_line(a: Rectangle, b: Line) -> List[Point]:
    lo, hi = a.min, a.max
    if b.is_unknown():
        return []
    if b.is_vertical():
        x = b.x_for_y(0.0)
        span = Segment(Point(x, lo.y), Point(x, hi.y))
    elif b.is_horizontal():
        y = b.y_for_x(0.0)
        span = Segment(Point(lo.x, y), Point(hi.x, y))
    else:
        ly, my = b.y_for_x(lo.x), b.y_for_x(hi.x)
        if all(math.isfinite(v) for v in (ly, my)):
            span = Segment(Point(lo.x, ly), Point(hi.x, my))
        else:
            span = Segment(Point(b.x_for_y(lo.y), lo.y), Point(b.x_for_y(hi.y), hi.y))
    return [p for clipped in clip_segment_to_rectangle(a, span) for p in clipped.points()]


def intersection_rectangle_segment(a: Rectangle, b: Segment) -> List[Point]:
    """Clipped end points of *b* that lie on the boundary of *a*.

    A segment wholly inside the rectangle therefore yields no points.
    """

    lo, hi = a.min, a.max
    pts: List[Point] = []
    for clipped in clip_segment_to_rectangle(a, b):
        for p in clipped.points():
            on_x = is_equal(p.x, lo.x) or is_equal(p.x, hi.x)
            on_y = is_equal(p.y, lo.y) or is_equal(p.y, hi.y)
            if on_x or on_y:
                pts.append(p)
    return pts


def intersection_rectangle_rectangle(a: Rectangle, b: Rectangle) -> List[Rectangle]:
    min_x, max_x = max(a.min.x, b.min.x), min(a.max.x, b.max.x)
    min_y, max_y = max(a.min.y, b.min.y), min(a.max.y, b.max.y)
    if min_x > max_x or min_y > max_y:
        return []
    return [Rectangle(Point(min_x, min_y), Point(max_x, max_y))]


# --- Polygon dominant intersections ---


def intersection_polygon_segment(a: Polygon, b: Segment) -> List[Point]:
    hits = sort_points(p for side in a.sides() for p in intersection_segment_segment(side, b))
    pts: List[Point] = []
    for p in hits:
        if not pts or not is_equal_pair(pts[-1], p):
            pts.append(p)
    return pts


# --- Bezier dominant intersections ---


def _subdivide(
    a: Bezier,
    b: Bezier,
    depth: int,
    config: IntersectionConfig,
    leaves: List[Tuple[Point, Point]],
) -> None:
    box_a, box_b = a.fast_box(), b.fast_box()
    if not intersection_rectangle_rectangle(box_a, box_b):
        return

    tolerance = config.bezier_leaf_tolerance
    small = all(
        dim < tolerance for dim in (box_a.width(), box_a.height(), box_b.width(), box_b.height())
    )
    if small or depth >= config.max_depth:
        if not small:
            logger.debug("Bezier subdivision hit depth cap %d; emitting estimate", config.max_depth)
        leaves.append((a.point_at(0.5), b.point_at(0.5)))
        return

    a1, a2 = a.split_at(0.5)
    b1, b2 = b.split_at(0.5)
    for left in (a1, a2):
        for right in (b1, b2):
            _subdivide(left, right, depth + 1, config, leaves)


def intersection_bezier_bezier(
    a: Bezier, b: Bezier, *, config: Optional[IntersectionConfig] = None
) -> List[Point]:
    """Approximate crossings of two curves by recursive box subdivision.

    Leaf estimates closer than ``bezier_cluster_tolerance`` on both axes are
    merged, keeping the estimate whose two curve points are closest.
    """

    config = config or get_intersection_config()
    leaves: List[Tuple[Point, Point]] = []
    _subdivide(a, b, 0, config, leaves)
    logger.debug("Bezier subdivision produced %d leaf estimates", len(leaves))

    cluster = config.bezier_cluster_tolerance
    merged: List[Tuple[Point, Point]] = []
    for pa, pb in leaves:
        if merged:
            qa, qb = merged[-1]
            if abs(pa.x - qa.x) < cluster and abs(pa.y - qa.y) < cluster:
                if pa.distance_to(pb) < qa.distance_to(qb):
                    merged[-1] = (pa, pb)
                continue
        merged.append((pa, pb))
    return sort_points(pa for pa, _ in merged)


logging_utils.apply_debug_logging(globals(), logger=logger)


__all__ = [
    "intersection_line_line",
    "intersection_line_ray",
    "intersection_line_segment",
    "intersection_line_bezier",
    "intersection_ray_ray",
    "intersection_segment_ray",
    "intersection_segment_segment",
    "intersection_segment_bezier",
    "intersection_rectangle_line",
    "intersection_rectangle_segment",
    "intersection_rectangle_rectangle",
    "intersection_polygon_segment",
    "intersection_bezier_bezier",
]
