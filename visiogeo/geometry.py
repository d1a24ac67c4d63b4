"""Geometric predicates and ray casting used by the visibility sweep."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence

from visiogeo.point import Point
from visiogeo.segment import Segment

EPSILON = 1e-9


class Orientation(enum.IntEnum):
    """Turn direction of three points taken in order."""

    COLLINEAR = 0
    CLOCKWISE = -1
    COUNTERCLOCKWISE = 1


def _classify(cross: float) -> Orientation:
    if abs(cross) < EPSILON:
        return Orientation.COLLINEAR
    if cross > 0:
        return Orientation.COUNTERCLOCKWISE
    return Orientation.CLOCKWISE


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """The 2D cross product ``(p2 - p1) x (p3 - p1)``.

    Positive for a left turn, negative for a right turn, zero when collinear.
    """
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def orientation(p1: Point, p2: Point, p3: Point) -> Orientation:
    """Orientation of the path ``p1 -> p2 -> p3``."""
    return _classify(cross_product(p1, p2, p3))


def orientation_coords(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> Orientation:
    """Orientation of three points given by their coordinates."""
    return _classify((x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1))


def _ray_parameters(
    ox: float, oy: float, dx: float, dy: float, segment: Segment
) -> float | None:
    """Ray parameter ``t`` of the hit on ``segment``, or None if missed."""
    sx1, sy1 = segment.p1.x, segment.p1.y
    segx = segment.p2.x - sx1
    segy = segment.p2.y - sy1

    denom = dx * segy - dy * segx
    if abs(denom) < EPSILON:
        return None

    t = ((sx1 - ox) * segy - (sy1 - oy) * segx) / denom
    u = ((sx1 - ox) * dy - (sy1 - oy) * dx) / denom

    if t >= -EPSILON and -EPSILON <= u <= 1.0 + EPSILON:
        return t
    return None


def ray_segment_intersection(
    origin: Point, direction: Point, segment: Segment
) -> Point | None:
    """Where the ray from ``origin`` through ``direction`` meets ``segment``.

    Returns None when the ray is parallel to the segment or misses it.
    """
    dx = direction.x - origin.x
    dy = direction.y - origin.y
    t = _ray_parameters(origin.x, origin.y, dx, dy, segment)
    if t is None:
        return None
    return Point(origin.x + t * dx, origin.y + t * dy)


def ray_segment_distance(origin: Point, angle: float, segment: Segment) -> float:
    """Distance along the ray at ``angle`` (radians) to ``segment``.

    Returns ``math.inf`` when the ray does not hit the segment.
    """
    t = _ray_parameters(origin.x, origin.y, math.cos(angle), math.sin(angle), segment)
    return math.inf if t is None else t


def point_in_front(origin: Point, point: Point, segment: Segment) -> bool:
    """True when ``point`` is closer to ``origin`` than ``segment`` in its direction."""
    point_distance = origin.distance_to(point)
    angle = point.angle_from(origin)
    segment_distance = ray_segment_distance(origin, angle, segment)
    return point_distance < segment_distance - EPSILON


def compare_segments_along_ray(
    origin: Point, angle: float, seg1: Segment, seg2: Segment
) -> int:
    """Order two segments by their distance along the ray at ``angle``.

    Returns a negative number when ``seg1`` is closer, positive when
    ``seg2`` is closer and zero when they are equally far.
    """
    dist1 = ray_segment_distance(origin, angle, seg1)
    dist2 = ray_segment_distance(origin, angle, seg2)
    if abs(dist1 - dist2) < EPSILON:
        return 0
    return -1 if dist1 < dist2 else 1


def point_in_polygon(
    px: float, py: float, vertices: Iterable[Sequence[float] | Point]
) -> bool:
    """Even-odd ray casting test of ``(px, py)`` against a polygon.

    ``vertices`` holds the corners in order, as ``(x, y)`` pairs or points.
    Polygons with fewer than three vertices contain nothing.
    """
    corners = [(v.x, v.y) if isinstance(v, Point) else (v[0], v[1]) for v in vertices]
    if len(corners) < 3:
        return False

    inside = False
    for (xi, yi), (xj, yj) in zip(corners, corners[-1:] + corners[:-1]):
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
    return inside


def _on_segment(p: Point, q: Point, r: Point) -> bool:
    """True when ``q`` lies within the bounding box of ``p`` and ``r``."""
    return (
        min(p.x, r.x) - EPSILON <= q.x <= max(p.x, r.x) + EPSILON
        and min(p.y, r.y) - EPSILON <= q.y <= max(p.y, r.y) + EPSILON
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """True when segment ``p1-p2`` meets segment ``p3-p4``, touching included."""
    o1 = orientation(p1, p2, p3)
    o2 = orientation(p1, p2, p4)
    o3 = orientation(p3, p4, p1)
    o4 = orientation(p3, p4, p2)

    if o1 != o2 and o3 != o4:
        return True

    collinear = Orientation.COLLINEAR
    return (
        (o1 == collinear and _on_segment(p1, p3, p2))
        or (o2 == collinear and _on_segment(p1, p4, p2))
        or (o3 == collinear and _on_segment(p3, p1, p4))
        or (o4 == collinear and _on_segment(p3, p2, p4))
    )