"""Planar measurements and predicates on simple two-dimensional shapes.

Points may be given as :class:`Point` or as an ``(x, y)`` pair. Lines are
:class:`LineString`, polygons are :class:`Polygon` and boxes are
:class:`BoundingBox`. The arithmetic follows IEEE rules throughout, so a
degenerate shape such as a zero-length line has a NaN centroid instead of
raising.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from itertools import pairwise
from typing import Union

from geospan.geometry import BoundingBox, LineString, Point, Polygon, Vertex

PointLike = Union[Point, Sequence[float]]

__all__ = [
    "polygon_area",
    "box_area",
    "linestring_length",
    "linestring_centroid",
    "polygon_centroid",
    "box_centroid",
    "polygon_contains_point",
    "point_within_polygon",
    "point_distance",
    "point_linestring_distance",
    "box_intersects",
]


def _xy(point: PointLike) -> Vertex:
    if isinstance(point, Point):
        return (point.x, point.y)
    x, y = point
    return (float(x), float(y))


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields NaN or infinity instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _ring_area(ring: Sequence[Vertex]) -> float:
    return abs(sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in pairwise(ring))) * 0.5


# ---------------------------------------------------------------------------
# Area and length
# ---------------------------------------------------------------------------


def polygon_area(polygon: Polygon) -> float:
    """Area of the shell minus the areas of the holes."""
    if not polygon.rings:
        return 0.0
    shell, *holes = polygon.rings
    return _ring_area(shell) - sum(_ring_area(hole) for hole in holes)


def box_area(box: BoundingBox) -> float:
    """Width times height of the box."""
    return (box.maxx - box.minx) * (box.maxy - box.miny)


def linestring_length(line: LineString) -> float:
    """Sum of the lengths of the line's segments."""
    return sum(math.hypot(x1 - x2, y1 - y2) for (x1, y1), (x2, y2) in pairwise(line.vertices))


# ---------------------------------------------------------------------------
# Centroids
# ---------------------------------------------------------------------------


def linestring_centroid(line: LineString) -> Point:
    """Segment midpoints weighted by segment length."""
    total_x = 0.0
    total_y = 0.0
    total_length = 0.0
    for (x1, y1), (x2, y2) in pairwise(line.vertices):
        segment_length = math.sqrt((x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1))
        total_length += segment_length
        total_x += (x1 + x2) * 0.5 * segment_length
        total_y += (y1 + y2) * 0.5 * segment_length
    return Point((_divide(total_x, total_length), _divide(total_y, total_length)))


def _ring_centroid(ring: Sequence[Vertex]) -> tuple[float, float, float]:
    cx = 0.0
    cy = 0.0
    signed_area = 0.0
    for (x1, y1), (x2, y2) in pairwise(ring):
        tri_area = x1 * y2 - x2 * y1
        cx += (x1 + x2) * tri_area
        cy += (y1 + y2) * tri_area
        signed_area += tri_area
    signed_area *= 0.5
    return _divide(cx, signed_area * 6), _divide(cy, signed_area * 6), signed_area


def polygon_centroid(polygon: Polygon) -> Point:
    """Ring centroids weighted by ring area, with holes subtracted."""
    total_x = 0.0
    total_y = 0.0
    total_area = 0.0
    for index, ring in enumerate(polygon.rings):
        cx, cy, ring_area = _ring_centroid(ring)
        sign = 1.0 if index == 0 else -1.0
        total_area += sign * ring_area
        total_x += sign * cx * ring_area
        total_y += sign * cy * ring_area
    return Point((_divide(total_x, total_area), _divide(total_y, total_area)))


def box_centroid(box: BoundingBox) -> Point:
    """Centre of the box."""
    return Point(((box.minx + box.maxx) * 0.5, (box.miny + box.maxy) * 0.5))


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------


def _in_ring(x: float, y: float, ring: Sequence[Vertex]) -> bool | None:
    """Winding-number test; None when the point lies on the ring's boundary."""
    if not ring:
        return False
    winding_number = 0
    x1, y1 = ring[0]
    for x2, y2 in ring[1:]:
        if (x1 == x2 and y1 == y2) or y > max(y1, y2) or y < min(y1, y2):
            x1, y1 = x2, y2
            continue
        side_v = (x - x1) * (y2 - y1) - (x2 - x1) * (y - y1)
        if side_v == 0 and (
            (x1 <= x < x2) or (x1 >= x > x2) or (y1 <= y < y2) or (y1 >= y > y2)
        ):
            return None
        if side_v < 0 and y1 < y <= y2:
            winding_number += 1
        elif side_v > 0 and y2 <= y < y1:
            winding_number -= 1
        x1, y1 = x2, y2
    return winding_number != 0


def polygon_contains_point(polygon: Polygon, point: PointLike) -> bool:
    """Whether the point lies strictly inside the shell and outside every hole.

    A point found on the boundary of a ring is not contained.
    """
    x, y = _xy(point)
    contains = False
    for index, ring in enumerate(polygon.rings):
        inside = _in_ring(x, y, ring)
        if inside is None:
            return False
        if index == 0:
            if not inside:
                return False
            contains = True
        elif inside:
            return False
    return contains


def point_within_polygon(point: PointLike, polygon: Polygon) -> bool:
    """Whether the point lies within the polygon; the converse of containment."""
    return polygon_contains_point(polygon, point)


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


def point_distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two points."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return math.sqrt((ax - bx) ** 2 + (ay - by) ** 2)


def _closest_point_on_segment(p: Vertex, p1: Vertex, p2: Vertex) -> Vertex:
    if p1 == p2:
        return p1
    n1 = (p[0] - p1[0]) * (p2[0] - p1[0]) + (p[1] - p1[1]) * (p2[1] - p1[1])
    n2 = (p2[0] - p1[0]) * (p2[0] - p1[0]) + (p2[1] - p1[1]) * (p2[1] - p1[1])
    r = n1 / n2
    if r <= 0:
        return p1
    if r >= 1:
        return p2
    return (p1[0] + r * (p2[0] - p1[0]), p1[1] + r * (p2[1] - p1[1]))


def _distance_to_segment_squared(p: Vertex, a: Vertex, b: Vertex) -> float:
    cx, cy = _closest_point_on_segment(p, a, b)
    dx = p[0] - cx
    dy = p[1] - cy
    return dx * dx + dy * dy


def point_linestring_distance(point: PointLike, line: LineString) -> float:
    """Shortest distance from the point to any segment of the line.

    A line without segments gives the square root of the largest finite float.
    """
    p = _xy(point)
    min_distance = sys.float_info.max
    for a, b in pairwise(line.vertices):
        distance = _distance_to_segment_squared(p, a, b)
        if distance < min_distance:
            min_distance = distance
            if min_distance == 0:
                break
    return math.sqrt(min_distance)


# ---------------------------------------------------------------------------
# Box predicates
# ---------------------------------------------------------------------------


def box_intersects(left: BoundingBox, right: BoundingBox) -> bool:
    """Whether two boxes overlap or touch."""
    return not (
        left.minx > right.maxx
        or left.maxx < right.minx
        or left.miny > right.maxy
        or left.maxy < right.miny
    )