"""Rendering geometries and the simple two-dimensional shapes as well-known text."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Union

from geospan.geometry import (
    BoundingBox,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Vertex,
)

__all__ = [
    "format_coord",
    "point_2d_to_text",
    "linestring_2d_to_text",
    "polygon_2d_to_text",
    "box_2d_to_text",
    "to_text",
]

PointLike = Union[Point, Sequence[float]]


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_coord(x: float, y: float) -> str:
    """Format a coordinate pair as ``"x y"`` using the shortest exact form of each number."""
    return f"{_format_number(x)} {_format_number(y)}"


def _join(vertices: Iterable[Vertex]) -> str:
    return ", ".join(format_coord(x, y) for x, y in vertices)


def point_2d_to_text(point: PointLike) -> str:
    """Render a point; a point with a NaN ordinate, or an empty point, is ``POINT EMPTY``."""
    if isinstance(point, Point):
        if point.vertex is None:
            return "POINT EMPTY"
        x, y = point.vertex
    else:
        x, y = point
    if math.isnan(x) or math.isnan(y):
        return "POINT EMPTY"
    return f"POINT ({format_coord(x, y)})"


def linestring_2d_to_text(line: LineString) -> str:
    """Render a line; a line without vertices is ``LINESTRING EMPTY``."""
    if not line.vertices:
        return "LINESTRING EMPTY"
    return f"LINESTRING ({_join(line.vertices)})"


def polygon_2d_to_text(polygon: Polygon) -> str:
    """Render a polygon; a polygon without rings is ``POLYGON EMPTY``."""
    if not polygon.rings:
        return "POLYGON EMPTY"
    rings = ", ".join(f"({_join(ring)})" for ring in polygon.rings)
    return f"POLYGON ({rings})"


def box_2d_to_text(box: BoundingBox) -> str:
    """Render a box as ``BOX(minx miny, maxx maxy)``."""
    return f"BOX({format_coord(box.minx, box.miny)}, {format_coord(box.maxx, box.maxy)})"


def _rings_body(polygon: Polygon) -> str:
    if not polygon.rings:
        return "EMPTY"
    return "(" + ", ".join(f"({_join(ring)})" for ring in polygon.rings) + ")"


def _line_body(line: LineString) -> str:
    if not line.vertices:
        return "EMPTY"
    return f"({_join(line.vertices)})"


def to_text(geom: Geometry) -> str:
    """Render any geometry as well-known text."""
    if isinstance(geom, Point):
        return point_2d_to_text(geom)
    if isinstance(geom, LineString):
        return linestring_2d_to_text(geom)
    if isinstance(geom, Polygon):
        return polygon_2d_to_text(geom)
    if isinstance(geom, MultiPoint):
        if not geom.points:
            return "MULTIPOINT EMPTY"
        parts = (
            "EMPTY" if p.vertex is None else format_coord(*p.vertex) for p in geom.points
        )
        return f"MULTIPOINT ({', '.join(parts)})"
    if isinstance(geom, MultiLineString):
        if not geom.lines:
            return "MULTILINESTRING EMPTY"
        return f"MULTILINESTRING ({', '.join(_line_body(line) for line in geom.lines)})"
    if isinstance(geom, MultiPolygon):
        if not geom.polygons:
            return "MULTIPOLYGON EMPTY"
        return f"MULTIPOLYGON ({', '.join(_rings_body(p) for p in geom.polygons)})"
    if isinstance(geom, GeometryCollection):
        if not geom.geometries:
            return "GEOMETRYCOLLECTION EMPTY"
        return f"GEOMETRYCOLLECTION ({', '.join(to_text(g) for g in geom.geometries)})"
    raise TypeError(f"not a geometry: {type(geom).__name__}")