"""Accessors for parts of geometries."""

from __future__ import annotations

from geospan.geometry import Geometry, LineString, Point

__all__ = ["end_point", "linestring_end_point"]


def linestring_end_point(line: LineString | None) -> Point | None:
    """Last vertex of a line as a point; None for a missing or empty line."""
    if line is None or not line.vertices:
        return None
    return Point(line.vertices[-1])


def end_point(geom: Geometry | None) -> Point | None:
    """Last vertex of a linestring; None for any other geometry or an empty line."""
    if not isinstance(geom, LineString):
        return None
    return linestring_end_point(geom)