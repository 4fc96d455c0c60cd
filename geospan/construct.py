"""Building envelopes, lines and polygons from coordinates and other geometries."""

from __future__ import annotations

from collections.abc import Iterable

from geospan.geometry import Geometry, LineString, Point, Polygon, Vertex

__all__ = ["make_envelope", "make_line", "make_line_between", "make_polygon"]


def make_envelope(min_x: float, min_y: float, max_x: float, max_y: float) -> Polygon:
    """Rectangular polygon spanning the given corners, closed, with the shell in CCW order."""
    return Polygon(
        (
            (
                (min_x, min_y),
                (min_x, max_y),
                (max_x, max_y),
                (max_x, min_y),
                (min_x, min_y),
            ),
        )
    )


def _point_vertex(geom: Geometry) -> Vertex | None:
    if not isinstance(geom, Point):
        raise ValueError("ST_MakeLine only accepts POINT geometries")
    return geom.vertex


def _finish_line(vertices: list[Vertex]) -> LineString:
    if len(vertices) == 1:
        raise ValueError("ST_MakeLine requires zero or two or more POINT geometries")
    return LineString(tuple(vertices))


def make_line(points: Iterable[Geometry | None]) -> LineString:
    """Line through the given points in order; missing and empty points are skipped."""
    vertices: list[Vertex] = []
    for geom in points:
        if geom is None:
            continue
        vertex = _point_vertex(geom)
        if vertex is not None:
            vertices.append(vertex)
    return _finish_line(vertices)


def make_line_between(left: Geometry, right: Geometry) -> LineString:
    """Line from one point to another; empty points are skipped."""
    left_vertex = _point_vertex(left)
    right_vertex = _point_vertex(right)
    vertices = [v for v in (left_vertex, right_vertex) if v is not None]
    return _finish_line(vertices)


def _check_shell(shell: Geometry) -> LineString:
    if not isinstance(shell, LineString):
        raise ValueError("ST_MakePolygon only accepts LINESTRING geometries")
    if len(shell) < 4:
        raise ValueError("ST_MakePolygon shell requires at least 4 vertices")
    if not shell.is_closed:
        raise ValueError(
            "ST_MakePolygon shell must be closed (first and last vertex must be equal)"
        )
    return shell


def make_polygon(
    shell: Geometry, holes: Iterable[Geometry | None] | None = None
) -> Polygon:
    """Polygon from a closed shell line and optional closed hole lines.

    Missing holes are skipped; holes are numbered from one in error messages.
    """
    rings = [_check_shell(shell).vertices]
    for number, hole in enumerate(holes or (), start=1):
        if hole is None:
            continue
        if not isinstance(hole, LineString):
            raise ValueError(f"ST_MakePolygon hole #{number} is not a LINESTRING geometry")
        if len(hole) < 4:
            raise ValueError(f"ST_MakePolygon hole #{number} requires at least 4 vertices")
        if not hole.is_closed:
            raise ValueError(
                f"ST_MakePolygon hole #{number} must be closed "
                "(first and last vertex must be equal)"
            )
        rings.append(hole.vertices)
    return Polygon(tuple(rings))