"""Combining geometries into collections and taking collections apart again."""

from __future__ import annotations

from collections.abc import Iterable

from geospan.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    dimension,
    is_empty,
)

__all__ = ["collect", "collection_extract", "dump"]

_COLLECTION_TYPES = (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)


def collect(geometries: Iterable[Geometry | None]) -> Geometry:
    """Gather geometries into the narrowest collection that holds them all.

    Missing and empty geometries are left out. Only points give a multipoint,
    only lines a multilinestring, only polygons a multipolygon; anything else,
    or nothing at all, gives a geometry collection.
    """
    members = [g for g in geometries if g is not None and not is_empty(g)]
    if not members:
        return GeometryCollection()
    if all(isinstance(g, Point) for g in members):
        return MultiPoint(tuple(members))
    if all(isinstance(g, LineString) for g in members):
        return MultiLineString(tuple(members))
    if all(isinstance(g, Polygon) for g in members):
        return MultiPolygon(tuple(members))
    return GeometryCollection(tuple(members))


def _points(geom: Geometry) -> list[Point]:
    if isinstance(geom, Point):
        return [geom]
    if isinstance(geom, MultiPoint):
        return list(geom)
    if isinstance(geom, GeometryCollection):
        return [p for child in geom for p in _points(child)]
    return []


def _lines(geom: Geometry) -> list[LineString]:
    if isinstance(geom, LineString):
        return [geom]
    if isinstance(geom, MultiLineString):
        return list(geom)
    if isinstance(geom, GeometryCollection):
        return [line for child in geom for line in _lines(child)]
    return []


def _polygons(geom: Geometry) -> list[Polygon]:
    if isinstance(geom, Polygon):
        return [geom]
    if isinstance(geom, MultiPolygon):
        return list(geom)
    if isinstance(geom, GeometryCollection):
        return [p for child in geom for p in _polygons(child)]
    return []


_EXTRACTORS = {
    1: (Point, MultiPoint, _points),
    2: (LineString, MultiLineString, _lines),
    3: (Polygon, MultiPolygon, _polygons),
}


def _extract_type(geom: Geometry, requested_type: int) -> Geometry:
    try:
        single, multi, gather = _EXTRACTORS[requested_type]
    except KeyError:
        raise ValueError(
            "Invalid requested type parameter for collection extract, must be 1 "
            "(POINT), 2 (LINESTRING) or 3 (POLYGON)"
        ) from None
    if isinstance(geom, (single, multi)):
        return geom
    if isinstance(geom, _COLLECTION_TYPES):
        if isinstance(geom, GeometryCollection) and not is_empty(geom):
            return multi(tuple(gather(geom)))
        return multi()
    return single()


def _extract_auto(geom: Geometry) -> Geometry:
    if not isinstance(geom, GeometryCollection) or is_empty(geom):
        return geom
    dim = 0
    for child in geom:
        if not is_empty(child):
            dim = max(dimension(child), dim)
    if dim == 0:
        return MultiPoint(tuple(_points(geom)))
    if dim == 1:
        return MultiLineString(tuple(_lines(geom)))
    if dim == 2:
        return MultiPolygon(tuple(_polygons(geom)))
    raise RuntimeError("Invalid dimension in collection extract")


def collection_extract(geom: Geometry, requested_type: int | None = None) -> Geometry:
    """Pull the parts of one kind out of a geometry.

    With ``requested_type`` of 1, 2 or 3 the points, lines or polygons are
    returned as a multi-geometry. Without it, a geometry collection yields the
    parts of its highest non-empty dimension and anything else is returned as is.
    """
    if requested_type is None:
        return _extract_auto(geom)
    return _extract_type(geom, requested_type)


def dump(geom: Geometry | None) -> list[tuple[Geometry, tuple[int, ...]]] | None:
    """Flatten a geometry into its simple parts, each with its one-based path.

    Parts come in depth-first order. A missing geometry gives None.
    """
    if geom is None:
        return None
    stack: list[tuple[Geometry, tuple[int, ...]]] = [(geom, ())]
    items: list[tuple[Geometry, tuple[int, ...]]] = []
    while stack:
        current, path = stack.pop()
        if isinstance(current, _COLLECTION_TYPES):
            for index, child in enumerate(current, start=1):
                stack.append((child, path + (index,)))
        else:
            items.append((current, path))
    items.reverse()
    return items