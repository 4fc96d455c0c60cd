"""Conversion between geometries and GeoJSON geometry fragments.

Output is compact JSON with the ``type`` key first. Input may contain
``//`` and ``/* */`` comments and trailing commas.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from typing import Any

from geospan.geometry import (
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

__all__ = ["GeoJSONError", "to_geojson", "from_geojson"]


class GeoJSONError(ValueError):
    """Raised when GeoJSON input is malformed or a geometry cannot be written."""


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def _coords(vertices: Iterable[Vertex]) -> list[list[float]]:
    return [[x, y] for x, y in vertices]


def _to_object(geom: Geometry) -> dict[str, Any]:
    if isinstance(geom, Point):
        return {"type": "Point", "coordinates": [] if geom.vertex is None else list(geom.vertex)}
    if isinstance(geom, LineString):
        return {"type": "LineString", "coordinates": _coords(geom.vertices)}
    if isinstance(geom, Polygon):
        return {"type": "Polygon", "coordinates": [_coords(ring) for ring in geom.rings]}
    if isinstance(geom, MultiPoint):
        # Each point adds its own vertex; empty points add nothing.
        return {
            "type": "MultiPoint",
            "coordinates": [c for point in geom for c in _coords(point.vertices)],
        }
    if isinstance(geom, MultiLineString):
        return {"type": "MultiLineString", "coordinates": [_coords(line.vertices) for line in geom]}
    if isinstance(geom, MultiPolygon):
        return {
            "type": "MultiPolygon",
            "coordinates": [[_coords(ring) for ring in poly.rings] for poly in geom],
        }
    if isinstance(geom, GeometryCollection):
        return {"type": "GeometryCollection", "geometries": [_to_object(g) for g in geom]}
    raise TypeError(f"not a geometry: {type(geom).__name__}")


def to_geojson(geom: Geometry) -> str:
    """Render a geometry as a compact GeoJSON geometry object."""
    obj = _to_object(geom)
    try:
        return json.dumps(obj, separators=(",", ":"), allow_nan=False)
    except ValueError as exc:
        raise GeoJSONError(f"cannot write non-finite coordinate as GeoJSON: {exc}") from exc


# ---------------------------------------------------------------------------
# Lenient pre-processing
# ---------------------------------------------------------------------------


def _strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
            out.append(" ")
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise GeoJSONError("unclosed comment")
            i = end + 2
            out.append(" ")
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < n and text[j] in " \t\r\n":
                j += 1
            if j < n and text[j] in "]}":
                i += 1
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def _first_key_wins(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        result.setdefault(key, value)
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid literal {name}")


def _parse(text: str) -> Any:
    try:
        cleaned = _strip_trailing_commas(_strip_comments(text))
        return json.loads(
            cleaned, object_pairs_hook=_first_key_wins, parse_constant=_reject_constant
        )
    except (ValueError, GeoJSONError) as exc:
        raise GeoJSONError(f"Could not parse GeoJSON input: {exc}, ({text})") from exc


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def _is_num(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class _Decoder:
    def __init__(self, raw: str) -> None:
        self.raw = raw

    def fail(self, message: str) -> GeoJSONError:
        return GeoJSONError(f"GeoJSON input {message}: {self.raw}")

    def point(self, coords: list[Any]) -> Point:
        if not coords:
            return Point()
        if len(coords) < 2:
            raise self.fail("coordinates field is not an array of at least length 2")
        x, y = coords[0], coords[1]
        if not _is_num(x) or not _is_num(y):
            raise self.fail("coordinates field is not an array of numbers")
        return Point((float(x), float(y)))

    def vertices(self, coords: list[Any]) -> tuple[Vertex, ...]:
        result = []
        for coord in coords:
            if not isinstance(coord, list):
                raise self.fail("coordinates field is not an array of arrays")
            if len(coord) < 2:
                raise self.fail("coordinates field is not an array of arrays of length >= 2")
            x, y = coord[0], coord[1]
            if not _is_num(x) or not _is_num(y):
                raise self.fail("coordinates field is not an array of arrays of numbers")
            result.append((float(x), float(y)))
        return tuple(result)

    def _arrays(self, coords: list[Any]) -> list[list[Any]]:
        for item in coords:
            if not isinstance(item, list):
                raise self.fail("coordinates field is not an array of arrays")
        return coords

    def linestring(self, coords: list[Any]) -> LineString:
        return LineString(self.vertices(coords))

    def polygon(self, coords: list[Any]) -> Polygon:
        return Polygon(tuple(self.vertices(ring) for ring in self._arrays(coords)))

    def multipoint(self, coords: list[Any]) -> MultiPoint:
        points = []
        for item in self._arrays(coords):
            if len(item) < 2:
                raise self.fail("coordinates field is not an array of arrays of length >= 2")
            points.append(self.point(item))
        return MultiPoint(tuple(points))

    def multilinestring(self, coords: list[Any]) -> MultiLineString:
        return MultiLineString(tuple(self.linestring(c) for c in self._arrays(coords)))

    def multipolygon(self, coords: list[Any]) -> MultiPolygon:
        return MultiPolygon(tuple(self.polygon(c) for c in self._arrays(coords)))

    def collection(self, root: dict[str, Any]) -> GeometryCollection:
        if "geometries" not in root:
            raise self.fail("does not have a geometries field")
        members = root["geometries"]
        if not isinstance(members, list):
            raise self.fail("geometries field is not an array")
        return GeometryCollection(tuple(self.geometry(m) for m in members))

    def geometry(self, root: Any) -> Geometry:
        if not isinstance(root, dict) or "type" not in root:
            raise self.fail("does not have a type field")
        type_name = root["type"]
        if not isinstance(type_name, str):
            raise self.fail("type field is not a string")
        if type_name == "GeometryCollection":
            return self.collection(root)
        if "coordinates" not in root:
            raise self.fail("does not have a coordinates field")
        coords = root["coordinates"]
        if not isinstance(coords, list):
            raise self.fail("coordinates field is not an array")
        readers = {
            "Point": self.point,
            "LineString": self.linestring,
            "Polygon": self.polygon,
            "MultiPoint": self.multipoint,
            "MultiLineString": self.multilinestring,
            "MultiPolygon": self.multipolygon,
        }
        reader = readers.get(type_name)
        if reader is None:
            raise self.fail("has invalid type field")
        return reader(coords)


def from_geojson(text: str) -> Geometry:
    """Parse a GeoJSON geometry object into a geometry."""
    root = _parse(text)
    if not isinstance(root, dict):
        raise GeoJSONError(f"Could not parse GeoJSON input: root is not an object, ({text})")
    return _Decoder(text).geometry(root)