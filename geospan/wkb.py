"""Reading and writing geometries as well-known binary (WKB) and its hex form.

Geometries are written as two-dimensional little-endian WKB. The reader takes
either byte order and ISO or extended (EWKB) headers. It skips an embedded SRID
and drops Z and M ordinates.
"""

from __future__ import annotations

import binascii
import math
import struct
from collections.abc import Iterator

from geospan.geometry import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Vertex,
)

__all__ = [
    "WKBError",
    "to_wkb",
    "from_wkb",
    "to_hex_wkb",
    "from_hex_wkb",
    "read_point_2d",
    "read_linestring_2d",
    "read_polygon_2d",
]

_LITTLE_ENDIAN = 1
_BIG_ENDIAN = 0

_EWKB_Z = 0x80000000
_EWKB_M = 0x40000000
_EWKB_SRID = 0x20000000


class WKBError(ValueError):
    """Raised when WKB or hex WKB input cannot be decoded."""


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


def _header(gtype: GeometryType) -> bytes:
    return struct.pack("<BI", _LITTLE_ENDIAN, int(gtype) + 1)


def _pack_vertices(vertices: tuple[Vertex, ...]) -> bytes:
    parts = [struct.pack("<I", len(vertices))]
    parts.extend(struct.pack("<dd", x, y) for x, y in vertices)
    return b"".join(parts)


def _encode(geom: Geometry) -> Iterator[bytes]:
    yield _header(geom.type)
    if isinstance(geom, Point):
        if geom.vertex is None:
            yield struct.pack("<dd", math.nan, math.nan)
        else:
            yield struct.pack("<dd", *geom.vertex)
    elif isinstance(geom, LineString):
        yield _pack_vertices(geom.vertices)
    elif isinstance(geom, Polygon):
        yield struct.pack("<I", len(geom.rings))
        for ring in geom.rings:
            yield _pack_vertices(ring)
    elif isinstance(geom, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        yield struct.pack("<I", len(geom))
        for child in geom:
            yield from _encode(child)
    else:
        raise TypeError(f"not a geometry: {type(geom).__name__}")


def to_wkb(geom: Geometry) -> bytes:
    """Encode a geometry as two-dimensional little-endian WKB."""
    return b"".join(_encode(geom))


def to_hex_wkb(geom: Geometry) -> str:
    """Encode a geometry as WKB rendered in upper-case hexadecimal."""
    return to_wkb(geom).hex().upper()


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


class _Reader:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"WKB input must be bytes-like, not {type(data).__name__}")
        self._data = bytes(data)
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise WKBError("unexpected end of WKB data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def byte(self) -> int:
        return self._take(1)[0]

    def uint32(self, little: bool) -> int:
        return struct.unpack("<I" if little else ">I", self._take(4))[0]

    def double(self, little: bool) -> float:
        return struct.unpack("<d" if little else ">d", self._take(8))[0]


def _read_byte_order(reader: _Reader) -> bool:
    order = reader.byte()
    if order not in (_LITTLE_ENDIAN, _BIG_ENDIAN):
        raise WKBError(f"invalid WKB byte order marker: {order}")
    return order == _LITTLE_ENDIAN


def _read_vertex(reader: _Reader, little: bool, dims: int) -> Vertex:
    values = [reader.double(little) for _ in range(dims)]
    return (values[0], values[1])


def _read_vertices(reader: _Reader, little: bool, dims: int) -> tuple[Vertex, ...]:
    count = reader.uint32(little)
    return tuple(_read_vertex(reader, little, dims) for _ in range(count))


def _read_geometry(reader: _Reader) -> Geometry:
    little = _read_byte_order(reader)
    raw = reader.uint32(little)
    has_z = bool(raw & _EWKB_Z)
    has_m = bool(raw & _EWKB_M)
    has_srid = bool(raw & _EWKB_SRID)
    code = raw & 0x0FFFFFFF
    if code >= 1000:
        iso, code = divmod(code, 1000)
        if iso not in (1, 2, 3):
            raise WKBError(f"unsupported WKB geometry type: {raw}")
        has_z = has_z or iso in (1, 3)
        has_m = has_m or iso in (2, 3)
    if not 1 <= code <= 7:
        raise WKBError(f"unsupported WKB geometry type: {raw}")
    if has_srid:
        reader.uint32(little)
    gtype = GeometryType(code - 1)
    dims = 2 + int(has_z) + int(has_m)

    if gtype is GeometryType.POINT:
        x, y = _read_vertex(reader, little, dims)
        if math.isnan(x) and math.isnan(y):
            return Point()
        return Point((x, y))
    if gtype is GeometryType.LINESTRING:
        return LineString(_read_vertices(reader, little, dims))
    if gtype is GeometryType.POLYGON:
        ring_count = reader.uint32(little)
        return Polygon(tuple(_read_vertices(reader, little, dims) for _ in range(ring_count)))

    count = reader.uint32(little)
    children = [_read_geometry(reader) for _ in range(count)]
    expected = {
        GeometryType.MULTIPOINT: Point,
        GeometryType.MULTILINESTRING: LineString,
        GeometryType.MULTIPOLYGON: Polygon,
    }.get(gtype)
    if expected is not None:
        for child in children:
            if not isinstance(child, expected):
                raise WKBError(
                    f"{gtype.name} member is a {child.type.name}, expected {expected.type.name}"
                )
    if gtype is GeometryType.MULTIPOINT:
        return MultiPoint(tuple(children))
    if gtype is GeometryType.MULTILINESTRING:
        return MultiLineString(tuple(children))
    if gtype is GeometryType.MULTIPOLYGON:
        return MultiPolygon(tuple(children))
    return GeometryCollection(tuple(children))


def from_wkb(data: bytes | bytearray | memoryview) -> Geometry:
    """Decode WKB or EWKB into a geometry."""
    return _read_geometry(_Reader(data))


def from_hex_wkb(text: str) -> Geometry:
    """Decode hexadecimal WKB or EWKB into a geometry."""
    if len(text) % 2 == 1:
        raise WKBError("Invalid HEX WKB string, length must be even.")
    try:
        blob = binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise WKBError(f"Invalid HEX WKB string: {exc}") from exc
    return from_wkb(blob)


# ---------------------------------------------------------------------------
# Strict two-dimensional readers
# ---------------------------------------------------------------------------


def _simple_header(reader: _Reader, code: int, name: str) -> None:
    order = reader.byte()
    if order != _LITTLE_ENDIAN:
        raise WKBError("expected little-endian WKB")
    gtype = reader.uint32(True)
    if gtype != code:
        raise WKBError(f"expected a {name} WKB geometry, got type {gtype}")


def _simple_vertices(reader: _Reader) -> tuple[Vertex, ...]:
    count = reader.uint32(True)
    if count == 0:
        raise WKBError("expected at least one vertex")
    return tuple((reader.double(True), reader.double(True)) for _ in range(count))


def read_point_2d(data: bytes | bytearray | memoryview) -> Point:
    """Read a little-endian two-dimensional WKB point."""
    reader = _Reader(data)
    _simple_header(reader, 1, "POINT")
    return Point((reader.double(True), reader.double(True)))


def read_linestring_2d(data: bytes | bytearray | memoryview) -> LineString:
    """Read a non-empty little-endian two-dimensional WKB linestring."""
    reader = _Reader(data)
    _simple_header(reader, 2, "LINESTRING")
    return LineString(_simple_vertices(reader))


def read_polygon_2d(data: bytes | bytearray | memoryview) -> Polygon:
    """Read a non-empty little-endian two-dimensional WKB polygon."""
    reader = _Reader(data)
    _simple_header(reader, 3, "POLYGON")
    ring_count = reader.uint32(True)
    if ring_count == 0:
        raise WKBError("expected at least one ring")
    return Polygon(tuple(_simple_vertices(reader) for _ in range(ring_count)))