"""Geometry model and the basic measurements on it: area, length, dimension, emptiness and extent."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import pairwise
from typing import Iterable, Iterator, Union

Vertex = tuple[float, float]


class GeometryType(IntEnum):
    """Kinds of geometry, in their canonical order."""

    POINT = 0
    LINESTRING = 1
    POLYGON = 2
    MULTIPOINT = 3
    MULTILINESTRING = 4
    MULTIPOLYGON = 5
    GEOMETRYCOLLECTION = 6


def _vertex(value: Iterable[float]) -> Vertex:
    x, y = value
    return (float(x), float(y))


def _vertices(values: Iterable[Iterable[float]]) -> tuple[Vertex, ...]:
    return tuple(_vertex(v) for v in values)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle given by its minimum and maximum corners."""

    minx: float
    miny: float
    maxx: float
    maxy: float

    def intersects(self, other: BoundingBox) -> bool:
        """Whether the two boxes overlap or touch."""
        return not (
            self.minx > other.maxx
            or self.maxx < other.minx
            or self.miny > other.maxy
            or self.maxy < other.miny
        )


@dataclass(frozen=True)
class Point:
    """A single vertex, or an empty point when ``vertex`` is None."""

    vertex: Vertex | None = None
    type = GeometryType.POINT

    def __post_init__(self) -> None:
        if self.vertex is not None:
            object.__setattr__(self, "vertex", _vertex(self.vertex))

    @property
    def x(self) -> float:
        if self.vertex is None:
            raise ValueError("empty point has no coordinates")
        return self.vertex[0]

    @property
    def y(self) -> float:
        if self.vertex is None:
            raise ValueError("empty point has no coordinates")
        return self.vertex[1]

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return () if self.vertex is None else (self.vertex,)


@dataclass(frozen=True)
class LineString:
    """An ordered sequence of vertices."""

    vertices: tuple[Vertex, ...] = ()
    type = GeometryType.LINESTRING

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", _vertices(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    @property
    def is_closed(self) -> bool:
        return bool(self.vertices) and self.vertices[0] == self.vertices[-1]


@dataclass(frozen=True)
class Polygon:
    """A shell ring followed by zero or more hole rings."""

    rings: tuple[tuple[Vertex, ...], ...] = ()
    type = GeometryType.POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "rings", tuple(_vertices(r) for r in self.rings))

    def __len__(self) -> int:
        return len(self.rings)

    def __iter__(self) -> Iterator[tuple[Vertex, ...]]:
        return iter(self.rings)

    @property
    def shell(self) -> tuple[Vertex, ...]:
        if not self.rings:
            raise ValueError("empty polygon has no shell")
        return self.rings[0]

    @property
    def holes(self) -> tuple[tuple[Vertex, ...], ...]:
        return self.rings[1:]


@dataclass(frozen=True)
class MultiPoint:
    points: tuple[Point, ...] = ()
    type = GeometryType.MULTIPOINT

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass(frozen=True)
class MultiLineString:
    lines: tuple[LineString, ...] = ()
    type = GeometryType.MULTILINESTRING

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)


@dataclass(frozen=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...] = ()
    type = GeometryType.MULTIPOLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)


@dataclass(frozen=True)
class GeometryCollection:
    geometries: tuple["Geometry", ...] = field(default=())
    type = GeometryType.GEOMETRYCOLLECTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(self.geometries))

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator["Geometry"]:
        return iter(self.geometries)


Geometry = Union[
    Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon, GeometryCollection
]

_GEOMETRY_CLASSES = (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)


def _check(geom: object) -> None:
    if not isinstance(geom, _GEOMETRY_CLASSES):
        raise TypeError(f"not a geometry: {type(geom).__name__}")


def _ring_area(ring: tuple[Vertex, ...]) -> float:
    total = sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in pairwise(ring))
    return abs(total) * 0.5


def _polygon_area(polygon: Polygon) -> float:
    if not polygon.rings:
        return 0.0
    shell, *holes = polygon.rings
    return _ring_area(shell) - sum(_ring_area(h) for h in holes)


def _line_length(vertices: tuple[Vertex, ...]) -> float:
    return sum(math.hypot(x1 - x2, y1 - y2) for (x1, y1), (x2, y2) in pairwise(vertices))


def area(geom: Geometry) -> float:
    """Planar area; zero for points and lines.

    A collection sums the areas of its direct polygon and multipolygon members.
    """
    _check(geom)
    if isinstance(geom, Polygon):
        return _polygon_area(geom)
    if isinstance(geom, MultiPolygon):
        return sum(_polygon_area(p) for p in geom)
    if isinstance(geom, GeometryCollection):
        total = 0.0
        for child in geom:
            if isinstance(child, Polygon):
                total += _polygon_area(child)
            elif isinstance(child, MultiPolygon):
                total += sum(_polygon_area(p) for p in child)
        return total
    return 0.0


def length(geom: Geometry) -> float:
    """Planar length of linear geometries; zero for everything else.

    A collection sums the lengths of its direct linestring and multilinestring members.
    """
    _check(geom)
    if isinstance(geom, LineString):
        return _line_length(geom.vertices)
    if isinstance(geom, MultiLineString):
        return sum(_line_length(line.vertices) for line in geom)
    if isinstance(geom, GeometryCollection):
        total = 0.0
        for child in geom:
            if isinstance(child, LineString):
                total += _line_length(child.vertices)
            elif isinstance(child, MultiLineString):
                total += sum(_line_length(line.vertices) for line in child)
        return total
    return 0.0


def dimension(geom: Geometry) -> int:
    """Topological dimension: 0 for points, 1 for lines, 2 for polygons.

    A collection has the highest dimension among its members, or 0 when it has none.
    """
    _check(geom)
    if isinstance(geom, (Point, MultiPoint)):
        return 0
    if isinstance(geom, (LineString, MultiLineString)):
        return 1
    if isinstance(geom, (Polygon, MultiPolygon)):
        return 2
    return max((dimension(child) for child in geom), default=0)


def is_empty(geom: Geometry) -> bool:
    """Whether the geometry holds no parts at its top level."""
    _check(geom)
    if isinstance(geom, Point):
        return geom.vertex is None
    if isinstance(geom, LineString):
        return not geom.vertices
    return len(geom) == 0


def _iter_vertices(geom: Geometry) -> Iterator[Vertex]:
    if isinstance(geom, (Point, LineString)):
        yield from geom.vertices
    elif isinstance(geom, Polygon):
        for ring in geom.rings:
            yield from ring
    else:
        for child in geom:
            yield from _iter_vertices(child)


def bounding_box(geom: Geometry) -> BoundingBox | None:
    """Smallest box holding every vertex, or None when there are no vertices."""
    _check(geom)
    vertices = list(_iter_vertices(geom))
    if not vertices:
        return None
    xs = [x for x, _ in vertices]
    ys = [y for _, y in vertices]
    return BoundingBox(min(xs), min(ys), max(xs), max(ys))


def extent(geom: Geometry | None) -> BoundingBox | None:
    """Extent of a geometry; None for a missing or vertex-less geometry."""
    if geom is None:
        return None
    return bounding_box(geom)


def intersects_extent(left: Geometry | None, right: Geometry | None) -> bool:
    """Whether the extents of two geometries overlap; False if either has none."""
    left_box = extent(left)
    right_box = extent(right)
    if left_box is None or right_box is None:
        return False
    return left_box.intersects(right_box)