# geospan

Two-dimensional planar geometry in pure Python: the seven standard geometry
types, planar measurements, and conversion to and from WKB, hex WKB, GeoJSON
and WKT-style text. It uses only the standard library.

## Installation

```
pip install geospan
```

With the test tools:

```
pip install "geospan[test]"
```

## Geometry types

`geospan.geometry` defines frozen dataclasses for the geometry types:

- `Point(vertex)` – a single `(x, y)` vertex, or an empty point when `vertex`
  is `None`. It has `x`, `y` and `vertices`.
- `LineString(vertices)` – an ordered tuple of vertices, with `is_closed`.
- `Polygon(rings)` – a shell ring followed by hole rings, with `shell` and
  `holes`.
- `MultiPoint(points)`, `MultiLineString(lines)`, `MultiPolygon(polygons)`
  and `GeometryCollection(geometries)`.

Each has a `type` attribute from the `GeometryType` enumeration. Multi-part
types and collections support `len()` and iteration.

`BoundingBox(minx, miny, maxx, maxy)` is an axis-aligned box;
`BoundingBox.intersects` tells whether two boxes overlap or touch.

Measures on any geometry:

- `area` – planar area; zero for points and lines. A collection sums its
  direct polygon and multipolygon members.
- `length` – planar length of lines; zero for other types. A collection sums
  its direct linestring and multilinestring members.
- `dimension` – 0, 1 or 2; a collection takes the highest of its members.
- `is_empty` – whether the geometry has no parts at its top level.
- `bounding_box` and `extent` – the smallest box holding every vertex, or
  `None` when there are none (`extent` also accepts `None`).
- `intersects_extent` – whether the extents of two geometries overlap;
  `False` if either has no extent.

## Planar operations on simple shapes

`geospan.planar` works on `LineString`, `Polygon` and `BoundingBox` values;
points may be a `Point` or an `(x, y)` pair.

| Task | Functions |
| --- | --- |
| Area and length | `polygon_area`, `box_area`, `linestring_length` |
| Centroids | `linestring_centroid`, `polygon_centroid`, `box_centroid` |
| Containment | `polygon_contains_point`, `point_within_polygon` |
| Distance | `point_distance`, `point_linestring_distance` |
| Box overlap | `box_intersects` |

Centroids are returned as `Point`. A point on a ring's boundary is not
contained. Degenerate shapes give NaN rather than raising.

## Formats

- **WKB** (`geospan.wkb`): `to_wkb` writes two-dimensional little-endian WKB;
  `from_wkb` reads WKB or EWKB in either byte order, skipping an SRID and
  dropping Z and M ordinates. `to_hex_wkb` and `from_hex_wkb` do the same with
  hexadecimal text (written upper case).
- **Strict readers:** `read_point_2d`, `read_linestring_2d` and
  `read_polygon_2d` read one little-endian two-dimensional WKB shape and return
  a `Point`, `LineString` or `Polygon`.
- Bad WKB input raises `WKBError`, a `ValueError`.
- **GeoJSON** (`geospan.geojson`): `to_geojson` writes a compact geometry
  object; `from_geojson` parses one, allowing comments and trailing commas.
  Bad input, or a non-finite coordinate on output, raises `GeoJSONError`.
- **Text** (`geospan.text`): `to_text` renders any geometry as WKT-style text.
  `point_2d_to_text`, `linestring_2d_to_text`, `polygon_2d_to_text` and
  `box_2d_to_text` render the simple shapes, and `format_coord` formats one
  coordinate pair using the shortest exact form of each number.

## Building and taking apart

`geospan.construct`:

- `make_envelope(min_x, min_y, max_x, max_y)` – a closed rectangular polygon.
- `make_line(points)` – a line through points; missing and empty points are
  skipped.
- `make_line_between(left, right)` – a line between two points.
- `make_polygon(shell, holes)` – a polygon from a closed shell linestring of at
  least four vertices and optional closed hole linestrings.

Invalid input raises `ValueError`.

`geospan.multi`:

- `collect` – gathers geometries into the narrowest multi-type that holds
  them, leaving out missing and empty ones.
- `collection_extract(geom, requested_type)` – with 1, 2 or 3 returns the
  points, lines or polygons; without a type, a collection yields the parts of
  its highest dimension.
- `dump` – flattens a geometry into `(part, path)` pairs with one-based paths.

`geospan.accessors`:

- `end_point` – the last vertex of a linestring as a `Point`, or `None` for
  other geometries and empty lines.
- `linestring_end_point` – the same for a `LineString`.

## Aggregation

`geospan.aggregate.envelope_agg` returns the envelope of many geometries as a
rectangular polygon, or `None` if none had vertices.

For incremental use, an `EnvelopeAggregate` has `add` to feed one geometry,
`combine` to merge another aggregate, and `result` to get the envelope.

## Example

```python
from geospan.construct import make_envelope
from geospan.geometry import area
from geospan.wkb import from_wkb, to_wkb

box = make_envelope(0.0, 0.0, 2.0, 3.0)
assert area(box) == 6.0
assert from_wkb(to_wkb(box)) == box
```

## What it does not do

geospan is a library only: it has no command-line tool, no storage or query
layer, and no spatial index. It does not parse WKT, handle coordinate
reference systems, or write Z and M ordinates. Geometry predicates beyond
point-in-polygon and extent overlap are not provided.