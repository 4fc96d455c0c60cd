import math

import pytest

from geospan.geometry import (
    BoundingBox,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
)
from geospan.text import (
    box_2d_to_text,
    format_coord,
    linestring_2d_to_text,
    point_2d_to_text,
    polygon_2d_to_text,
    to_text,
)

SQUARE = Polygon((((0, 0), (1, 0), (1, 1), (0, 1), (0, 0)),))


def test_point_with_nan_is_empty():
    assert point_2d_to_text((math.nan, 1.0)) == "POINT EMPTY"


def test_empty_point_object_is_empty():
    assert point_2d_to_text(Point()) == "POINT EMPTY"


def test_empty_linestring():
    assert linestring_2d_to_text(LineString()) == "LINESTRING EMPTY"


def test_empty_polygon():
    assert polygon_2d_to_text(Polygon()) == "POLYGON EMPTY"


def test_point_text():
    assert point_2d_to_text((1, 2)) == "POINT (1 2)"


def test_format_coord_trims_trailing_zero():
    assert format_coord(1.5, -2.0) == "1.5 -2"


def test_linestring_has_one_separator_per_segment():
    line = LineString(((0, 0), (1, 1), (2, 5), (3, 3)))
    text = linestring_2d_to_text(line)
    assert text.startswith("LINESTRING (")
    assert text.endswith(")")
    assert text.count(", ") == len(line) - 1
    for x, y in line.vertices:
        assert format_coord(x, y) in text


def test_polygon_text_contains_each_ring():
    poly = Polygon(
        (
            ((0, 0), (4, 0), (4, 4), (0, 4), (0, 0)),
            ((1, 1), (2, 1), (2, 2), (1, 1)),
        )
    )
    text = polygon_2d_to_text(poly)
    assert text.startswith("POLYGON ((")
    assert text.endswith("))")
    assert text.count("(") == 1 + len(poly.rings)


def test_box_text_shape():
    text = box_2d_to_text(BoundingBox(0, 0, 1, 1))
    assert text.startswith("BOX(")
    assert text.endswith(")")
    assert format_coord(0, 0) in text and format_coord(1, 1) in text


@pytest.mark.parametrize(
    "geom, render",
    [
        (Point((3, 4)), point_2d_to_text),
        (LineString(((0, 0), (1, 2))), linestring_2d_to_text),
        (SQUARE, polygon_2d_to_text),
    ],
)
def test_to_text_agrees_with_2d_renderers(geom, render):
    assert to_text(geom) == render(geom)


def test_collection_text_holds_members():
    point = Point((1, 2))
    line = LineString(((0, 0), (1, 1)))
    text = to_text(GeometryCollection((point, line)))
    assert text.startswith("GEOMETRYCOLLECTION (")
    assert to_text(point) in text
    assert to_text(line) in text


def test_empty_multipolygon():
    assert to_text(MultiPolygon()) == "MULTIPOLYGON EMPTY"


def test_to_text_rejects_non_geometry():
    with pytest.raises(TypeError):
        to_text("POINT (1 2)")