import math
import sys

import pytest

from geospan.geometry import BoundingBox, LineString, Point, Polygon, length
from geospan.planar import (
    box_area,
    box_centroid,
    box_intersects,
    linestring_centroid,
    linestring_length,
    point_distance,
    point_linestring_distance,
    point_within_polygon,
    polygon_area,
    polygon_centroid,
    polygon_contains_point,
)


def rect_ring(minx, miny, maxx, maxy):
    return ((minx, miny), (maxx, miny), (maxx, maxy), (minx, maxy), (minx, miny))


SQUARE = Polygon((rect_ring(0, 0, 10, 10),))
HOLED = Polygon((rect_ring(0, 0, 10, 10), rect_ring(4, 4, 6, 6)))


@pytest.mark.parametrize("box", [BoundingBox(0, 0, 2, 3), BoundingBox(-5, 1, 7, 9.5)])
def test_polygon_area_matches_box_area(box):
    poly = Polygon((rect_ring(box.minx, box.miny, box.maxx, box.maxy),))
    assert polygon_area(poly) == pytest.approx(box_area(box))


def test_box_area_value():
    assert box_area(BoundingBox(0, 0, 2, 3)) == 6.0


def test_polygon_area_subtracts_holes():
    shell = Polygon((rect_ring(0, 0, 10, 10),))
    hole = Polygon((rect_ring(4, 4, 6, 6),))
    assert polygon_area(HOLED) == pytest.approx(polygon_area(shell) - polygon_area(hole))


def test_polygon_area_orientation_independent():
    reversed_square = Polygon((tuple(reversed(rect_ring(0, 0, 10, 10))),))
    assert polygon_area(reversed_square) == pytest.approx(polygon_area(SQUARE))


def test_polygon_area_empty():
    assert polygon_area(Polygon()) == 0.0


def test_linestring_length_is_sum_of_distances():
    vertices = ((0, 0), (3, 4), (3, 10), (-2, 7))
    line = LineString(vertices)
    expected = sum(point_distance(a, b) for a, b in zip(vertices, vertices[1:]))
    assert linestring_length(line) == pytest.approx(expected)
    assert linestring_length(line) == pytest.approx(length(line))


def test_linestring_length_degenerate():
    assert linestring_length(LineString()) == 0.0
    assert linestring_length(LineString(((1, 1),))) == 0.0


def test_linestring_centroid_of_segment_is_midpoint():
    line = LineString(((2, 2), (8, 6)))
    centroid = linestring_centroid(line)
    mid = box_centroid(BoundingBox(2, 2, 8, 6))
    assert (centroid.x, centroid.y) == pytest.approx((mid.x, mid.y))


def test_linestring_centroid_zero_length_is_nan():
    centroid = linestring_centroid(LineString(((1, 1), (1, 1))))
    assert [math.isnan(centroid.x), math.isnan(centroid.y)] == [True, True]


def test_polygon_centroid_matches_box_centroid():
    box = BoundingBox(-3, 2, 7, 12)
    poly = Polygon((rect_ring(box.minx, box.miny, box.maxx, box.maxy),))
    got = polygon_centroid(poly)
    want = box_centroid(box)
    assert (got.x, got.y) == pytest.approx((want.x, want.y))


def test_polygon_centroid_symmetric_hole_keeps_centroid():
    with_hole = polygon_centroid(HOLED)
    without = polygon_centroid(SQUARE)
    assert (with_hole.x, with_hole.y) == pytest.approx((without.x, without.y))


def test_polygon_centroid_empty_is_nan():
    centroid = polygon_centroid(Polygon())
    assert [math.isnan(centroid.x), math.isnan(centroid.y)] == [True, True]


def test_box_centroid_value():
    centroid = box_centroid(BoundingBox(0, 0, 2, 4))
    assert (centroid.x, centroid.y) == (1.0, 2.0)


@pytest.mark.parametrize(
    "point, inside",
    [
        ((2, 2), True),
        (Point((8, 1)), True),
        ((15, 5), False),
        ((-1, -1), False),
        ((5, 5), False),  # inside the hole
        ((0, 5), False),  # on the shell edge
    ],
)
def test_polygon_contains_point(point, inside):
    assert polygon_contains_point(HOLED, point) is inside
    assert point_within_polygon(point, HOLED) is inside


def test_contains_empty_polygon():
    assert polygon_contains_point(Polygon(), (0, 0)) is False


def test_point_distance_value_and_symmetry():
    assert point_distance((0, 0), (3, 4)) == 5.0
    assert point_distance(Point((1, 2)), (7, -3)) == point_distance((7, -3), (1, 2))


def test_point_on_line_has_zero_distance():
    line = LineString(((0, 0), (10, 0), (10, 10)))
    assert point_linestring_distance((10, 5), line) == 0.0


def test_perpendicular_distance_to_segment():
    line = LineString(((0, 0), (10, 0)))
    assert point_linestring_distance((4, 7.5), line) == pytest.approx(7.5)


def test_distance_beyond_endpoint_is_distance_to_endpoint():
    line = LineString(((0, 0), (10, 0)))
    point = (13, 4)
    assert point_linestring_distance(point, line) == pytest.approx(point_distance(point, (10, 0)))


def test_distance_independent_of_line_direction():
    vertices = ((0, 0), (5, 5), (9, 1))
    point = (3, -2)
    forward = point_linestring_distance(point, LineString(vertices))
    backward = point_linestring_distance(point, LineString(tuple(reversed(vertices))))
    assert forward == pytest.approx(backward)


def test_distance_to_line_without_segments():
    assert point_linestring_distance((0, 0), LineString(((1, 1),))) == math.sqrt(
        sys.float_info.max
    )


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (BoundingBox(0, 0, 2, 2), BoundingBox(1, 1, 3, 3), True),
        (BoundingBox(0, 0, 2, 2), BoundingBox(2, 2, 3, 3), True),
        (BoundingBox(0, 0, 1, 1), BoundingBox(2, 2, 3, 3), False),
        (BoundingBox(0, 0, 10, 10), BoundingBox(3, 3, 4, 4), True),
    ],
)
def test_box_intersects(left, right, expected):
    assert box_intersects(left, right) is expected
    assert box_intersects(right, left) is expected
    assert left.intersects(right) is expected