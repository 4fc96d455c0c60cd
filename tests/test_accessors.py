from geospan.accessors import end_point, linestring_end_point
from geospan.geometry import LineString, Point, Polygon

LINE = LineString(((0, 0), (1, 1), (5, 7)))


def test_linestring_end_point_is_last_vertex():
    assert linestring_end_point(LINE) == Point(LINE.vertices[-1])


def test_linestring_end_point_empty_or_missing():
    assert linestring_end_point(LineString()) is None
    assert linestring_end_point(None) is None


def test_end_point_of_line():
    assert end_point(LINE) == Point((5, 7))


def test_end_point_of_other_types_is_none():
    assert end_point(Point((1, 2))) is None
    assert end_point(Polygon((((0, 0), (1, 0), (1, 1), (0, 0)),))) is None
    assert end_point(None) is None


def test_end_point_of_empty_line_is_none():
    assert end_point(LineString()) is None