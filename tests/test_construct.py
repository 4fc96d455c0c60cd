import pytest

from geospan.construct import make_envelope, make_line, make_line_between, make_polygon
from geospan.geometry import BoundingBox, LineString, Point, Polygon, bounding_box

SHELL = LineString(((0, 0), (10, 0), (10, 10), (0, 10), (0, 0)))
HOLE = LineString(((1, 1), (2, 1), (2, 2), (1, 1)))


def test_envelope_is_closed_and_spans_corners():
    env = make_envelope(0.0, 0.0, 2.0, 1.0)
    shell = env.shell
    assert len(shell) == 5
    assert shell[0] == shell[-1]
    assert bounding_box(env) == BoundingBox(0.0, 0.0, 2.0, 1.0)


def test_envelope_vertex_order():
    env = make_envelope(0.0, 0.0, 2.0, 1.0)
    assert env.shell == ((0.0, 0.0), (0.0, 1.0), (2.0, 1.0), (2.0, 0.0), (0.0, 0.0))


def test_make_line_keeps_point_order():
    pts = [Point((0, 0)), Point((1, 2)), Point((3, 4))]
    assert make_line(pts).vertices == ((0.0, 0.0), (1.0, 2.0), (3.0, 4.0))


def test_make_line_skips_missing_and_empty():
    pts = [Point((0, 0)), None, Point(), Point((5, 5))]
    assert make_line(pts).vertices == ((0.0, 0.0), (5.0, 5.0))


def test_make_line_of_nothing_is_empty():
    assert make_line([]) == LineString()


def test_make_line_single_point_fails():
    with pytest.raises(ValueError, match="zero or two or more"):
        make_line([Point((1, 1)), Point()])


def test_make_line_rejects_non_points():
    with pytest.raises(ValueError, match="only accepts POINT"):
        make_line([Point((0, 0)), SHELL])


def test_make_line_between():
    assert make_line_between(Point((1, 1)), Point((2, 3))).vertices == ((1.0, 1.0), (2.0, 3.0))


def test_make_line_between_both_empty():
    assert make_line_between(Point(), Point()) == LineString()


def test_make_line_between_one_empty_fails():
    with pytest.raises(ValueError, match="zero or two or more"):
        make_line_between(Point((1, 1)), Point())


def test_make_polygon_from_shell():
    poly = make_polygon(SHELL, None)
    assert poly.rings == (SHELL.vertices,)


def test_make_polygon_with_holes_skips_missing():
    poly = make_polygon(SHELL, [None, HOLE])
    assert poly == Polygon((SHELL.vertices, HOLE.vertices))


def test_make_polygon_shell_must_be_linestring():
    with pytest.raises(ValueError, match="only accepts LINESTRING"):
        make_polygon(Point((0, 0)), [])


def test_make_polygon_shell_needs_four_vertices():
    with pytest.raises(ValueError, match="at least 4 vertices"):
        make_polygon(LineString(((0, 0), (1, 0), (0, 0))), [])


def test_make_polygon_shell_must_be_closed():
    with pytest.raises(ValueError, match="must be closed"):
        make_polygon(LineString(((0, 0), (1, 0), (1, 1), (0, 1))), [])


def test_make_polygon_hole_numbering():
    open_hole = LineString(((1, 1), (2, 1), (2, 2), (1, 2)))
    with pytest.raises(ValueError, match="hole #2 must be closed"):
        make_polygon(SHELL, [HOLE, open_hole])


def test_make_polygon_hole_must_be_linestring():
    with pytest.raises(ValueError, match="hole #1 is not a LINESTRING"):
        make_polygon(SHELL, [Point((1, 1))])


def test_make_polygon_hole_needs_four_vertices():
    with pytest.raises(ValueError, match="hole #1 requires at least 4 vertices"):
        make_polygon(SHELL, [LineString(((1, 1), (2, 2), (1, 1)))])