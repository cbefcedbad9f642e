import math

import pytest

from streetchase.geometry import (
    MAP_BOUNDS,
    MAP_HEIGHT,
    MAP_WIDTH,
    Rect,
    Vec2,
    is_blocked,
    point_in_polygon,
    polygon_bounds,
)

SQUARE = [Vec2(0, 0), Vec2(10, 0), Vec2(10, 10), Vec2(0, 10)]


def test_add_and_subtract_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(3.25, 4.0)
    assert (a + b) - b == a


def test_scalar_operations_agree():
    a = Vec2(3.0, -7.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 2) / 2 == a


def test_negation_cancels():
    a = Vec2(4.0, -9.0)
    assert -a + a == Vec2()


def test_length():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-6.0, 2.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(v.y, v.x))


def test_zero_vector_normalizes_to_zero():
    assert Vec2().normalized() == Vec2()


def test_vector_unpacks():
    x, y = Vec2(2.0, 8.0)
    assert (x, y) == (2.0, 8.0)


def test_rect_intersects_overlap():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_rect_negative_size_is_normalized():
    assert Rect(10, 10, -10, -10).intersects(Rect(5, 5, 1, 1))


def test_rect_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains(Vec2(0, 0))
    assert not r.contains(Vec2(10, 5))
    assert not r.contains(Vec2(5, 10))


def test_map_bounds_match_map_width():
    assert MAP_BOUNDS.contains(Vec2(0, 0))
    assert not MAP_BOUNDS.contains(Vec2(MAP_WIDTH, 0))
    assert MAP_BOUNDS.width == MAP_WIDTH
    assert MAP_BOUNDS.height < MAP_HEIGHT


def test_point_in_square():
    assert point_in_polygon(Vec2(5, 5), SQUARE)
    assert not point_in_polygon(Vec2(15, 5), SQUARE)
    assert not point_in_polygon(Vec2(5, -1), SQUARE)


def test_point_in_triangle():
    triangle = [Vec2(0, 0), Vec2(20, 0), Vec2(0, 20)]
    assert point_in_polygon(Vec2(2, 2), triangle)
    assert not point_in_polygon(Vec2(15, 15), triangle)


def test_point_in_empty_polygon_is_false():
    assert not point_in_polygon(Vec2(0, 0), [])


def test_is_blocked_checks_every_polygon():
    far = [Vec2(100, 100), Vec2(110, 100), Vec2(110, 110), Vec2(100, 110)]
    assert is_blocked(Vec2(105, 105), [SQUARE, far])
    assert not is_blocked(Vec2(50, 50), [SQUARE, far])
    assert not is_blocked(Vec2(5, 5), [])


def test_polygon_bounds():
    assert polygon_bounds(SQUARE) == Rect(0, 0, 10, 10)
    bounds = polygon_bounds([Vec2(3, 7), Vec2(-2, 1), Vec2(4, -5)])
    assert (bounds.left, bounds.top, bounds.right, bounds.bottom) == (-2, -5, 4, 7)


def test_polygon_bounds_of_empty_polygon_raises():
    with pytest.raises(ValueError):
        polygon_bounds([])