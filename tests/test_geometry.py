import math

import pytest

from quadkit.geometry import Rect, Vec2


def test_add_then_sub_round_trips():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 7.0)
    assert (a + b) - b == a


def test_mul_and_div_are_inverse():
    v = Vec2(3.0, -6.0)
    assert (v * 4.0) / 4.0 == v
    assert 2.0 * v == v * 2.0


def test_neg_sums_to_zero():
    v = Vec2(2.5, -1.25)
    assert v + (-v) == Vec2(0.0, 0.0)


def test_length_of_axis_vector():
    assert Vec2(0.0, 7.0).length() == 7.0
    assert Vec2(-3.0, 0.0).length() == 3.0


def test_normalize_gives_unit_length_same_direction():
    v = Vec2(3.0, 4.0)
    n = v.normalize()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.x * v.y, n.y * v.x)
    assert n.x > 0 and n.y > 0


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_iteration_unpacks():
    x, y = Vec2(1.0, 2.0)
    assert (x, y) == (1.0, 2.0)


def test_overlaps_is_symmetric_and_inclusive():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    touching = Rect(10.0, 0.0, 5.0, 5.0)
    apart = Rect(10.5, 0.0, 5.0, 5.0)
    assert a.overlaps(touching) and touching.overlaps(a)
    assert not a.overlaps(apart)
    assert not apart.overlaps(a)


def test_contains_edges():
    r = Rect(0.0, 0.0, 10.0, 10.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert r.contains(Vec2(9.5, 9.5))
    assert not r.contains(Vec2(10.0, 5.0))
    assert not r.contains(Vec2(5.0, 10.0))
    assert not r.contains(Vec2(-0.1, 5.0))