import math

import pytest

from mobagen.vector2 import Vector2


def test_named_directions():
    assert Vector2.up() == Vector2(0, -1)
    assert Vector2.down() == -Vector2.up()
    assert Vector2.left() == -Vector2.right()
    assert Vector2.zero() == Vector2(0, 0)
    assert Vector2.identity() == Vector2(1, 1)


def test_arithmetic():
    a = Vector2(3.0, -2.0)
    b = Vector2(0.5, 4.0)
    assert a + b == Vector2(3.5, 2.0)
    assert (a + b) - b == a
    assert a * 2 == 2 * a
    assert a * 2 == a + a
    assert (a * 3) / 3 == a
    assert +a == a
    assert -(-a) == a
    assert a * b == Vector2(3.0 * 0.5, -2.0 * 4.0)
    assert (a * b) / b == a


def test_equality_is_approximate():
    assert Vector2(1.0, 1.0) == Vector2(1.0 + 1e-4, 1.0)
    assert not Vector2(1.0, 1.0) == Vector2(1.1, 1.0)
    assert Vector2(1.0, 1.0) != Vector2(1.1, 1.0)


def test_indexing_and_unpacking():
    v = Vector2(5.0, 6.0)
    assert v[0] == 5.0
    assert v[1] == 6.0
    x, y = v
    assert (x, y) == (5.0, 6.0)


@pytest.mark.parametrize("index", [-1, 2, 4])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vector2(1.0, 2.0)[index]


def test_rotate_full_turn_is_identity():
    v = Vector2(2.0, -3.0)
    assert v.rotate(360) == v
    assert v.rotate(90).rotate(-90) == v


def test_rotate_quarter_turns_follow_directions():
    assert Vector2.up().rotate(90) == Vector2.right()
    assert Vector2.right().rotate(90) == Vector2.down()
    assert Vector2.up().rotate(180) == Vector2.down()


def test_rotation_preserves_magnitude():
    v = Vector2(3.0, 4.0)
    for degrees in (17, 45, 200, -33):
        assert math.isclose(v.rotate(degrees).magnitude(), v.magnitude())


def test_angle_of_up_is_zero_and_roundtrips_rotation():
    assert math.isclose(Vector2.up().angle_degree(), 0.0, abs_tol=1e-9)
    rotated = Vector2.up().rotate(30)
    assert math.isclose(rotated.angle_degree(), 30.0)
    assert math.isclose(rotated.angle_radian(), math.radians(30.0))


def test_rotate_towards_uses_angle_of_up_vector():
    v = Vector2(1.0, 2.0)
    up = Vector2.up().rotate(50)
    assert v.rotate_towards(up) == v.rotate(up.angle_degree())
    assert v.rotate_towards(Vector2.up()) == v


def test_from_radian_and_degree():
    assert Vector2.from_radian(0.0) == Vector2.right()
    assert Vector2.from_degree(120) == Vector2.from_radian(math.radians(120))
    assert math.isclose(Vector2.from_degree(77).magnitude(), 1.0)


def test_magnitude_and_distances():
    a = Vector2(1.0, 1.0)
    b = Vector2(4.0, 5.0)
    assert a.distance(b) == b.distance(a)
    assert math.isclose(a.distance(b) ** 2, a.distance_squared(b))
    assert math.isclose((b - a).magnitude(), a.distance(b))
    assert math.isclose(b.sqr_magnitude(), b.magnitude() ** 2)


def test_normalized():
    v = Vector2(3.0, -7.0)
    n = v.normalized()
    assert math.isclose(n.magnitude(), 1.0)
    assert n * v.magnitude() == v
    assert Vector2.zero().normalized() == Vector2.zero()


def test_random_within_range():
    for _ in range(100):
        v = Vector2.random(-2.0, 2.0)
        assert -2.0 <= v.x <= 2.0
        assert -2.0 <= v.y <= 2.0
    assert Vector2.random(1.5, 1.5) == Vector2(1.5, 1.5)


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1.0, 2.0))