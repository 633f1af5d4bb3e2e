import math

import pytest

from canvasui.core import vector
from canvasui.core.vector import Vector, DivisionByZero


def test_magnitude_and_normalize_chain():
    v = Vector(3, 4)
    assert v.magnitude == 5.0
    assert v.magnitude_sq == 25.0

    result = v.normalize().mul(10)
    assert result is v
    assert v.x == pytest.approx(6.0)
    assert v.y == pytest.approx(8.0)


def test_normalize_zero_stays_zero():
    v = Vector(0, 0)
    v.normalize()
    assert v == Vector(0, 0)

    # Pure twin also returns zero instead of raising
    assert vector.normalize(Vector(0, 0)) == Vector(0, 0)


def test_in_place_ops_broadcast_scalars():
    v = Vector(1, 2)
    v.add(1).sub(Vector(0, 1)).mul(2)
    assert v.to_tuple() == (4.0, 4.0)

    v.div(Vector(2, 4))
    assert v.to_tuple() == (2.0, 1.0)


def test_pure_functions_do_not_touch_arguments():
    a = Vector(1, 2)
    b = Vector(3, 4)

    c = vector.add(a, b)
    assert c == Vector(4, 6)
    assert a == Vector(1, 2)
    assert b == Vector(3, 4)

    assert vector.sub(b, a) == Vector(2, 2)
    assert vector.mul(a, 3) == Vector(3, 6)
    assert vector.div(b, 2) == Vector(1.5, 2)


def test_difference_with_itself_is_zero():
    v = Vector(3.5, -7)
    assert vector.sub(v, v).magnitude == 0
    assert v.distance(v) == 0


def test_operators_pure_vs_augmented():
    a = Vector(1, 1)
    b = a + Vector(1, 2)
    assert a == Vector(1, 1)
    assert b == Vector(2, 3)
    assert 2 * a == Vector(2, 2)
    assert -a == Vector(-1, -1)

    same = a
    a += Vector(1, 0)
    assert a is same
    assert same == Vector(2, 1)

    a *= 2
    assert same == Vector(4, 2)


def test_division_by_zero_raises():
    with pytest.raises(DivisionByZero) as exc:
        Vector(1, 1).div(0)
    assert str(exc.value) == "Cannot divide by zero."

    # Either axis is enough
    with pytest.raises(DivisionByZero):
        Vector(1, 1).div(Vector(2, 0))

    with pytest.raises(DivisionByZero):
        vector.div(Vector(1, 1), Vector(0, 5))

    with pytest.raises(ZeroDivisionError):
        Vector(1, 1) / 0


def test_failed_division_leaves_vector_unchanged():
    v = Vector(3, 4)
    with pytest.raises(DivisionByZero):
        v.div(Vector(1, 0))
    assert v == Vector(3, 4)


def test_rotate_and_angle():
    v = Vector(1, 0)
    v.rotate(math.pi / 2)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)
    assert v.angle == pytest.approx(math.pi / 2)

    r = vector.rotate(Vector(2, 0), math.pi)
    assert r.x == pytest.approx(-2.0)
    assert r.y == pytest.approx(0.0, abs=1e-12)


def test_angle_setter_keeps_magnitude():
    v = Vector(0, 5)
    v.angle = 0
    assert v.x == pytest.approx(5.0)
    assert v.y == pytest.approx(0.0)


def test_magnitude_setter():
    v = Vector(3, 4)
    v.magnitude = 10
    assert v.x == pytest.approx(6.0)
    assert v.y == pytest.approx(8.0)


def test_angle_between():
    assert Vector(1, 0).angle_between(Vector(0, 1)) == pytest.approx(math.pi / 2)
    assert Vector(1, 0).angle_between(Vector(-3, 0)) == pytest.approx(math.pi)
    assert Vector(2, 2).angle_between(Vector(1, 1)) == pytest.approx(0.0, abs=1e-7)


def test_angle_between_zero_vector_is_nan():
    assert math.isnan(Vector(0, 0).angle_between(Vector(1, 0)))
    assert math.isnan(Vector(1, 0).angle_between(Vector(0, 0)))


def test_dot_cross_distance():
    a = Vector(1, 2)
    b = Vector(3, 4)
    assert a.dot(b) == 11
    assert a.cross(b) == -2
    assert Vector(0, 0).distance(Vector(3, 4)) == 5.0


def test_lerp():
    a = Vector(0, 0)
    a.lerp(Vector(10, 20), 0.25)
    assert a == Vector(2.5, 5)

    mid = vector.lerp(Vector(0, 0), Vector(10, 10), 0.5)
    assert mid == Vector(5, 5)


def test_string_forms():
    assert str(Vector(1, 0.5)) == "X: 1 Y: 0.5"
    assert repr(Vector(1, 2)) == "Vector(1.0, 2.0)"
    assert list(Vector(1, 2)) == [1.0, 2.0]


def test_from_angle_and_random():
    v = Vector.from_angle(math.pi, 2)
    assert v.x == pytest.approx(-2.0)

    import random
    r = Vector.random(random.Random(7))
    assert r.magnitude == pytest.approx(1.0)


if __name__ == "__main__":
    test_magnitude_and_normalize_chain()
    test_division_by_zero_raises()
    test_angle_between()
