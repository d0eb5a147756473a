import math

import pytest

from mage.vectors import Vector2f, Vector2i, Vector3f, Vector3i


def test_vector2f_add_sub_round_trip():
    a = Vector2f(1.5, -2.0)
    b = Vector2f(0.25, 4.0)
    assert (a + b) - b == a


def test_vector2f_scalar_and_componentwise_mul():
    a = Vector2f(1.5, -2.0)
    assert a * 2 == a + a
    assert a * Vector2f(1, 1) == a


def test_vector2f_length_matches_dot():
    v = Vector2f(3.0, 4.0)
    assert math.isclose(v.length() ** 2, v.dot(v))


def test_vector2f_normalised_has_unit_length():
    v = Vector2f(-7.0, 2.5)
    assert math.isclose(v.normalised().length(), 1.0)


def test_vector2f_normalise_in_place_matches_normalised():
    v = Vector2f(2.0, 9.0)
    expected = v.normalised()
    v.normalise_in_place()
    assert v == expected


def test_vector2f_zero_normalise_raises():
    with pytest.raises(ValueError):
        Vector2f().normalised()


def test_vector2f_perpendicular_angle():
    assert math.isclose(Vector2f(1, 0).angle_between(Vector2f(0, 5)), 90.0)


def test_vector2f_copy_is_independent():
    v = Vector2f(1, 2)
    c = v.copy()
    c.x = 10
    assert v.x == 1
    assert c != v


def test_vector2i_normalised_truncates():
    assert Vector2i(3, 4).normalised() == Vector2i(0, 0)
    assert Vector2i(0, -6).normalised() == Vector2i(0, -1)


def test_vector2i_normalise_in_place_keeps_ints():
    v = Vector2i(8, 0)
    v.normalise_in_place()
    assert v == Vector2i(1, 0)
    assert isinstance(v.x, int)


def test_vector2i_arithmetic():
    a = Vector2i(2, -3)
    assert a * 3 == a + a + a
    assert a * Vector2i(1, 1) == a


def test_vector2i_length_matches_dot():
    v = Vector2i(5, 12)
    assert math.isclose(v.length() ** 2, v.dot(v))


def test_vector2i_rejects_float_scalar():
    with pytest.raises(TypeError):
        Vector2i(1, 1) * 1.5


def test_vector3f_cross_is_orthogonal_and_anticommutative():
    a = Vector3f(1.0, 2.0, 3.0)
    b = Vector3f(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)
    assert b.cross(a) == c * -1


def test_vector3f_reflect_flips_along_normal():
    v = Vector3f(0.0, -2.0, 0.0)
    assert v.reflect(Vector3f(0, 1, 0)) == v * -1


def test_vector3f_reflect_twice_returns_original():
    v = Vector3f(1.0, -3.0, 2.0)
    n = Vector3f(1.0, 1.0, 0.0).normalised()
    back = v.reflect(n).reflect(n)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)
    assert back.z == pytest.approx(v.z)


def test_vector3f_componentwise_mul_uses_y_for_z():
    v = Vector3f(1.0, 2.0, 3.0)
    assert v * Vector3f(1.0, 1.0, 0.0) == v


def test_vector3f_division_inverts_scaling():
    v = Vector3f(1.0, -2.0, 0.5)
    assert (v * 4) / 4 == v


def test_vector3f_iadd_mutates_in_place():
    v = Vector3f(1, 2, 3)
    ref = v
    v += Vector3f(1, 1, 1)
    assert ref is v
    assert ref == Vector3f(1, 2, 3) + Vector3f(1, 1, 1)


def test_vector3f_imul_mutates_in_place():
    v = Vector3f(1, 2, 3)
    ref = v
    v *= 2
    assert ref is v
    assert ref == Vector3f(1, 2, 3) * 2


def test_vector3f_strict_comparisons():
    big = Vector3f(2, 2, 2)
    small = Vector3f(1, 1, 1)
    mixed = Vector3f(3, 0, 3)
    assert big > small
    assert small < big
    assert not (mixed > small)
    assert not (small < mixed)


def test_vector3f_antiparallel_angle():
    v = Vector3f(1, 2, 3)
    assert math.isclose(v.angle_between(v * -1), 180.0)


def test_vector3f_angle_with_zero_raises():
    with pytest.raises(ValueError):
        Vector3f(1, 0, 0).angle_between(Vector3f())


def test_vector3f_unpacks():
    v = Vector3f(4.0, 5.0, 6.0)
    x, y, z = v
    assert (x, y, z) == (v.x, v.y, v.z)


def test_vector3i_cross_orthogonal():
    a = Vector3i(1, 2, 3)
    b = Vector3i(4, -1, 2)
    c = a.cross(b)
    assert c.dot(a) == 0
    assert c.dot(b) == 0


def test_vector3i_normalised_truncates():
    assert Vector3i(0, 0, -9).normalised() == Vector3i(0, 0, -1)
    assert Vector3i(2, 2, 2).normalised() == Vector3i(0, 0, 0)


def test_vector3i_mul_and_copy():
    v = Vector3i(1, 2, 3)
    assert v * 2 == v + v
    assert v * Vector3i(1, 1, 0) == v
    c = v.copy()
    c.z = 0
    assert v.z == 3