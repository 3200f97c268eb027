import pytest

from ethrl.maths.matrix import Matrix2x2, Matrix3x3
from ethrl.maths.vector2 import Vector2
from ethrl.maths.vector3 import Vector3


def test_identity_constants():
    assert Matrix2x2.identity() == Matrix2x2(Vector2(1, 0), Vector2(0, 1))
    assert Matrix3x3.identity() == Matrix3x3(Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))


def test_default_is_zero():
    assert Matrix3x3() == Matrix3x3.zero()
    assert Matrix2x2() == Matrix2x2.zero()


def test_identity_is_neutral():
    v = Vector2(3.0, -2.0)
    m = Matrix3x3.create_rotation(0.7) * Matrix3x3.create_scale(Vector2(2.0, 5.0))
    assert Matrix3x3.identity() * v == v
    assert Matrix3x3.identity() * m == m
    assert m * Matrix3x3.identity() == m
    assert Matrix2x2.identity() * v == v


def test_zero_annihilates():
    m = Matrix3x3.create_translation(Vector2(4.0, 1.0))
    assert Matrix3x3.zero() * m == Matrix3x3.zero()
    assert Matrix2x2.zero() * Matrix2x2.create_rotation(1.0) == Matrix2x2.zero()


def test_rotation_inverse():
    product3 = Matrix3x3.create_rotation(0.9) * Matrix3x3.create_rotation(-0.9)
    values3 = [x for row in product3 for x in row]
    assert values3 == pytest.approx([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0], abs=1e-9)

    product2 = Matrix2x2.create_rotation(0.9) * Matrix2x2.create_rotation(-0.9)
    values2 = [x for row in product2 for x in row]
    assert values2 == pytest.approx([1.0, 0.0, 0.0, 1.0], abs=1e-9)


def test_rotation_preserves_length():
    v = Vector2(3.0, -8.0)
    assert (Matrix2x2.create_rotation(2.1) * v).length() == pytest.approx(v.length())
    assert (Matrix3x3.create_rotation(2.1) * v).length() == pytest.approx(v.length())


def test_scale():
    s = Vector2(2.0, 3.0)
    assert Matrix3x3.create_scale(s) * Vector2.ONE == s
    assert Matrix2x2.create_scale(s) * Vector2.ONE == s
    assert Matrix3x3.create_scale(4.0) * Vector2.ONE == Vector2.ONE * 4.0
    assert Matrix3x3.create_scale(s).get_scale() == s


def test_translation():
    t = Vector2(12.5, -7.0)
    m = Matrix3x3.create_translation(t)
    assert m * Vector2.ZERO == t
    assert m.get_translation() == t
    assert m * Vector2.ONE == t + Vector2.ONE


def test_decompose_trs():
    t, angle, s = Vector2(10.0, 20.0), 0.5, Vector2(2.0, 3.0)
    m = Matrix3x3.create_translation(t) * Matrix3x3.create_rotation(angle) * Matrix3x3.create_scale(s)
    assert m.get_translation() == t
    assert m.get_rotation() == pytest.approx(angle)
    assert m.get_scale().x == pytest.approx(s.x)


def test_row_index_errors():
    with pytest.raises(IndexError):
        Matrix3x3.identity()[3]
    with pytest.raises(IndexError):
        Matrix2x2.identity()[2]