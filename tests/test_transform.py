import pytest

from ethrl.maths.mathutils import deg_to_rad
from ethrl.maths.matrix import Matrix2x2, Matrix3x3
from ethrl.maths.vector2 import Vector2
from ethrl.maths.transform import Transform


def test_defaults():
    transform = Transform()
    assert transform.position == Vector2.ZERO
    assert transform.scale == Vector2.ONE
    assert transform.rotation == 0.0
    assert transform.matrix == Matrix3x3.zero()


def test_update_without_parent_decomposes_back():
    transform = Transform(Vector2(3, 4), 30.0, Vector2(2, 5))
    transform.update()
    matrix = transform.matrix
    assert matrix.get_translation() == Vector2(3, 4)
    assert matrix.get_rotation() == pytest.approx(deg_to_rad(30.0))
    scale = matrix.get_scale()
    assert scale.x == pytest.approx(2.0)
    assert scale.y == pytest.approx(5.0)


def test_identity_transform_gives_identity_matrix():
    transform = Transform()
    transform.update()
    assert transform.matrix == Matrix3x3.identity()
    assert transform.to_matrix2() == Matrix2x2.identity()


def test_update_with_parent_composes():
    parent = Transform(Vector2(10, 0), 90.0, Vector2(1, 1))
    parent.update()
    child = Transform(Vector2(1, 2), 15.0, Vector2(3, 3))
    child.update(parent.matrix)
    assert child.matrix == parent.matrix * child.to_matrix3()


def test_to_matrix2_is_scale_then_rotation():
    transform = Transform(Vector2(5, 5), 45.0, Vector2(2, 3))
    expected = Matrix2x2.create_scale(Vector2(2, 3)) * Matrix2x2.create_rotation(deg_to_rad(45.0))
    assert transform.to_matrix2() == expected


def test_read_sets_present_fields_only():
    transform = Transform()
    transform.read({"Position": [100, 200], "Rotation": 45})
    assert transform.position == Vector2(100, 200)
    assert transform.rotation == 45.0
    assert transform.scale == Vector2.ONE
    transform.read({"Scale": [2, 2], "Rotation": "bad"})
    assert transform.scale == Vector2(2, 2)
    assert transform.rotation == 45.0