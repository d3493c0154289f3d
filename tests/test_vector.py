"""
Unit tests for the vector primitives.
"""
import math

import pytest

from geokernel.model.vector import Vector2, Vector3, as_components


class TestVector2:
    """Arithmetic, tolerance equality and rotation of 2D vectors."""

    def test_arithmetic(self):
        a = Vector2(1, 2)
        b = Vector2(3, -1)
        assert a + b == Vector2(4, 1)
        assert a - b == Vector2(-2, 3)
        assert a * 2 == Vector2(2, 4)
        assert 2 * a == Vector2(2, 4)
        assert a * b == Vector2(3, -2)
        assert a / 2 == Vector2(0.5, 1)
        assert -a == Vector2(-1, -2)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Vector2(1, 1) / 0.0

    def test_equality_uses_tolerance(self):
        assert Vector2(1, 1) == Vector2(1 + 1e-11, 1 - 1e-11)
        assert Vector2(1, 1) != Vector2(1 + 1e-9, 1)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Vector2(1, 2))

    def test_canonical_text(self):
        assert str(Vector2(1, -2.5)) == "Vector2(1.000000, -2.500000)"

    def test_length_dot_cross(self):
        v = Vector2(3, 4)
        assert v.length() == pytest.approx(5.0)
        assert v.dot(Vector2(1, 0)) == pytest.approx(3.0)
        assert Vector2(1, 0).cross(Vector2(0, 1)) == pytest.approx(1.0)

    def test_normalize(self):
        assert Vector2(3, 4).normalized() == Vector2(0.6, 0.8)
        assert Vector2(0, 0).normalized() == Vector2(0, 0)

    def test_normalize_in_place_returns_self(self):
        v = Vector2(0, 5)
        assert v.normalize() is v
        assert v == Vector2(0, 1)

    def test_rotation(self):
        assert Vector2(1, 0).rotated(math.pi / 2) == Vector2(0, 1)
        assert Vector2(1, 0).degree_rotated(180) == Vector2(-1, 0)
        assert Vector2(2, 1).rotate_around(math.pi, Vector2(1, 1)) == Vector2(0, 1)

    def test_angles(self):
        assert Vector2(0, 1).angle() == pytest.approx(math.pi / 2)
        assert Vector2(-1, 0).degree_angle() == pytest.approx(180.0)
        assert Vector2.create_from_angle(90, 2) == Vector2(0, 2)

    def test_clone_is_independent(self):
        v = Vector2(1, 2)
        copy = v.clone()
        copy.x = 10
        assert v.x == 1

    def test_to_array(self):
        assert Vector2(1, 2).to_array().tolist() == [1.0, 2.0]


class TestVector3:
    """3D vector operations."""

    def test_cross(self):
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)

    def test_axis_angle_rotation(self):
        v = Vector3(1, 0, 0).rotate(Vector3(0, 0, 1), math.pi / 2)
        assert v == Vector3(0, 1, 0)
        assert Vector3(0, 1, 0).rotated(Vector3(1, 0, 0), math.pi / 2) == Vector3(0, 0, 1)

    def test_rotation_around_zero_axis_is_noop(self):
        assert Vector3(1, 2, 3).rotate(Vector3(0, 0, 0), 1.0) == Vector3(1, 2, 3)

    def test_canonical_text(self):
        assert str(Vector3(1, 2, 3)) == "Vector3(1.000000, 2.000000, 3.000000)"

    def test_equality_uses_tolerance(self):
        assert Vector3(1, 2, 3) == Vector3(1, 2, 3 + 1e-12)
        assert Vector3(1, 2, 3) != Vector3(1, 2, 3.001)


class TestAsComponents:
    def test_scalar_expands(self):
        assert as_components(2) == (2.0, 2.0)

    def test_vector_passes_through(self):
        assert as_components(Vector2(2, 3)) == (2.0, 3.0)
