"""
Unit tests for the 2D and 3D bezier curves.
"""
import math

import pytest

from geokernel import BezierCurve, BezierCurve3D, ImmutableFieldError, ShapeConstructionError, Vector2, Vector3


def make_arch() -> BezierCurve:
    return BezierCurve.create_quadratic(Vector2(0, 0), Vector2(1, 2), Vector2(2, 0))


class TestBezierCurve:
    def test_requires_two_control_points(self):
        with pytest.raises(ShapeConstructionError):
            BezierCurve.create([Vector2(0, 0)])

    def test_order_and_num_points(self):
        curve = BezierCurve.create_cubic(Vector2(0, 0), Vector2(1, 1), Vector2(2, 1), Vector2(3, 0))
        assert curve.num_points == 4
        assert curve.order == 3

    def test_num_points_is_read_only(self):
        curve = make_arch()
        with pytest.raises(ImmutableFieldError):
            curve.num_points = 5
        with pytest.raises(ImmutableFieldError):
            curve.order = 1

    def test_evaluation(self):
        curve = make_arch()
        assert curve.get_point(0.5) == Vector2(1, 1)
        assert curve.get_point(-1) == Vector2(0, 0)
        assert curve.get_point(2) == Vector2(2, 0)
        assert curve.get_start_point() == Vector2(0, 0)
        assert curve.get_end_point() == Vector2(2, 0)

    def test_derivative(self):
        curve = make_arch()
        assert curve.get_derivative(0) == Vector2(2, 4)
        assert curve.get_derivative(0.5) == Vector2(2, 0)

    def test_discretize(self):
        curve = make_arch()
        points = curve.discretize(4)
        assert len(points) == 5
        assert points[2] == Vector2(1, 1)
        assert len(curve.to_segments(4)) == 4

    def test_length_of_straight_curve(self):
        curve = BezierCurve.create([Vector2(0, 0), Vector2(3, 4)])
        assert curve.length() == pytest.approx(5.0)

    def test_aabb_of_control_points(self):
        curve = make_arch()
        assert curve.aabb() == (0, 2, 0, 2)
        assert curve.get_center() == Vector2(1, 1)

    def test_closest_point(self):
        curve = make_arch()
        assert curve.closest_point(Vector2(1, 5)) == Vector2(1, 1)
        assert curve.closest_point(Vector2(-1, -1)) == Vector2(0, 0)
        assert curve.distance_to_point(Vector2(1, 5)) == pytest.approx(4.0)

    def test_contains_point(self):
        curve = make_arch()
        assert curve.contains_point(curve.get_point(0.3))
        assert not curve.contains_point(Vector2(1, 0))

    def test_control_points_assignment_rebuilds(self):
        curve = make_arch()
        curve.control_points = [Vector2(0, 0), Vector2(1, 1)]
        assert curve.order == 1


class TestBezierCurve3D:
    def make_curve(self) -> BezierCurve3D:
        return BezierCurve3D.create_quadratic(Vector3(0, 0, 0), Vector3(1, 2, 1), Vector3(2, 0, 2))

    def test_aabb_has_six_values(self):
        curve = self.make_curve()
        assert curve.aabb() == (0, 2, 0, 2, 0, 2)
        assert curve.get_bounding_box_size() == (2, 2, 2)
        assert curve.get_center() == Vector3(1, 1, 1)

    def test_evaluation(self):
        curve = self.make_curve()
        assert curve.get_point(0.5) == Vector3(1, 1, 1)
        assert curve.get_point(5) == Vector3(2, 0, 2)

    def test_rotation_around_axis(self):
        curve = BezierCurve3D.create([Vector3(1, 0, 0), Vector3(2, 0, 0)])
        curve.rotate(math.pi / 2, Vector3(0, 0, 1), Vector3(0, 0, 0))
        assert curve.control_points == [Vector3(0, 1, 0), Vector3(0, 2, 0)]

    def test_full_rotation_is_identity(self):
        curve = self.make_curve()
        assert curve.rotated(2 * math.pi, Vector3(1, 1, 0)) == curve

    def test_move_and_scale(self):
        curve = self.make_curve()
        assert curve.moved(1).get_start_point() == Vector3(1, 1, 1)
        assert curve.scaled(2, Vector3(0, 0, 0)).get_end_point() == Vector3(4, 0, 4)

    def test_num_points_is_read_only(self):
        with pytest.raises(ImmutableFieldError):
            self.make_curve().num_points = 2

    def test_closest_point(self):
        curve = BezierCurve3D.create([Vector3(0, 0, 0), Vector3(0, 0, 4)])
        assert curve.closest_point(Vector3(3, 0, 1)) == Vector3(0, 0, 1)
        assert curve.distance_to_point(Vector3(3, 0, 1)) == pytest.approx(3.0)

    def test_requires_two_control_points(self):
        with pytest.raises(ShapeConstructionError):
            BezierCurve3D.create([Vector3(0, 0, 0)])
