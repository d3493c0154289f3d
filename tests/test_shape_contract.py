"""
Properties every shape kind must satisfy.
"""
import dataclasses
import math

import pytest

from geokernel import (
    Circle,
    Ellipse,
    Line,
    Rectangle,
    Sector,
    ShapeConstructionError,
    ShapeKind,
    Triangle,
    Vector2,
)

from conftest import build_sample_shapes

SHAPE_IDS = [shape.kind.value for shape in build_sample_shapes()]


@pytest.fixture(params=range(len(SHAPE_IDS)), ids=SHAPE_IDS)
def shape(request):
    return build_sample_shapes()[request.param]


class TestShapeContract:
    """Transform and query invariants shared by all kinds."""

    def test_every_kind_is_covered(self, sample_shapes):
        assert {shape.kind for shape in sample_shapes} == set(ShapeKind)

    def test_clone_is_equal_and_independent(self, shape):
        copy = shape.clone()
        assert copy == shape
        copy.move(Vector2(5, 5))
        assert copy != shape

    def test_move_round_trip(self, shape):
        original = shape.clone()
        shape.move(Vector2(3.7, -1.2)).move(Vector2(-3.7, 1.2))
        assert shape == original

    def test_moved_does_not_alias(self, shape):
        original = shape.clone()
        moved = shape.moved(2)
        assert shape == original
        assert moved is not shape

    def test_full_rotation_is_identity(self, shape):
        assert shape.rotated(2 * math.pi) == shape
        assert shape.rotated(2 * math.pi, Vector2(10, -3)) == shape
        assert shape.degree_rotated(360) == shape

    def test_unit_scale_is_identity(self, shape):
        assert shape.scaled(1) == shape
        assert shape.scaled(Vector2(1, 1), Vector2(4, 4)) == shape

    def test_mutating_transforms_return_self(self, shape):
        assert shape.move(0) is shape
        assert shape.rotate(0) is shape
        assert shape.scale(1) is shape

    def test_defining_points_lie_on_shape(self, shape):
        for point in shape.get_defining_points():
            assert shape.contains_point(point)

    def test_closest_point_lies_on_shape(self, shape):
        query = Vector2(7, -6)
        closest = shape.closest_point(query)
        assert shape.contains_point(closest, tolerance=1e-8)
        assert shape.distance_to_point(query) == pytest.approx((query - closest).length())

    def test_project_point_lies_on_shape(self, shape):
        assert shape.contains_point(shape.project_point(Vector2(0.1, 0.2)), tolerance=1e-8)

    def test_bounding_box_is_consistent(self, shape):
        min_x, max_x, min_y, max_y = shape.aabb()
        width, height = shape.get_bounding_box_size()
        assert min_x <= max_x and min_y <= max_y
        assert width == max_x - min_x
        assert height == max_y - min_y

    def test_canonical_text_names_the_kind(self, shape):
        assert repr(shape).startswith(type(shape).__name__ + "(")


class TestValueShapeFields:
    """Fixed-field shapes are dataclasses whose constructor copies and validates."""

    def test_keyword_construction(self):
        ellipse = Ellipse(center=Vector2(1, 2), rx=3, ry=1)
        assert [field.name for field in dataclasses.fields(ellipse)] == ["center", "rx", "ry", "direction"]
        assert ellipse.direction == Vector2(1, 0)
        assert isinstance(ellipse.rx, float)

    def test_inputs_are_copied(self):
        center = Vector2(0, 0)
        corner = Vector2(4, 0)
        circle = Circle(center, 1)
        triangle = Triangle(center, corner, Vector2(0, 3))
        center.x = 10
        corner.y = 10
        assert circle.center == Vector2(0, 0)
        assert triangle.point1 == Vector2(0, 0)
        assert triangle.point2 == Vector2(4, 0)

    def test_direction_is_normalized(self):
        assert Line(Vector2(0, 0), Vector2(0, 5)).direction == Vector2(0, 1)
        assert Rectangle(Vector2(0, 0), 2, 1, Vector2(3, 4)).direction == Vector2(0.6, 0.8)

    def test_range_is_clamped(self):
        assert Sector(Vector2(0, 0), 1, range=3.0).range == 1.0
        assert Sector(Vector2(0, 0), 1, range=-2.0).range == -1.0

    @pytest.mark.parametrize("factory", [
        lambda: Circle(Vector2(0, 0), -1),
        lambda: Ellipse(Vector2(0, 0), 0, 1),
        lambda: Rectangle(Vector2(0, 0), -2, 1),
        lambda: Sector(Vector2(0, 0), -0.5),
    ])
    def test_invalid_fields_rejected(self, factory):
        with pytest.raises(ShapeConstructionError):
            factory()
