"""
Bowyer-Watson triangulation of polygons.
"""
import math

import pytest

from geokernel import Polygon, Vector2
from geokernel.model.triangle import circumcircle
from geokernel.triangulation import (
    create_super_triangle,
    delaunay_triangulation,
    point_in_circumcircle,
    triangulate_polygon,
)


def total_area(triangles):
    return sum(triangle.get_area() for triangle in triangles)


class TestCircumcircle:
    def test_right_triangle(self):
        center, radius = circumcircle(Vector2(0, 0), Vector2(4, 0), Vector2(0, 4))
        assert center == Vector2(2, 2)
        assert radius == pytest.approx(math.sqrt(8))

    def test_collinear_points(self):
        center, radius = circumcircle(Vector2(0, 0), Vector2(1, 1), Vector2(2, 2))
        assert center is None
        assert math.isinf(radius)

    def test_cocircular_point_is_not_inside(self):
        center, radius = circumcircle(Vector2(0, 0), Vector2(4, 0), Vector2(0, 4))
        assert not point_in_circumcircle(Vector2(4, 4), center, radius)
        assert point_in_circumcircle(Vector2(2, 2), center, radius)

    def test_degenerate_circle_contains_nothing(self):
        assert not point_in_circumcircle(Vector2(0, 0), None, float("inf"))


class TestSuperTriangle:
    def test_square_bounds(self):
        points = [Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4)]
        assert create_super_triangle(points) == (Vector2(-78, -2), Vector2(2, 82), Vector2(82, -2))


class TestTriangulation:
    def test_square(self):
        square = Polygon.create([Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4)])
        triangles = triangulate_polygon(square)
        assert len(triangles) == 2
        assert total_area(triangles) == pytest.approx(16.0)

    def test_convex_pentagon(self):
        pentagon = Polygon.create([
            Vector2(0, 0), Vector2(5, 0), Vector2(6, 3), Vector2(3, 6), Vector2(-1, 3),
        ])
        triangles = pentagon.triangulate()
        assert len(triangles) == 3
        assert total_area(triangles) == pytest.approx(28.5)

    def test_empty_circumcircles(self):
        points = [Vector2(0, 0), Vector2(5, 0), Vector2(6, 3), Vector2(3, 6), Vector2(-1, 3)]
        triangles = delaunay_triangulation(points, Polygon.create(points))
        for triangle in triangles:
            center, radius = circumcircle(triangle.point1, triangle.point2, triangle.point3)
            for point in points:
                assert not point_in_circumcircle(point, center, radius)

    def test_concave_polygon_stays_inside(self):
        l_shape = Polygon.create([
            Vector2(0, 0), Vector2(2, 0), Vector2(2, 1),
            Vector2(1, 1), Vector2(1, 2), Vector2(0, 2),
        ])
        triangles = l_shape.triangulate()
        assert triangles
        assert total_area(triangles) <= 3.0 + 1e-9
        for triangle in triangles:
            assert l_shape.contains(triangle.centroid())

    def test_notched_polygon_is_fully_covered(self):
        """The triangle beside the notch survives even though the notch is clipped."""
        notched = Polygon.create([
            Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(2, 1), Vector2(0, 4),
        ])
        triangles = notched.triangulate()
        assert len(triangles) == 3
        assert total_area(triangles) == pytest.approx(notched.get_area())
        assert total_area(triangles) == pytest.approx(10.0)
        for triangle in triangles:
            assert notched.contains(triangle.centroid())

    def test_triangles_use_polygon_vertices(self):
        square = Polygon.create([Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4)])
        for triangle in square.triangulate():
            for vertex in triangle.get_vertices():
                assert any(vertex == corner for corner in square.points)

    def test_too_few_points(self):
        square = Polygon.create([Vector2(0, 0), Vector2(4, 0), Vector2(4, 4), Vector2(0, 4)])
        assert delaunay_triangulation([Vector2(0, 0), Vector2(1, 0)], square) == []
        assert delaunay_triangulation([], square) == []
