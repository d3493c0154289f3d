"""
Simple polygon with cyclic edges.

The vertex list is owned by the polygon. ``points`` hands out the internal
list itself (mutating its vectors mutates the polygon) while ``get_vertices``
returns independent copies. Assigning ``points`` rebuilds the storage from
copies of the given vectors; ``size`` is derived and cannot be written.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, Union
import math

import numpy as np

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.predicates import (
    closest_point_on_edges,
    iter_edges,
    point_on_edges,
    points_aabb,
    points_to_array,
    polygon_contains,
    polygon_signed_area,
)
from geokernel.model.segment import Segment
from geokernel.model.shape import ClosedShape, ImmutableFieldError, ShapeConstructionError
from geokernel.model.triangle import Triangle
from geokernel.model.vector import Vector2, as_components


class Polygon(ClosedShape):
    kind = ShapeKind.POLYGON

    def __init__(self, points: Sequence[Vector2]) -> None:
        self._points = self._copy_points(points)

    @staticmethod
    def _copy_points(points: Sequence[Vector2]) -> List[Vector2]:
        if len(points) < 3:
            raise ShapeConstructionError(f"Polygon needs at least 3 points, got {len(points)}")
        return [point.clone() for point in points]

    @classmethod
    def create(cls, points: Sequence[Vector2]) -> Polygon:
        return cls(points)

    @classmethod
    def create_regular_rad(cls, center: Vector2, radius: float, num_sides: int, start_rad: float = 0.0) -> Polygon:
        """Regular polygon inscribed in a circle, first vertex at ``start_rad``."""
        if num_sides < 3:
            raise ShapeConstructionError(f"Regular polygon needs at least 3 sides, got {num_sides}")
        angles = start_rad + np.arange(num_sides) * (2 * np.pi / num_sides)
        return cls([center + Vector2.create_from_rad(float(angle), radius) for angle in angles])

    @classmethod
    def create_regular_degree(cls, center: Vector2, radius: float, num_sides: int, start_degree: float = 0.0) -> Polygon:
        return cls.create_regular_rad(center, radius, num_sides, math.radians(start_degree))

    # --------------------------------------------------------------------------
    # Storage
    # --------------------------------------------------------------------------
    @property
    def points(self) -> List[Vector2]:
        return self._points

    @points.setter
    def points(self, value: Sequence[Vector2]) -> None:
        self._points = self._copy_points(value)

    @property
    def size(self) -> int:
        return len(self._points)

    @size.setter
    def size(self, value: int) -> None:
        raise ImmutableFieldError("cannot modify size directly; assign points instead")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(a == b for a, b in zip(self._points, other._points))

    def __repr__(self) -> str:
        return f"Polygon({', '.join(str(point) for point in self._points)})"

    def get_edge_count(self) -> int:
        return self.size

    def get_edges(self) -> List[Segment]:
        return [Segment(a, b) for a, b in iter_edges(self._points)]

    def get_vertices(self) -> List[Vector2]:
        return [point.clone() for point in self._points]

    def get_defining_points(self) -> List[Vector2]:
        return self._points

    # --------------------------------------------------------------------------
    # Measures
    # --------------------------------------------------------------------------
    def aabb(self) -> Tuple[float, float, float, float]:
        return points_aabb(self._points)

    def get_center(self) -> Vector2:
        """Center of the bounding box."""
        min_x, max_x, min_y, max_y = self.aabb()
        return Vector2((min_x + max_x) / 2, (min_y + max_y) / 2)

    def centroid(self) -> Vector2:
        """Area centroid; falls back to the vertex mean for degenerate polygons."""
        coords = points_to_array(self._points)
        x = coords[:, 0]
        y = coords[:, 1]
        x_next = np.roll(x, -1)
        y_next = np.roll(y, -1)
        cross = x * y_next - x_next * y
        area = 0.5 * float(np.sum(cross))
        if abs(area) <= EPSILON:
            return Vector2(float(np.mean(x)), float(np.mean(y)))
        cx = float(np.sum((x + x_next) * cross)) / (6.0 * area)
        cy = float(np.sum((y + y_next) * cross)) / (6.0 * area)
        return Vector2(cx, cy)

    def get_area(self) -> float:
        return abs(polygon_signed_area(self._points))

    def get_perimeter(self) -> float:
        return sum((b - a).length() for a, b in iter_edges(self._points))

    def is_convex(self) -> bool:
        """True when all turns have the same sign; an all-collinear polygon is not convex."""
        sign = 0
        count = self.size
        for i in range(count):
            a = self._points[i]
            b = self._points[(i + 1) % count]
            c = self._points[(i + 2) % count]
            cross = (b - a).cross(c - b)
            if abs(cross) > EPSILON:
                current = 1 if cross > 0 else -1
                if sign == 0:
                    sign = current
                elif sign != current:
                    return False
        return sign != 0

    # --------------------------------------------------------------------------
    # Transforms
    # --------------------------------------------------------------------------
    def move(self, offset: Union[float, Vector2]) -> Polygon:
        dx, dy = as_components(offset)
        for point in self._points:
            point.x += dx
            point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Polygon:
        pivot = self.centroid() if center is None else center
        for point in self._points:
            point.rotate_around(rad, pivot)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Polygon:
        sx, sy = as_components(factor)
        pivot = self.centroid() if center is None else center
        for point in self._points:
            point.scale_around(sx, sy, pivot)
        return self

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def contains(self, point: Vector2) -> bool:
        return polygon_contains(point, self._points)

    def contains_polygon(self, other: Polygon) -> bool:
        return all(self.contains(point) for point in other.points)

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        return closest_point_on_edges(point, self._points)

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return point_on_edges(point, self._points, tolerance)

    def triangulate(self) -> List[Triangle]:
        """Delaunay triangulation of the polygon's vertices, clipped to the polygon."""
        from geokernel.triangulation.delaunay import triangulate_polygon
        return triangulate_polygon(self)

    def clone(self) -> Polygon:
        return Polygon(self._points)
