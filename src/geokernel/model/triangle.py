"""Triangle given by three vertices."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.predicates import (
    closest_point_on_edges,
    iter_edges,
    point_on_edges,
    points_aabb,
)
from geokernel.model.segment import Segment
from geokernel.model.shape import ClosedShape
from geokernel.model.vector import Vector2, as_components


def circumcircle(a: Vector2, b: Vector2, c: Vector2) -> Tuple[Optional[Vector2], float]:
    """
    Circumcenter and circumradius of three points.

    Returns:
        (center, radius), or (None, inf) when the points are collinear.
    """
    d = 2.0 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) < EPSILON:
        return None, float("inf")
    a_sq = a.length_squared()
    b_sq = b.length_squared()
    c_sq = c.length_squared()
    ux = (a_sq * (b.y - c.y) + b_sq * (c.y - a.y) + c_sq * (a.y - b.y)) / d
    uy = (a_sq * (c.x - b.x) + b_sq * (a.x - c.x) + c_sq * (b.x - a.x)) / d
    center = Vector2(ux, uy)
    return center, (a - center).length()


@dataclass(eq=False)
class Triangle(ClosedShape):
    kind = ShapeKind.TRIANGLE

    point1: Vector2
    point2: Vector2
    point3: Vector2

    def __post_init__(self) -> None:
        self.point1 = self.point1.clone()
        self.point2 = self.point2.clone()
        self.point3 = self.point3.clone()

    @classmethod
    def create(cls, point1: Vector2, point2: Vector2, point3: Vector2) -> Triangle:
        return cls(point1, point2, point3)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.point1 == other.point1 and self.point2 == other.point2 and self.point3 == other.point3

    def __repr__(self) -> str:
        return f"Triangle({self.point1}, {self.point2}, {self.point3})"

    @property
    def points(self) -> List[Vector2]:
        """Borrowed view of the vertices."""
        return [self.point1, self.point2, self.point3]

    def get_vertices(self) -> List[Vector2]:
        return [point.clone() for point in self.points]

    def get_edges(self) -> List[Segment]:
        return [Segment(a, b) for a, b in iter_edges(self.points)]

    def get_defining_points(self) -> List[Vector2]:
        return self.points

    def signed_area(self) -> float:
        return 0.5 * (self.point2 - self.point1).cross(self.point3 - self.point1)

    def get_area(self) -> float:
        return abs(self.signed_area())

    def get_perimeter(self) -> float:
        return sum((b - a).length() for a, b in iter_edges(self.points))

    def centroid(self) -> Vector2:
        return (self.point1 + self.point2 + self.point3) / 3.0

    def get_center(self) -> Vector2:
        return self.centroid()

    def incenter(self) -> Vector2:
        a = (self.point2 - self.point3).length()
        b = (self.point3 - self.point1).length()
        c = (self.point1 - self.point2).length()
        total = a + b + c
        if total <= EPSILON:
            return self.point1.clone()
        return (self.point1 * a + self.point2 * b + self.point3 * c) / total

    def inradius(self) -> float:
        perimeter = self.get_perimeter()
        if perimeter <= EPSILON:
            return 0.0
        return 2.0 * self.get_area() / perimeter

    def circumcenter(self) -> Optional[Vector2]:
        return circumcircle(self.point1, self.point2, self.point3)[0]

    def circumradius(self) -> float:
        return circumcircle(self.point1, self.point2, self.point3)[1]

    def aabb(self) -> Tuple[float, float, float, float]:
        return points_aabb(self.points)

    def move(self, offset: Union[float, Vector2]) -> Triangle:
        dx, dy = as_components(offset)
        for point in self.points:
            point.x += dx
            point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Triangle:
        pivot = self.centroid() if center is None else center
        for point in self.points:
            point.rotate_around(rad, pivot)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Triangle:
        sx, sy = as_components(factor)
        pivot = self.centroid() if center is None else center
        for point in self.points:
            point.scale_around(sx, sy, pivot)
        return self

    def contains(self, point: Vector2) -> bool:
        if self.get_area() <= EPSILON * EPSILON:
            return point_on_edges(point, self.points)
        d1 = (self.point2 - self.point1).cross(point - self.point1)
        d2 = (self.point3 - self.point2).cross(point - self.point2)
        d3 = (self.point1 - self.point3).cross(point - self.point3)
        has_negative = d1 < 0 or d2 < 0 or d3 < 0
        has_positive = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_negative and has_positive) or point_on_edges(point, self.points)

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        return closest_point_on_edges(point, self.points)

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return point_on_edges(point, self.points, tolerance)

    def clone(self) -> Triangle:
        return Triangle(self.point1, self.point2, self.point3)
