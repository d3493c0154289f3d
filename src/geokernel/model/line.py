"""Infinite line through an anchor point along a unit direction."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.shape import Shape
from geokernel.model.vector import Vector2, as_components

INF = float("inf")


def unit_direction(direction: Vector2) -> Vector2:
    """Normalized copy; a near-zero direction falls back to +x."""
    if direction.length() <= EPSILON:
        return Vector2(1.0, 0.0)
    return direction.normalized()


def scale_direction(direction: Vector2, sx: float, sy: float) -> Vector2:
    """Image of a unit direction under a per-axis scale, renormalized."""
    mapped = Vector2(direction.x * sx, direction.y * sy)
    if mapped.length() <= EPSILON:
        return direction
    return mapped.normalize()


@dataclass(eq=False)
class Line(Shape):
    """
    An infinite line. Two lines are equal when they describe the same set of
    points, regardless of anchor position or direction sign.
    """
    kind = ShapeKind.LINE

    point: Vector2
    direction: Vector2

    def __post_init__(self) -> None:
        self.point = self.point.clone()
        self.direction = unit_direction(self.direction)

    @classmethod
    def create(cls, point: Vector2, direction: Vector2) -> Line:
        return cls(point, direction)

    @classmethod
    def create_from_points(cls, point1: Vector2, point2: Vector2) -> Line:
        return cls(point1, point2 - point1)

    @classmethod
    def create_from_point_and_rad(cls, point: Vector2, rad: float) -> Line:
        return cls(point, Vector2.create_from_rad(rad))

    @classmethod
    def create_from_point_and_angle(cls, point: Vector2, degrees: float) -> Line:
        return cls(point, Vector2.create_from_angle(degrees))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        if abs(self.direction.cross(other.direction)) > EPSILON:
            return False
        return abs((other.point - self.point).cross(self.direction)) <= EPSILON

    def __repr__(self) -> str:
        return f"Line({self.point}, {self.direction})"

    def get_center(self) -> Vector2:
        return self.point.clone()

    def get_point(self, length: float) -> Vector2:
        return self.point + self.direction * length

    def angle(self) -> float:
        return self.direction.angle()

    def degree_angle(self) -> float:
        return self.direction.degree_angle()

    def aabb(self) -> Tuple[float, float, float, float]:
        if abs(self.direction.x) <= EPSILON:
            return self.point.x, self.point.x, -INF, INF
        if abs(self.direction.y) <= EPSILON:
            return -INF, INF, self.point.y, self.point.y
        return -INF, INF, -INF, INF

    def move(self, offset: Union[float, Vector2]) -> Line:
        dx, dy = as_components(offset)
        self.point.x += dx
        self.point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Line:
        pivot = self.point.clone() if center is None else center
        self.point.rotate_around(rad, pivot)
        self.direction.rotate(rad)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Line:
        sx, sy = as_components(factor)
        pivot = self.point.clone() if center is None else center
        self.point.scale_around(sx, sy, pivot)
        self.direction = scale_direction(self.direction, sx, sy)
        return self

    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        t = (point - self.point).dot(self.direction)
        return self.get_point(t)

    def project_point(self, point: Vector2) -> Vector2:
        return self.closest_point(point)

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return abs((point - self.point).cross(self.direction)) <= tolerance

    def clone(self) -> Line:
        return Line(self.point, self.direction)
