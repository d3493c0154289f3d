"""Half-line starting at an origin and extending along a unit direction."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.line import INF, scale_direction, unit_direction
from geokernel.model.shape import Shape
from geokernel.model.vector import Vector2, as_components


@dataclass(eq=False)
class Ray(Shape):
    kind = ShapeKind.RAY

    point: Vector2
    direction: Vector2

    def __post_init__(self) -> None:
        self.point = self.point.clone()
        self.direction = unit_direction(self.direction)

    @classmethod
    def create(cls, point: Vector2, direction: Vector2) -> Ray:
        return cls(point, direction)

    @classmethod
    def create_from_points(cls, origin: Vector2, through: Vector2) -> Ray:
        return cls(origin, through - origin)

    @classmethod
    def create_from_point_and_rad(cls, point: Vector2, rad: float) -> Ray:
        return cls(point, Vector2.create_from_rad(rad))

    @classmethod
    def create_from_point_and_angle(cls, point: Vector2, degrees: float) -> Ray:
        return cls(point, Vector2.create_from_angle(degrees))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.point == other.point and self.direction == other.direction

    def __repr__(self) -> str:
        return f"Ray({self.point}, {self.direction})"

    def get_center(self) -> Vector2:
        return self.point.clone()

    def get_point(self, length: float) -> Vector2:
        return self.point + self.direction * length

    def get_defining_points(self) -> List[Vector2]:
        return [self.point]

    def angle(self) -> float:
        return self.direction.angle()

    def degree_angle(self) -> float:
        return self.direction.degree_angle()

    def aabb(self) -> Tuple[float, float, float, float]:
        def extent(start: float, step: float) -> Tuple[float, float]:
            if step > EPSILON:
                return start, INF
            if step < -EPSILON:
                return -INF, start
            return start, start

        min_x, max_x = extent(self.point.x, self.direction.x)
        min_y, max_y = extent(self.point.y, self.direction.y)
        return min_x, max_x, min_y, max_y

    def move(self, offset: Union[float, Vector2]) -> Ray:
        dx, dy = as_components(offset)
        self.point.x += dx
        self.point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Ray:
        pivot = self.point.clone() if center is None else center
        self.point.rotate_around(rad, pivot)
        self.direction.rotate(rad)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Ray:
        sx, sy = as_components(factor)
        pivot = self.point.clone() if center is None else center
        self.point.scale_around(sx, sy, pivot)
        self.direction = scale_direction(self.direction, sx, sy)
        return self

    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        t = max(0.0, (point - self.point).dot(self.direction))
        return self.get_point(t)

    def project_point(self, point: Vector2) -> Vector2:
        """Orthogonal projection onto the supporting line."""
        return self.get_point((point - self.point).dot(self.direction))

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return (point - self.closest_point(point)).length() <= tolerance

    def clone(self) -> Ray:
        return Ray(self.point, self.direction)
