"""Line segment between two endpoints."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.predicates import closest_point_on_segment
from geokernel.model.shape import Shape
from geokernel.model.vector import Vector2, as_components


@dataclass(eq=False)
class Segment(Shape):
    kind = ShapeKind.SEGMENT

    point1: Vector2
    point2: Vector2

    def __post_init__(self) -> None:
        self.point1 = self.point1.clone()
        self.point2 = self.point2.clone()

    @classmethod
    def create(cls, point1: Vector2, point2: Vector2) -> Segment:
        return cls(point1, point2)

    @classmethod
    def create_from_rad(cls, start: Vector2, rad: float, length: float) -> Segment:
        return cls(start, start + Vector2.create_from_rad(rad, length))

    @classmethod
    def create_from_angle(cls, start: Vector2, degrees: float, length: float) -> Segment:
        return cls.create_from_rad(start, math.radians(degrees), length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.point1 == other.point1 and self.point2 == other.point2

    def __repr__(self) -> str:
        return f"Segment({self.point1}, {self.point2})"

    def to_vector2(self) -> Vector2:
        return self.point2 - self.point1

    def length(self) -> float:
        return self.to_vector2().length()

    def midpoint(self) -> Vector2:
        return (self.point1 + self.point2) * 0.5

    def angle(self) -> float:
        return self.to_vector2().angle()

    def degree_angle(self) -> float:
        return math.degrees(self.angle())

    def normal(self) -> Vector2:
        """Unit normal, counter-clockwise from point1 -> point2."""
        return self.to_vector2().perpendicular().normalize()

    def get_point(self, t: float) -> Vector2:
        """Point at parameter t, with t = 0 at point1 and t = 1 at point2."""
        return self.point1 + self.to_vector2() * t

    def get_center(self) -> Vector2:
        return self.midpoint()

    def get_defining_points(self) -> List[Vector2]:
        return [self.point1, self.point2]

    def aabb(self) -> Tuple[float, float, float, float]:
        return (
            min(self.point1.x, self.point2.x), max(self.point1.x, self.point2.x),
            min(self.point1.y, self.point2.y), max(self.point1.y, self.point2.y),
        )

    def move(self, offset: Union[float, Vector2]) -> Segment:
        dx, dy = as_components(offset)
        for point in (self.point1, self.point2):
            point.x += dx
            point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Segment:
        pivot = self.midpoint() if center is None else center
        self.point1.rotate_around(rad, pivot)
        self.point2.rotate_around(rad, pivot)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Segment:
        sx, sy = as_components(factor)
        pivot = self.midpoint() if center is None else center
        self.point1.scale_around(sx, sy, pivot)
        self.point2.scale_around(sx, sy, pivot)
        return self

    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        return closest_point_on_segment(point, self.point1, self.point2)

    def project_point(self, point: Vector2) -> Vector2:
        """Orthogonal projection onto the supporting line, not clamped to the endpoints."""
        direction = self.to_vector2()
        length_sq = direction.length_squared()
        if length_sq <= EPSILON * EPSILON:
            return self.point1.clone()
        return self.get_point((point - self.point1).dot(direction) / length_sq)

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return (point - self.closest_point(point)).length() <= tolerance

    def clone(self) -> Segment:
        return Segment(self.point1, self.point2)
