"""Circle given by center and radius."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.shape import ClosedShape, ShapeConstructionError
from geokernel.model.vector import Vector2, as_components


@dataclass(eq=False)
class Circle(ClosedShape):
    kind = ShapeKind.CIRCLE

    center: Vector2
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ShapeConstructionError(f"Circle radius must be non-negative, got {self.radius}")
        self.center = self.center.clone()
        self.radius = float(self.radius)

    @classmethod
    def create(cls, center: Vector2, radius: float) -> Circle:
        return cls(center, radius)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self.center == other.center and abs(self.radius - other.radius) <= EPSILON

    def __repr__(self) -> str:
        return f"Circle({self.center}, {self.radius:f})"

    def get_center(self) -> Vector2:
        return self.center.clone()

    def get_point(self, rad: float) -> Vector2:
        return self.center + Vector2.create_from_rad(rad, self.radius)

    def get_area(self) -> float:
        return math.pi * self.radius ** 2

    def get_perimeter(self) -> float:
        return 2.0 * math.pi * self.radius

    def aabb(self) -> Tuple[float, float, float, float]:
        return (
            self.center.x - self.radius, self.center.x + self.radius,
            self.center.y - self.radius, self.center.y + self.radius,
        )

    def move(self, offset: Union[float, Vector2]) -> Circle:
        dx, dy = as_components(offset)
        self.center.x += dx
        self.center.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Circle:
        if center is not None:
            self.center.rotate_around(rad, center)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Circle:
        # A circle stays a circle: per-axis factors collapse to their geometric mean
        sx, sy = as_components(factor)
        if center is not None:
            self.center.scale_around(sx, sy, center)
        self.radius *= math.sqrt(abs(sx * sy))
        return self

    def contains(self, point: Vector2) -> bool:
        return (point - self.center).length() <= self.radius + EPSILON

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        offset = point - self.center
        if offset.length() <= EPSILON:
            return self.center + Vector2(self.radius, 0.0)
        return self.center + offset.normalize() * self.radius

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return abs((point - self.center).length() - self.radius) <= tolerance

    def clone(self) -> Circle:
        return Circle(self.center, self.radius)
