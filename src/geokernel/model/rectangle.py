"""Oriented rectangle given by center, size and the direction of its width axis."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.line import unit_direction
from geokernel.model.predicates import (
    closest_point_on_edges,
    iter_edges,
    point_on_edges,
    points_aabb,
)
from geokernel.model.segment import Segment
from geokernel.model.shape import ClosedShape, ShapeConstructionError
from geokernel.model.vector import Vector2, as_components


@dataclass(eq=False)
class Rectangle(ClosedShape):
    kind = ShapeKind.RECTANGLE

    center: Vector2
    width: float
    height: float
    direction: Optional[Vector2] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ShapeConstructionError(f"Rectangle size must be non-negative, got {self.width} x {self.height}")
        self.center = self.center.clone()
        self.width = float(self.width)
        self.height = float(self.height)
        self.direction = unit_direction(self.direction if self.direction is not None else Vector2(1.0, 0.0))

    @classmethod
    def create(cls, center: Vector2, width: float, height: float, direction: Optional[Vector2] = None) -> Rectangle:
        return cls(center, width, height, direction)

    @classmethod
    def create_from_rad(cls, center: Vector2, width: float, height: float, rad: float) -> Rectangle:
        return cls(center, width, height, Vector2.create_from_rad(rad))

    @classmethod
    def create_from_angle(cls, center: Vector2, width: float, height: float, degrees: float) -> Rectangle:
        return cls(center, width, height, Vector2.create_from_angle(degrees))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (
            self.center == other.center
            and abs(self.width - other.width) <= EPSILON
            and abs(self.height - other.height) <= EPSILON
            and self.direction == other.direction
        )

    def __repr__(self) -> str:
        return f"Rectangle({self.center}, {self.width:f}, {self.height:f}, {self.direction})"

    def get_vertices(self) -> List[Vector2]:
        """Corners counter-clockwise, starting at local (-w/2, -h/2)."""
        half_w = self.width / 2
        half_h = self.height / 2
        normal = self.direction.perpendicular()
        return [
            self.center + self.direction * u + normal * v
            for u, v in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h))
        ]

    def get_edges(self) -> List[Segment]:
        return [Segment(a, b) for a, b in iter_edges(self.get_vertices())]

    def get_defining_points(self) -> List[Vector2]:
        return self.get_vertices()

    def get_center(self) -> Vector2:
        return self.center.clone()

    def get_area(self) -> float:
        return self.width * self.height

    area = get_area

    def get_perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def incenter(self) -> Vector2:
        return self.center.clone()

    def inradius(self) -> float:
        return min(self.width, self.height) / 2

    def circumcenter(self) -> Vector2:
        return self.center.clone()

    def circumradius(self) -> float:
        return math.hypot(self.width, self.height) / 2

    def aabb(self) -> Tuple[float, float, float, float]:
        return points_aabb(self.get_vertices())

    def move(self, offset: Union[float, Vector2]) -> Rectangle:
        dx, dy = as_components(offset)
        self.center.x += dx
        self.center.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Rectangle:
        if center is not None:
            self.center.rotate_around(rad, center)
        self.direction.rotate(rad)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Rectangle:
        # Per-axis factors apply to width and height in the local frame
        sx, sy = as_components(factor)
        if center is not None:
            self.center.scale_around(sx, sy, center)
        self.width *= abs(sx)
        self.height *= abs(sy)
        return self

    def contains(self, point: Vector2) -> bool:
        vertices = self.get_vertices()
        inside = all(
            (b - a).cross(point - a) >= 0 for a, b in iter_edges(vertices)
        )
        return inside or point_on_edges(point, vertices)

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        return closest_point_on_edges(point, self.get_vertices())

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return point_on_edges(point, self.get_vertices(), tolerance)

    def clone(self) -> Rectangle:
        return Rectangle(self.center, self.width, self.height, self.direction)
