"""Circular sector: a wedge of a disc bounded by an arc and two radii."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.line import unit_direction
from geokernel.model.predicates import points_aabb
from geokernel.model.segment import Segment
from geokernel.model.shape import ClosedShape, ShapeConstructionError
from geokernel.model.vector import Vector2, as_components

TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float, start: float) -> float:
    """Maps an angle into [start, start + 2*pi)."""
    return start + (angle - start) % TWO_PI


@dataclass(eq=False)
class Sector(ClosedShape):
    """
    A sector of a disc.

    ``range`` is the signed fraction of a full turn covered by the sector,
    clamped to [-1, 1]. A positive range sweeps counter-clockwise from
    ``direction``; a negative range ends at ``direction``.
    """
    kind = ShapeKind.SECTOR

    center: Vector2
    radius: float
    direction: Optional[Vector2] = None
    range: float = 1.0

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ShapeConstructionError(f"Sector radius must be non-negative, got {self.radius}")
        self.center = self.center.clone()
        self.radius = float(self.radius)
        self.direction = unit_direction(self.direction if self.direction is not None else Vector2(1.0, 0.0))
        self.range = min(1.0, max(-1.0, float(self.range)))

    @classmethod
    def create(cls, center: Vector2, radius: float, direction: Optional[Vector2] = None, range: float = 1.0) -> Sector:
        return cls(center, radius, direction, range)

    @classmethod
    def create_from_rad(cls, center: Vector2, radius: float, start_rad: float, span_rad: float) -> Sector:
        return cls(center, radius, Vector2.create_from_rad(start_rad), span_rad / TWO_PI)

    @classmethod
    def create_from_angle(cls, center: Vector2, radius: float, start_deg: float, span_deg: float) -> Sector:
        return cls.create_from_rad(center, radius, math.radians(start_deg), math.radians(span_deg))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sector):
            return NotImplemented
        return (
            self.center == other.center
            and abs(self.radius - other.radius) <= EPSILON
            and self.direction == other.direction
            and abs(self.range - other.range) <= EPSILON
        )

    def __repr__(self) -> str:
        return f"Sector({self.center}, {self.radius:f}, {self.direction}, {self.range:f})"

    # --------------------------------------------------------------------------
    # Angular layout
    # --------------------------------------------------------------------------
    def is_full(self) -> bool:
        return abs(self.range) >= 1.0

    def get_span(self) -> float:
        return abs(self.range) * TWO_PI

    def get_start_angle(self) -> float:
        if self.range > 0:
            return self.direction.angle()
        return self.direction.angle() - self.get_span()

    def get_end_angle(self) -> float:
        return self.get_start_angle() + self.get_span()

    def get_start_point(self) -> Vector2:
        return self.center + Vector2.create_from_rad(self.get_start_angle(), self.radius)

    def get_end_point(self) -> Vector2:
        return self.center + Vector2.create_from_rad(self.get_end_angle(), self.radius)

    def angle_in_span(self, angle: float, tolerance: float = 0.0) -> bool:
        if self.is_full():
            return True
        start = self.get_start_angle()
        relative = normalize_angle(angle, start) - start
        span = self.get_span()
        # A point just before the start wraps to nearly 2*pi
        return relative <= span + tolerance or relative >= TWO_PI - tolerance

    def get_edges(self) -> List[Segment]:
        """The two radial edges; a full sector has none."""
        if self.is_full():
            return []
        return [Segment(self.center, self.get_start_point()), Segment(self.center, self.get_end_point())]

    def get_defining_points(self) -> List[Vector2]:
        if self.is_full():
            return [self.center]
        return [self.center, self.get_start_point(), self.get_end_point()]

    # --------------------------------------------------------------------------
    # Measures
    # --------------------------------------------------------------------------
    def get_center(self) -> Vector2:
        return self.center.clone()

    def get_area(self) -> float:
        return 0.5 * self.radius ** 2 * self.get_span()

    def get_perimeter(self) -> float:
        arc = self.radius * self.get_span()
        if self.is_full():
            return arc
        return arc + 2.0 * self.radius

    def aabb(self) -> Tuple[float, float, float, float]:
        if self.is_full():
            return (
                self.center.x - self.radius, self.center.x + self.radius,
                self.center.y - self.radius, self.center.y + self.radius,
            )
        extremes = [self.center, self.get_start_point(), self.get_end_point()]
        for quadrant in range(4):
            angle = quadrant * math.pi / 2
            if self.angle_in_span(angle):
                extremes.append(self.center + Vector2.create_from_rad(angle, self.radius))
        return points_aabb(extremes)

    # --------------------------------------------------------------------------
    # Transforms
    # --------------------------------------------------------------------------
    def move(self, offset: Union[float, Vector2]) -> Sector:
        dx, dy = as_components(offset)
        self.center.x += dx
        self.center.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Sector:
        if center is not None:
            self.center.rotate_around(rad, center)
        self.direction.rotate(rad)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Sector:
        sx, sy = as_components(factor)
        if center is not None:
            self.center.scale_around(sx, sy, center)
        self.radius *= math.sqrt(abs(sx * sy))
        return self

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def on_arc(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        offset = point - self.center
        distance = offset.length()
        if abs(distance - self.radius) > tolerance:
            return False
        if distance <= EPSILON:
            return True
        return self.angle_in_span(offset.angle(), tolerance / distance)

    def contains(self, point: Vector2) -> bool:
        offset = point - self.center
        distance = offset.length()
        if distance > self.radius + EPSILON:
            return False
        if distance <= EPSILON or self.angle_in_span(offset.angle()):
            return True
        return any(edge.contains_point(point) for edge in self.get_edges())

    def closest_point_on_arc(self, point: Vector2) -> Vector2:
        offset = point - self.center
        if offset.length() > EPSILON and self.angle_in_span(offset.angle()):
            return self.center + offset.normalize() * self.radius
        if offset.length() <= EPSILON:
            return self.get_start_point()
        start, end = self.get_start_point(), self.get_end_point()
        return start if (point - start).length() <= (point - end).length() else end

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        candidates = [self.closest_point_on_arc(point)]
        candidates.extend(edge.closest_point(point) for edge in self.get_edges())
        return min(candidates, key=lambda candidate: (point - candidate).length())

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        if self.on_arc(point, tolerance):
            return True
        return any(edge.contains_point(point, tolerance) for edge in self.get_edges())

    def clone(self) -> Sector:
        return Sector(self.center, self.radius, self.direction, self.range)
