"""Ellipse given by center, two semi-axes and the direction of the first axis."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union, TYPE_CHECKING
import math

import numpy as np

from geokernel.config import CURVE_SAMPLES, EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.line import unit_direction
from geokernel.model.numeric import closest_parameter
from geokernel.model.shape import ClosedShape, ShapeConstructionError
from geokernel.model.vector import Vector2, as_components

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(eq=False)
class Ellipse(ClosedShape):
    """
    An ellipse. ``rx`` is measured along ``direction`` and ``ry`` along its
    counter-clockwise normal. Points are parameterized by the eccentric
    angle theta: center + direction * rx * cos(theta) + normal * ry * sin(theta).
    """
    kind = ShapeKind.ELLIPSE

    center: Vector2
    rx: float
    ry: float
    direction: Optional[Vector2] = None

    def __post_init__(self) -> None:
        if self.rx <= 0 or self.ry <= 0:
            raise ShapeConstructionError(f"Ellipse radii must be positive, got rx={self.rx}, ry={self.ry}")
        self.center = self.center.clone()
        self.rx = float(self.rx)
        self.ry = float(self.ry)
        self.direction = unit_direction(self.direction if self.direction is not None else Vector2(1.0, 0.0))

    @classmethod
    def create(cls, center: Vector2, rx: float, ry: float, direction: Optional[Vector2] = None) -> Ellipse:
        return cls(center, rx, ry, direction)

    @classmethod
    def create_from_rad(cls, center: Vector2, rx: float, ry: float, rad: float) -> Ellipse:
        return cls(center, rx, ry, Vector2.create_from_rad(rad))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ellipse):
            return NotImplemented
        return (
            self.center == other.center
            and abs(self.rx - other.rx) <= EPSILON
            and abs(self.ry - other.ry) <= EPSILON
            and self.direction == other.direction
        )

    def __repr__(self) -> str:
        return f"Ellipse({self.center}, {self.rx:f}, {self.ry:f}, {self.direction})"

    # --------------------------------------------------------------------------
    # Local frame
    # --------------------------------------------------------------------------
    def to_local(self, point: Vector2) -> Vector2:
        """Coordinates of a point in the (direction, normal) frame at the center."""
        offset = point - self.center
        return Vector2(offset.dot(self.direction), offset.dot(self.direction.perpendicular()))

    def implicit_value(self, point: Vector2) -> float:
        """(u/rx)^2 + (v/ry)^2 - 1: negative inside, zero on the boundary."""
        local = self.to_local(point)
        return (local.x / self.rx) ** 2 + (local.y / self.ry) ** 2 - 1.0

    def get_point(self, theta: float) -> Vector2:
        normal = self.direction.perpendicular()
        return (
            self.center
            + self.direction * (self.rx * math.cos(theta))
            + normal * (self.ry * math.sin(theta))
        )

    def get_derivative(self, theta: float) -> Vector2:
        normal = self.direction.perpendicular()
        return self.direction * (-self.rx * math.sin(theta)) + normal * (self.ry * math.cos(theta))

    def discretize(self, segments: int = CURVE_SAMPLES) -> List[Vector2]:
        """Closed polyline approximation; the first point is not repeated."""
        thetas: npt.NDArray[np.float64] = np.linspace(0, 2 * np.pi, segments, endpoint=False)
        return [self.get_point(float(theta)) for theta in thetas]

    # --------------------------------------------------------------------------
    # Measures
    # --------------------------------------------------------------------------
    def get_center(self) -> Vector2:
        return self.center.clone()

    def get_area(self) -> float:
        return math.pi * self.rx * self.ry

    def get_perimeter(self) -> float:
        # Ramanujan's second approximation
        h = ((self.rx - self.ry) / (self.rx + self.ry)) ** 2
        return math.pi * (self.rx + self.ry) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))

    def aabb(self) -> Tuple[float, float, float, float]:
        dx, dy = self.direction.x, self.direction.y
        half_w = math.hypot(self.rx * dx, self.ry * dy)
        half_h = math.hypot(self.rx * dy, self.ry * dx)
        return (
            self.center.x - half_w, self.center.x + half_w,
            self.center.y - half_h, self.center.y + half_h,
        )

    # --------------------------------------------------------------------------
    # Transforms
    # --------------------------------------------------------------------------
    def move(self, offset: Union[float, Vector2]) -> Ellipse:
        dx, dy = as_components(offset)
        self.center.x += dx
        self.center.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Ellipse:
        if center is not None:
            self.center.rotate_around(rad, center)
        self.direction.rotate(rad)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Ellipse:
        # Per-axis factors apply to the local axes
        sx, sy = as_components(factor)
        if self.rx * abs(sx) <= 0 or self.ry * abs(sy) <= 0:
            raise ShapeConstructionError(f"Scaling by ({sx}, {sy}) would collapse the ellipse radii")
        if center is not None:
            self.center.scale_around(sx, sy, center)
        self.rx *= abs(sx)
        self.ry *= abs(sy)
        return self

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def contains(self, point: Vector2) -> bool:
        return self.implicit_value(point) <= 0.0 or self.contains_point(point)

    def closest_boundary_point(self, point: Vector2) -> Vector2:
        theta = closest_parameter(
            point, self.get_point, self.get_derivative, 0.0, 2 * math.pi, periodic=True
        )
        return self.get_point(theta)

    def clone(self) -> Ellipse:
        return Ellipse(self.center, self.rx, self.ry, self.direction)
