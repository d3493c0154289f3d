"""Bezier curve of arbitrary order in the plane."""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, TypeVar, Union

import numpy as np

from geokernel.config import BEZIER_LENGTH_SEGMENTS, BEZIER_SEGMENTS, EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.numeric import closest_parameter
from geokernel.model.predicates import points_aabb
from geokernel.model.segment import Segment
from geokernel.model.shape import ImmutableFieldError, Shape, ShapeConstructionError
from geokernel.model.vector import Vector2, as_components

VectorT = TypeVar("VectorT")


def de_casteljau(points: Sequence[VectorT], t: float) -> VectorT:
    """Evaluates the curve defined by ``points`` at t by repeated interpolation."""
    work = list(points)
    for level in range(len(work) - 1, 0, -1):
        work = [work[i] * (1.0 - t) + work[i + 1] * t for i in range(level)]
    return work[0].clone()


def hodograph(points: Sequence[VectorT]) -> List[VectorT]:
    """Control points of the derivative curve."""
    order = len(points) - 1
    return [(points[i + 1] - points[i]) * order for i in range(order)]


class BezierCurve(Shape):
    """
    A Bezier curve defined by two or more control points.

    Parameters outside [0, 1] are clamped to the endpoints.
    """
    kind = ShapeKind.BEZIER_CURVE

    def __init__(self, control_points: Sequence[Vector2]) -> None:
        self._points = self._copy_points(control_points)

    @staticmethod
    def _copy_points(points: Sequence[Vector2]) -> List[Vector2]:
        if len(points) < 2:
            raise ShapeConstructionError(f"Bezier curve needs at least 2 control points, got {len(points)}")
        return [point.clone() for point in points]

    @classmethod
    def create(cls, control_points: Sequence[Vector2]) -> BezierCurve:
        return cls(control_points)

    @classmethod
    def create_quadratic(cls, p0: Vector2, p1: Vector2, p2: Vector2) -> BezierCurve:
        return cls([p0, p1, p2])

    @classmethod
    def create_cubic(cls, p0: Vector2, p1: Vector2, p2: Vector2, p3: Vector2) -> BezierCurve:
        return cls([p0, p1, p2, p3])

    @property
    def control_points(self) -> List[Vector2]:
        """Borrowed view of the control points."""
        return self._points

    @control_points.setter
    def control_points(self, value: Sequence[Vector2]) -> None:
        self._points = self._copy_points(value)

    @property
    def num_points(self) -> int:
        return len(self._points)

    @num_points.setter
    def num_points(self, value: int) -> None:
        raise ImmutableFieldError("cannot modify num_points directly; assign control_points instead")

    @property
    def order(self) -> int:
        return len(self._points) - 1

    @order.setter
    def order(self, value: int) -> None:
        raise ImmutableFieldError("cannot modify order directly; assign control_points instead")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BezierCurve):
            return NotImplemented
        if self.num_points != other.num_points:
            return False
        return all(a == b for a, b in zip(self._points, other._points))

    def __repr__(self) -> str:
        return f"BezierCurve({', '.join(str(point) for point in self._points)})"

    # --------------------------------------------------------------------------
    # Evaluation
    # --------------------------------------------------------------------------
    def get_point(self, t: float) -> Vector2:
        if t <= 0.0:
            return self._points[0].clone()
        if t >= 1.0:
            return self._points[-1].clone()
        return de_casteljau(self._points, t)

    def get_derivative(self, t: float) -> Vector2:
        return de_casteljau(hodograph(self._points), min(1.0, max(0.0, t)))

    def get_start_point(self) -> Vector2:
        return self._points[0].clone()

    def get_end_point(self) -> Vector2:
        return self._points[-1].clone()

    def get_defining_points(self) -> List[Vector2]:
        return [self._points[0], self._points[-1]]

    def discretize(self, segments: int = BEZIER_SEGMENTS) -> List[Vector2]:
        """``segments + 1`` points evenly spaced in the parameter."""
        return [self.get_point(float(t)) for t in np.linspace(0.0, 1.0, segments + 1)]

    def to_segments(self, segments: int = BEZIER_SEGMENTS) -> List[Segment]:
        points = self.discretize(segments)
        return [Segment(points[i], points[i + 1]) for i in range(len(points) - 1)]

    def length(self, segments: int = BEZIER_LENGTH_SEGMENTS) -> float:
        """Polyline approximation of the arc length."""
        points = self.discretize(segments)
        return sum((points[i + 1] - points[i]).length() for i in range(len(points) - 1))

    # --------------------------------------------------------------------------
    # Measures
    # --------------------------------------------------------------------------
    def aabb(self) -> Tuple[float, float, float, float]:
        """Box of the control polygon, which encloses the curve."""
        return points_aabb(self._points)

    def get_center(self) -> Vector2:
        min_x, max_x, min_y, max_y = self.aabb()
        return Vector2((min_x + max_x) / 2, (min_y + max_y) / 2)

    # --------------------------------------------------------------------------
    # Transforms
    # --------------------------------------------------------------------------
    def move(self, offset: Union[float, Vector2]) -> BezierCurve:
        dx, dy = as_components(offset)
        for point in self._points:
            point.x += dx
            point.y += dy
        return self

    def rotate(self, rad: float, center: Optional[Vector2] = None) -> BezierCurve:
        pivot = self.get_center() if center is None else center
        for point in self._points:
            point.rotate_around(rad, pivot)
        return self

    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> BezierCurve:
        sx, sy = as_components(factor)
        pivot = self.get_center() if center is None else center
        for point in self._points:
            point.scale_around(sx, sy, pivot)
        return self

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def closest_parameter(self, point: Vector2) -> float:
        return closest_parameter(point, self.get_point, self.get_derivative, 0.0, 1.0)

    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        return self.get_point(self.closest_parameter(point))

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return (point - self.closest_point(point)).length() <= tolerance

    def clone(self) -> BezierCurve:
        return BezierCurve(self._points)
