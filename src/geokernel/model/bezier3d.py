"""
Bezier curve in 3D space.

Shares the transform and query surface of the 2D shapes, expressed over
Vector3. It is not a 2D shape kind and is not dispatched by the
intersection registry.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, Union
import math

import numpy as np

from geokernel.config import BEZIER_LENGTH_SEGMENTS, BEZIER_SEGMENTS, EPSILON
from geokernel.model.bezier import de_casteljau, hodograph
from geokernel.model.numeric import closest_parameter
from geokernel.model.shape import ImmutableFieldError, ShapeConstructionError
from geokernel.model.vector import Vector3, as_components3

Z_AXIS = Vector3(0.0, 0.0, 1.0)


class BezierCurve3D:
    def __init__(self, control_points: Sequence[Vector3]) -> None:
        self._points = self._copy_points(control_points)

    @staticmethod
    def _copy_points(points: Sequence[Vector3]) -> List[Vector3]:
        if len(points) < 2:
            raise ShapeConstructionError(f"Bezier curve needs at least 2 control points, got {len(points)}")
        return [point.clone() for point in points]

    @classmethod
    def create(cls, control_points: Sequence[Vector3]) -> BezierCurve3D:
        return cls(control_points)

    @classmethod
    def create_quadratic(cls, p0: Vector3, p1: Vector3, p2: Vector3) -> BezierCurve3D:
        return cls([p0, p1, p2])

    @classmethod
    def create_cubic(cls, p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3) -> BezierCurve3D:
        return cls([p0, p1, p2, p3])

    @property
    def control_points(self) -> List[Vector3]:
        return self._points

    @control_points.setter
    def control_points(self, value: Sequence[Vector3]) -> None:
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

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BezierCurve3D):
            return NotImplemented
        if self.num_points != other.num_points:
            return False
        return all(a == b for a, b in zip(self._points, other._points))

    def __repr__(self) -> str:
        return f"BezierCurve3D({', '.join(str(point) for point in self._points)})"

    def get_point(self, t: float) -> Vector3:
        if t <= 0.0:
            return self._points[0].clone()
        if t >= 1.0:
            return self._points[-1].clone()
        return de_casteljau(self._points, t)

    def get_derivative(self, t: float) -> Vector3:
        return de_casteljau(hodograph(self._points), min(1.0, max(0.0, t)))

    def get_start_point(self) -> Vector3:
        return self._points[0].clone()

    def get_end_point(self) -> Vector3:
        return self._points[-1].clone()

    def discretize(self, segments: int = BEZIER_SEGMENTS) -> List[Vector3]:
        return [self.get_point(float(t)) for t in np.linspace(0.0, 1.0, segments + 1)]

    def to_segments(self, segments: int = BEZIER_SEGMENTS) -> List[Tuple[Vector3, Vector3]]:
        """Consecutive (start, end) pairs of the discretized curve."""
        points = self.discretize(segments)
        return [(points[i], points[i + 1]) for i in range(len(points) - 1)]

    def length(self, segments: int = BEZIER_LENGTH_SEGMENTS) -> float:
        return sum((end - start).length() for start, end in self.to_segments(segments))

    def aabb(self) -> Tuple[float, float, float, float, float, float]:
        """Returns (min_x, max_x, min_y, max_y, min_z, max_z) of the control points."""
        coords = np.array([[p.x, p.y, p.z] for p in self._points])
        mins = coords.min(axis=0)
        maxs = coords.max(axis=0)
        return (
            float(mins[0]), float(maxs[0]),
            float(mins[1]), float(maxs[1]),
            float(mins[2]), float(maxs[2]),
        )

    def get_bounding_box_size(self) -> Tuple[float, float, float]:
        min_x, max_x, min_y, max_y, min_z, max_z = self.aabb()
        return max_x - min_x, max_y - min_y, max_z - min_z

    def get_center(self) -> Vector3:
        min_x, max_x, min_y, max_y, min_z, max_z = self.aabb()
        return Vector3((min_x + max_x) / 2, (min_y + max_y) / 2, (min_z + max_z) / 2)

    def move(self, offset: Union[float, Vector3]) -> BezierCurve3D:
        dx, dy, dz = as_components3(offset)
        for point in self._points:
            point.x += dx
            point.y += dy
            point.z += dz
        return self

    def moved(self, offset: Union[float, Vector3]) -> BezierCurve3D:
        return self.clone().move(offset)

    def rotate(self, rad: float, axis: Optional[Vector3] = None, center: Optional[Vector3] = None) -> BezierCurve3D:
        """Rotates around ``axis`` (default +z) through ``center`` (default the box center)."""
        axis = Z_AXIS if axis is None else axis
        pivot = self.get_center() if center is None else center
        for point in self._points:
            rotated = (point - pivot).rotate(axis, rad) + pivot
            point.x, point.y, point.z = rotated.x, rotated.y, rotated.z
        return self

    def rotated(self, rad: float, axis: Optional[Vector3] = None, center: Optional[Vector3] = None) -> BezierCurve3D:
        return self.clone().rotate(rad, axis, center)

    def degree_rotate(self, degrees: float, axis: Optional[Vector3] = None, center: Optional[Vector3] = None) -> BezierCurve3D:
        return self.rotate(math.radians(degrees), axis, center)

    def degree_rotated(self, degrees: float, axis: Optional[Vector3] = None, center: Optional[Vector3] = None) -> BezierCurve3D:
        return self.rotated(math.radians(degrees), axis, center)

    def scale(self, factor: Union[float, Vector3], center: Optional[Vector3] = None) -> BezierCurve3D:
        sx, sy, sz = as_components3(factor)
        pivot = self.get_center() if center is None else center
        for point in self._points:
            point.x = pivot.x + (point.x - pivot.x) * sx
            point.y = pivot.y + (point.y - pivot.y) * sy
            point.z = pivot.z + (point.z - pivot.z) * sz
        return self

    def scaled(self, factor: Union[float, Vector3], center: Optional[Vector3] = None) -> BezierCurve3D:
        return self.clone().scale(factor, center)

    def closest_point(self, point: Vector3, boundary: bool = False) -> Vector3:
        t = closest_parameter(point, self.get_point, self.get_derivative, 0.0, 1.0)
        return self.get_point(t)

    def distance_to_point(self, point: Vector3) -> float:
        return (point - self.closest_point(point)).length()

    def project_point(self, point: Vector3) -> Vector3:
        return self.closest_point(point)

    def contains_point(self, point: Vector3, tolerance: float = EPSILON) -> bool:
        return self.distance_to_point(point) <= tolerance

    def clone(self) -> BezierCurve3D:
        return BezierCurve3D(self._points)
