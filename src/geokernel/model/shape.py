"""
Shape Contract
==============
Base classes shared by every 2D shape variant, plus the error taxonomy of the
model layer.

Every shape supports the same operation set: equality, canonical text,
center and bounding box queries, in-place and copying transforms
(move / rotate / scale), closest point, distance, boundary membership,
projection, cloning and the two intersection queries. The mutating forms
return ``self`` so calls can be chained; the ``...ed`` forms clone first and
never alias the source.

The intersection queries are thin delegations to the default
``IntersectionRegistry`` of :mod:`geokernel.intersection`, which dispatches on
the ``kind`` class attribute of both operands.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Tuple, Union
import math

from geokernel.config import EPSILON
from geokernel.model.kinds import ShapeKind
from geokernel.model.vector import Vector2


# ------------------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------------------
class ShapeConstructionError(ValueError):
    """Raised when a factory receives input that cannot form a valid shape."""


class ImmutableFieldError(AttributeError):
    """Raised when writing a field that is derived from the shape's data."""


# ------------------------------------------------------------------------------
# Base Classes
# ------------------------------------------------------------------------------
class Shape(ABC):
    """
    Abstract base class for all 2D shapes.
    """
    kind: ClassVar[ShapeKind]
    is_closed: ClassVar[bool] = False

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __repr__(self) -> str:
        pass

    @abstractmethod
    def get_center(self) -> Vector2:
        pass

    @abstractmethod
    def aabb(self) -> Tuple[float, float, float, float]:
        """Returns (min_x, max_x, min_y, max_y)."""
        pass

    @abstractmethod
    def move(self, offset: Union[float, Vector2]) -> Shape:
        pass

    @abstractmethod
    def rotate(self, rad: float, center: Optional[Vector2] = None) -> Shape:
        pass

    @abstractmethod
    def scale(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Shape:
        pass

    @abstractmethod
    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        pass

    @abstractmethod
    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        """True when the point lies on the shape's boundary (or on the curve itself)."""
        pass

    @abstractmethod
    def clone(self) -> Shape:
        pass

    def get_defining_points(self) -> List[Vector2]:
        """Vertices that define the shape; reported as contacts when inside another shape."""
        return []

    def get_bounding_box_size(self) -> Tuple[float, float]:
        min_x, max_x, min_y, max_y = self.aabb()
        return max_x - min_x, max_y - min_y

    def moved(self, offset: Union[float, Vector2]) -> Shape:
        return self.clone().move(offset)

    def rotated(self, rad: float, center: Optional[Vector2] = None) -> Shape:
        return self.clone().rotate(rad, center)

    def degree_rotate(self, degrees: float, center: Optional[Vector2] = None) -> Shape:
        return self.rotate(math.radians(degrees), center)

    def degree_rotated(self, degrees: float, center: Optional[Vector2] = None) -> Shape:
        return self.rotated(math.radians(degrees), center)

    def scaled(self, factor: Union[float, Vector2], center: Optional[Vector2] = None) -> Shape:
        return self.clone().scale(factor, center)

    def distance_to_point(self, point: Vector2) -> float:
        return (point - self.closest_point(point)).length()

    def project_point(self, point: Vector2) -> Vector2:
        return self.closest_point(point, boundary=True)

    def intersects(self, other: Shape) -> Tuple[bool, List[Vector2]]:
        """
        Computes whether this shape intersects another and the contact points.

        Returns:
            (hit, points). ``points`` is empty when there is no contact, or when
            one shape lies entirely inside the other without touching it.
        """
        from geokernel.intersection import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.intersect(self, other)

    def has_intersection(self, other: Shape) -> bool:
        from geokernel.intersection import DEFAULT_REGISTRY
        return DEFAULT_REGISTRY.has_intersection(self, other)


class ClosedShape(Shape):
    """
    Base class for shapes that enclose an area.

    ``closest_point`` returns a copy of the query point when it is contained
    (unless ``boundary`` is requested), so ``distance_to_point`` is zero for
    interior points. ``project_point`` always lands on the boundary.
    """
    is_closed: ClassVar[bool] = True

    @abstractmethod
    def contains(self, point: Vector2) -> bool:
        """True when the point lies in the interior or on the boundary."""
        pass

    @abstractmethod
    def get_area(self) -> float:
        pass

    @abstractmethod
    def get_perimeter(self) -> float:
        pass

    @abstractmethod
    def closest_boundary_point(self, point: Vector2) -> Vector2:
        pass

    def closest_point(self, point: Vector2, boundary: bool = False) -> Vector2:
        if not boundary and self.contains(point):
            return point.clone()
        return self.closest_boundary_point(point)

    def contains_point(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        return (point - self.closest_boundary_point(point)).length() <= tolerance
