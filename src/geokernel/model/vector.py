"""
Vector primitives for the 2D and 3D shape types.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union, TYPE_CHECKING
import math

import numpy as np

from geokernel.config import EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(eq=False)
class Vector2:
    """
    A mutable 2D vector, used both as a point and as a direction.

    Equality is tolerance-based: two vectors are equal when every component
    differs by less than EPSILON. Vectors are therefore not hashable.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def create(cls, x: float = 0.0, y: float = 0.0) -> Vector2:
        return cls(float(x), float(y))

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def create_from_rad(cls, rad: float, length: float = 1.0) -> Vector2:
        return cls(math.cos(rad) * length, math.sin(rad) * length)

    @classmethod
    def create_from_angle(cls, degrees: float, length: float = 1.0) -> Vector2:
        return cls.create_from_rad(math.radians(degrees), length)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[float, Vector2]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    def __str__(self) -> str:
        return f"Vector2({self.x:f}, {self.y:f})"

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2:
        """Normalizes in place. A near-zero vector becomes the zero vector."""
        length = self.length()
        if length <= EPSILON:
            self.x, self.y = 0.0, 0.0
        else:
            self.x /= length
            self.y /= length
        return self

    def normalized(self) -> Vector2:
        return self.clone().normalize()

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> Vector2:
        """Counter-clockwise normal of the same length."""
        return Vector2(-self.y, self.x)

    def angle(self) -> float:
        """Returns the polar angle in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def degree_angle(self) -> float:
        return math.degrees(self.angle())

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate(self, rad: float) -> Vector2:
        """Rotates in place around the origin."""
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        self.x, self.y = self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a
        return self

    def rotated(self, rad: float) -> Vector2:
        return self.clone().rotate(rad)

    def degree_rotate(self, degrees: float) -> Vector2:
        return self.rotate(math.radians(degrees))

    def degree_rotated(self, degrees: float) -> Vector2:
        return self.rotated(math.radians(degrees))

    def rotate_around(self, rad: float, center: Vector2) -> Vector2:
        """Rotates in place around an arbitrary center."""
        offset = (self - center).rotate(rad)
        self.x = center.x + offset.x
        self.y = center.y + offset.y
        return self

    def scale_around(self, sx: float, sy: float, center: Vector2) -> Vector2:
        """Scales in place per axis relative to a center."""
        self.x = center.x + (self.x - center.x) * sx
        self.y = center.y + (self.y - center.y) * sy
        return self

    def clone(self) -> Vector2:
        return Vector2(self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(eq=False)
class Vector3:
    """
    A mutable 3D vector with the same tolerance-based equality as Vector2.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def create(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Vector3:
        return cls(float(x), float(y), float(z))

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[float, Vector3]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    def __str__(self) -> str:
        return f"Vector3({self.x:f}, {self.y:f}, {self.z:f})"

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vector3:
        length = self.length()
        if length <= EPSILON:
            self.x, self.y, self.z = 0.0, 0.0, 0.0
        else:
            self.x /= length
            self.y /= length
            self.z /= length
        return self

    def normalized(self) -> Vector3:
        return self.clone().normalize()

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def distance_to(self, other: Vector3) -> float:
        return (self - other).length()

    def rotate(self, axis: Vector3, rad: float) -> Vector3:
        """
        Rotates in place around an axis through the origin (Rodrigues).

        A near-zero axis leaves the vector untouched.
        """
        k = axis.normalized()
        if k.length() <= EPSILON:
            return self
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        kxv = k.cross(self)
        kdv = k.dot(self)
        rotated = self * cos_a + kxv * sin_a + k * (kdv * (1.0 - cos_a))
        self.x, self.y, self.z = rotated.x, rotated.y, rotated.z
        return self

    def rotated(self, axis: Vector3, rad: float) -> Vector3:
        return self.clone().rotate(axis, rad)

    def clone(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def to_vector2(self) -> Vector2:
        return Vector2(self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


def as_components(value: Union[float, Vector2]) -> Tuple[float, float]:
    """Expands a scalar to (s, s); a Vector2 to (x, y)."""
    if isinstance(value, Vector2):
        return value.x, value.y
    return float(value), float(value)


def as_components3(value: Union[float, Vector3]) -> Tuple[float, float, float]:
    """Expands a scalar to (s, s, s); a Vector3 to (x, y, z)."""
    if isinstance(value, Vector3):
        return value.x, value.y, value.z
    return float(value), float(value), float(value)
