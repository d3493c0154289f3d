"""
Pairwise intersection of 2D shapes.

``DEFAULT_REGISTRY`` is built once on import: every pair of shape kinds is
registered, the coverage audit runs, and the registry is frozen.
"""
from typing import List, Tuple

from geokernel.intersection.handlers import register_default_handlers
from geokernel.intersection.registry import (
    CoverageReport,
    IntersectionRegistry,
    RegistryFrozenError,
    get_unique_points,
)
from geokernel.model.shape import Shape
from geokernel.model.vector import Vector2


def build_default_registry() -> IntersectionRegistry:
    registry = IntersectionRegistry()
    register_default_handlers(registry)
    registry.check_missing_intersections()
    registry.freeze()
    return registry


DEFAULT_REGISTRY = build_default_registry()


def intersect(shape_a: Shape, shape_b: Shape) -> Tuple[bool, List[Vector2]]:
    return DEFAULT_REGISTRY.intersect(shape_a, shape_b)


def has_intersection(shape_a: Shape, shape_b: Shape) -> bool:
    return DEFAULT_REGISTRY.has_intersection(shape_a, shape_b)


__all__ = [
    "DEFAULT_REGISTRY",
    "CoverageReport",
    "IntersectionRegistry",
    "RegistryFrozenError",
    "build_default_registry",
    "get_unique_points",
    "has_intersection",
    "intersect",
]
