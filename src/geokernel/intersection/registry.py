"""
Intersection Dispatch Registry
==============================
Two independent tables map an ordered pair of shape kinds to a handler:

* the *intersection* table holds handlers returning ``(hit, points)``;
* the *has-intersection* table holds boolean handlers, which may use
  cheaper short-circuit algorithms.

Each unordered pair is registered once, under a canonical order. A lookup
tries the pair as given, then the mirrored pair with the arguments swapped,
and finally degrades to "no intersection".

The default registry is filled once when :mod:`geokernel.intersection` is
imported, audited for missing pairs and then frozen; after that it is only
read and can be shared between threads.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from itertools import combinations_with_replacement
from typing import Callable, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING
import logging

from geokernel.model.kinds import ShapeKind
from geokernel.model.vector import Vector2

if TYPE_CHECKING:
    from geokernel.model.shape import Shape

logger = logging.getLogger(__name__)

IntersectionResult = Tuple[bool, List[Vector2]]
IntersectionHandler = Callable[["Shape", "Shape"], IntersectionResult]
HasIntersectionHandler = Callable[["Shape", "Shape"], bool]
KindPair = Tuple[ShapeKind, ShapeKind]


class RegistryFrozenError(RuntimeError):
    """Raised when registering a handler on a frozen registry."""


def get_unique_points(points: Iterable[Vector2], tolerance: Optional[float] = None) -> List[Vector2]:
    """
    Removes duplicate points while preserving first-occurrence order.

    By default two points are duplicates when their canonical text
    (six decimals per component) is identical. Passing ``tolerance`` merges
    points closer than that distance instead.
    """
    unique: List[Vector2] = []
    if tolerance is None:
        seen = set()
        for point in points:
            key = str(point)
            if key not in seen:
                seen.add(key)
                unique.append(point)
        return unique

    for point in points:
        if all((point - kept).length() > tolerance for kept in unique):
            unique.append(point)
    return unique


@dataclass
class CoverageReport:
    """Unordered kind pairs that have no handler in each table."""
    missing_intersections: List[KindPair] = field(default_factory=list)
    missing_has_intersections: List[KindPair] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_intersections and not self.missing_has_intersections


class IntersectionRegistry:
    def __init__(self) -> None:
        self._intersections: Dict[KindPair, IntersectionHandler] = {}
        self._has_intersections: Dict[KindPair, HasIntersectionHandler] = {}
        self._frozen = False

    # --------------------------------------------------------------------------
    # Registration
    # --------------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def _register(self, table: Dict, first: ShapeKind, second: ShapeKind, handler: Callable, table_name: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {table_name} handler for ({first}, {second}): registry is frozen")
        if (first, second) in table or (second, first) in table:
            raise ValueError(f"{table_name} handler for ({first}, {second}) is already registered")
        table[(first, second)] = handler

    def register_intersection(self, first: ShapeKind, second: ShapeKind, handler: IntersectionHandler) -> None:
        """Registers ``handler(a, b)`` for a of kind ``first`` and b of kind ``second``."""
        self._register(self._intersections, first, second, handler, "Intersection")

    def register_has_intersection(self, first: ShapeKind, second: ShapeKind, handler: HasIntersectionHandler) -> None:
        self._register(self._has_intersections, first, second, handler, "Has-intersection")

    def get_intersection_handler(self, first: ShapeKind, second: ShapeKind) -> Optional[IntersectionHandler]:
        return self._intersections.get((first, second))

    def get_has_intersection_handler(self, first: ShapeKind, second: ShapeKind) -> Optional[HasIntersectionHandler]:
        return self._has_intersections.get((first, second))

    # --------------------------------------------------------------------------
    # Dispatch
    # --------------------------------------------------------------------------
    def intersect(self, shape_a: Shape, shape_b: Shape) -> IntersectionResult:
        """
        Dispatches an intersection query on the kinds of both shapes.

        Args:
            shape_a: First operand.
            shape_b: Second operand.

        Returns:
            (hit, points) from the registered handler, or (False, []) when no
            handler exists for the pair in either order.
        """
        handler = self._intersections.get((shape_a.kind, shape_b.kind))
        if handler is not None:
            return handler(shape_a, shape_b)

        handler = self._intersections.get((shape_b.kind, shape_a.kind))
        if handler is not None:
            return handler(shape_b, shape_a)

        logger.debug(f"No intersection handler for ({shape_a.kind}, {shape_b.kind})")
        return False, []

    def has_intersection(self, shape_a: Shape, shape_b: Shape) -> bool:
        handler = self._has_intersections.get((shape_a.kind, shape_b.kind))
        if handler is not None:
            return handler(shape_a, shape_b)

        handler = self._has_intersections.get((shape_b.kind, shape_a.kind))
        if handler is not None:
            return handler(shape_b, shape_a)

        logger.debug(f"No has-intersection handler for ({shape_a.kind}, {shape_b.kind})")
        return False

    # --------------------------------------------------------------------------
    # Coverage audit
    # --------------------------------------------------------------------------
    def find_missing_pairs(self) -> CoverageReport:
        """Lists every unordered pair of shape kinds missing from either table."""
        report = CoverageReport()
        for first, second in combinations_with_replacement(ShapeKind, 2):
            if (first, second) not in self._intersections and (second, first) not in self._intersections:
                report.missing_intersections.append((first, second))
            if (first, second) not in self._has_intersections and (second, first) not in self._has_intersections:
                report.missing_has_intersections.append((first, second))
        return report

    def check_missing_intersections(self) -> CoverageReport:
        """Runs the coverage audit and logs its outcome."""
        report = self.find_missing_pairs()
        for first, second in report.missing_intersections:
            logger.warning(f"Missing intersection handler: ({first}, {second})")
        for first, second in report.missing_has_intersections:
            logger.warning(f"Missing has-intersection handler: ({first}, {second})")
        if report.is_complete:
            logger.debug(
                f"Intersection registry complete: {len(self._intersections)} intersection and "
                f"{len(self._has_intersections)} has-intersection handlers"
            )
        return report
