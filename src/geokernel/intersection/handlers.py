"""
Pairwise intersection handlers and their default registration.

The point-producing handlers share one definition of contact: the boundary
crossings of the two shapes, plus every defining vertex of either shape that
lies inside (or, for open shapes, on) the other. When no contact point
exists, two shapes still intersect if one encloses the other.

Boolean handlers answer the same question with cheaper checks and always
agree with the point-producing handler of the pair.
"""
from __future__ import annotations
from typing import Dict, List, TYPE_CHECKING

from geokernel.config import EPSILON
from geokernel.intersection.boundary import (
    ArcPiece,
    LinearPiece,
    anchor_point,
    arc_arc,
    boundary_pieces,
    intersect_pieces,
    linear_arc,
    linear_linear,
)
from geokernel.intersection.registry import (
    HasIntersectionHandler,
    IntersectionHandler,
    IntersectionRegistry,
    IntersectionResult,
    KindPair,
    get_unique_points,
)
from geokernel.model.kinds import ShapeKind
from geokernel.model.predicates import aabbs_overlap
from geokernel.model.sector import TWO_PI
from geokernel.model.vector import Vector2

if TYPE_CHECKING:
    from geokernel.model.circle import Circle
    from geokernel.model.line import Line
    from geokernel.model.shape import Shape


# ------------------------------------------------------------------------------
# Shared predicates
# ------------------------------------------------------------------------------
def covers(shape: Shape, point: Vector2) -> bool:
    """Area shapes cover their interior and boundary; open shapes only themselves."""
    if shape.is_closed:
        return shape.contains(point)
    return shape.contains_point(point)


def is_nested(outer: Shape, inner: Shape) -> bool:
    return outer.is_closed and outer.contains(anchor_point(inner))


def vertex_contacts(a: Shape, b: Shape) -> List[Vector2]:
    points = [point.clone() for point in a.get_defining_points() if covers(b, point)]
    points.extend(point.clone() for point in b.get_defining_points() if covers(a, point))
    return points


# ------------------------------------------------------------------------------
# Generic boundary handlers
# ------------------------------------------------------------------------------
def boundary_intersection(a: Shape, b: Shape) -> IntersectionResult:
    points: List[Vector2] = []
    for piece_a in boundary_pieces(a):
        for piece_b in boundary_pieces(b):
            points.extend(intersect_pieces(piece_a, piece_b))
    points.extend(vertex_contacts(a, b))

    unique = get_unique_points(points)
    if unique:
        return True, unique
    return is_nested(a, b) or is_nested(b, a), []


def boundary_has_intersection(a: Shape, b: Shape) -> bool:
    if not aabbs_overlap(a.aabb(), b.aabb()):
        return False
    if any(covers(b, point) for point in a.get_defining_points()):
        return True
    if any(covers(a, point) for point in b.get_defining_points()):
        return True
    for piece_a in boundary_pieces(a):
        for piece_b in boundary_pieces(b):
            if intersect_pieces(piece_a, piece_b):
                return True
    return is_nested(a, b) or is_nested(b, a)


# ------------------------------------------------------------------------------
# Linear shapes (line, ray, segment)
# ------------------------------------------------------------------------------
def _linear_piece(shape: Shape) -> LinearPiece:
    pieces = boundary_pieces(shape)
    if pieces:
        return pieces[0]
    # Zero-length segment
    return LinearPiece(shape.get_center(), Vector2(), 0.0, 0.0)


def linear_to_linear(a: Shape, b: Shape) -> IntersectionResult:
    points = linear_linear(_linear_piece(a), _linear_piece(b))
    points.extend(vertex_contacts(a, b))
    unique = get_unique_points(points)
    return bool(unique), unique


def line_has_intersection_with_line(a: Line, b: Line) -> bool:
    if abs(a.direction.cross(b.direction)) > EPSILON:
        return True
    return a.contains_point(b.point)


def linear_has_intersection(a: Shape, b: Shape) -> bool:
    if not aabbs_overlap(a.aabb(), b.aabb()):
        return False
    return linear_to_linear(a, b)[0]


# ------------------------------------------------------------------------------
# Circles
# ------------------------------------------------------------------------------
def _full_arc(circle: Circle) -> ArcPiece:
    return ArcPiece(circle.center, circle.radius, 0.0, TWO_PI)


def circle_to_circle(a: Circle, b: Circle) -> IntersectionResult:
    points = get_unique_points(arc_arc(_full_arc(a), _full_arc(b)))
    if points:
        return True, points
    distance = (b.center - a.center).length()
    nested = distance + min(a.radius, b.radius) <= max(a.radius, b.radius) + EPSILON
    return nested, []


def circle_has_intersection_with_circle(a: Circle, b: Circle) -> bool:
    return (b.center - a.center).length() <= a.radius + b.radius + EPSILON


def linear_to_circle(linear: Shape, circle: Circle) -> IntersectionResult:
    points: List[Vector2] = []
    piece = _linear_piece(linear)
    if not piece.is_degenerate:
        points.extend(linear_arc(piece, _full_arc(circle)))
    points.extend(point.clone() for point in linear.get_defining_points() if circle.contains(point))
    unique = get_unique_points(points)
    return bool(unique), unique


def circle_to_linear(circle: Circle, linear: Shape) -> IntersectionResult:
    return linear_to_circle(linear, circle)


def linear_has_intersection_with_circle(linear: Shape, circle: Circle) -> bool:
    return linear.distance_to_point(circle.center) <= circle.radius + EPSILON


def circle_has_intersection_with_linear(circle: Circle, linear: Shape) -> bool:
    return linear_has_intersection_with_circle(linear, circle)


# ------------------------------------------------------------------------------
# Registration
# ------------------------------------------------------------------------------
INTERSECTION_HANDLERS: Dict[KindPair, IntersectionHandler] = {
    (ShapeKind.LINE, ShapeKind.LINE): linear_to_linear,
    (ShapeKind.LINE, ShapeKind.RAY): linear_to_linear,
    (ShapeKind.LINE, ShapeKind.SEGMENT): linear_to_linear,
    (ShapeKind.RAY, ShapeKind.RAY): linear_to_linear,
    (ShapeKind.RAY, ShapeKind.SEGMENT): linear_to_linear,
    (ShapeKind.SEGMENT, ShapeKind.SEGMENT): linear_to_linear,
    (ShapeKind.LINE, ShapeKind.CIRCLE): linear_to_circle,
    (ShapeKind.RAY, ShapeKind.CIRCLE): linear_to_circle,
    (ShapeKind.CIRCLE, ShapeKind.SEGMENT): circle_to_linear,
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE): circle_to_circle,
}

HAS_INTERSECTION_HANDLERS: Dict[KindPair, HasIntersectionHandler] = {
    (ShapeKind.LINE, ShapeKind.LINE): line_has_intersection_with_line,
    (ShapeKind.LINE, ShapeKind.RAY): linear_has_intersection,
    (ShapeKind.LINE, ShapeKind.SEGMENT): linear_has_intersection,
    (ShapeKind.RAY, ShapeKind.RAY): linear_has_intersection,
    (ShapeKind.RAY, ShapeKind.SEGMENT): linear_has_intersection,
    (ShapeKind.SEGMENT, ShapeKind.SEGMENT): linear_has_intersection,
    (ShapeKind.LINE, ShapeKind.CIRCLE): linear_has_intersection_with_circle,
    (ShapeKind.RAY, ShapeKind.CIRCLE): linear_has_intersection_with_circle,
    (ShapeKind.CIRCLE, ShapeKind.SEGMENT): circle_has_intersection_with_linear,
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE): circle_has_intersection_with_circle,
}


def canonical_pairs() -> List[KindPair]:
    """Every unordered kind pair once, ordered by the ShapeKind declaration order."""
    kinds = list(ShapeKind)
    return [(first, second) for i, first in enumerate(kinds) for second in kinds[i:]]


def register_default_handlers(registry: IntersectionRegistry) -> None:
    """Fills both tables of ``registry`` for every pair of 2D shape kinds."""
    for first, second in canonical_pairs():
        registry.register_intersection(
            first, second, INTERSECTION_HANDLERS.get((first, second), boundary_intersection)
        )
    for first, second in canonical_pairs():
        registry.register_has_intersection(
            first, second, HAS_INTERSECTION_HANDLERS.get((first, second), boundary_has_intersection)
        )
