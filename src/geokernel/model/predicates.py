"""
Shared geometric predicates.

Pure functions over Vector2 sequences. The closed polygonal shapes
(Polygon, Rectangle, Triangle) and the Delaunay triangulation build their
containment and closest-point queries from these.
"""
from __future__ import annotations
from typing import List, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from geokernel.config import EPSILON
from geokernel.model.vector import Vector2

if TYPE_CHECKING:
    import numpy.typing as npt


def points_to_array(points: Sequence[Vector2]) -> npt.NDArray[np.float64]:
    """Stacks points into an (N, 2) array."""
    return np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)


def points_aabb(points: Sequence[Vector2]) -> Tuple[float, float, float, float]:
    """Returns (min_x, max_x, min_y, max_y) of a non-empty point sequence."""
    coords = points_to_array(points)
    return (
        float(coords[:, 0].min()), float(coords[:, 0].max()),
        float(coords[:, 1].min()), float(coords[:, 1].max()),
    )


def polygon_signed_area(vertices: Sequence[Vector2]) -> float:
    """
    Shoelace area. Positive for counter-clockwise vertex order.
    """
    coords = points_to_array(vertices)
    x = coords[:, 0]
    y = coords[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def point_in_polygon(point: Vector2, vertices: Sequence[Vector2]) -> bool:
    """
    Determine if a point is strictly inside a polygon using ray casting.

    Cast a horizontal ray to +x and count the edges it crosses: odd count
    means inside. Points exactly on the boundary may go either way; callers
    that need boundary inclusion combine this with ``point_on_edges``.
    """
    num_vertices = len(vertices)
    if num_vertices < 3:
        return False

    inside = False
    j = num_vertices - 1
    for i in range(num_vertices):
        p_i = vertices[i]
        p_j = vertices[j]
        if (p_i.y > point.y) != (p_j.y > point.y):
            x_cross = (p_j.x - p_i.x) * (point.y - p_i.y) / (p_j.y - p_i.y) + p_i.x
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def closest_point_on_segment(point: Vector2, a: Vector2, b: Vector2) -> Vector2:
    ab = b - a
    length_sq = ab.length_squared()
    if length_sq <= EPSILON * EPSILON:
        return a.clone()
    t = (point - a).dot(ab) / length_sq
    t = min(1.0, max(0.0, t))
    return a + ab * t


def point_on_segment(point: Vector2, a: Vector2, b: Vector2, tolerance: float = EPSILON) -> bool:
    return (point - closest_point_on_segment(point, a, b)).length() <= tolerance


def iter_edges(vertices: Sequence[Vector2]) -> List[Tuple[Vector2, Vector2]]:
    """Cyclic edge list (v0, v1), (v1, v2), ..., (vn-1, v0)."""
    count = len(vertices)
    return [(vertices[i], vertices[(i + 1) % count]) for i in range(count)]


def point_on_edges(point: Vector2, vertices: Sequence[Vector2], tolerance: float = EPSILON) -> bool:
    return any(point_on_segment(point, a, b, tolerance) for a, b in iter_edges(vertices))


def closest_point_on_edges(point: Vector2, vertices: Sequence[Vector2]) -> Vector2:
    """Closest point on the closed boundary through the given vertices."""
    best = vertices[0].clone()
    best_distance = float("inf")
    for a, b in iter_edges(vertices):
        candidate = closest_point_on_segment(point, a, b)
        distance = (point - candidate).length()
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best


def polygon_contains(point: Vector2, vertices: Sequence[Vector2], tolerance: float = EPSILON) -> bool:
    """Interior test combined with an explicit boundary re-check."""
    return point_in_polygon(point, vertices) or point_on_edges(point, vertices, tolerance)


def aabbs_overlap(
    first: Tuple[float, float, float, float],
    second: Tuple[float, float, float, float],
    tolerance: float = EPSILON,
) -> bool:
    """Overlap test of two (min_x, max_x, min_y, max_y) boxes; infinite bounds are allowed."""
    return not (
        first[1] < second[0] - tolerance
        or second[1] < first[0] - tolerance
        or first[3] < second[2] - tolerance
        or second[3] < first[2] - tolerance
    )
