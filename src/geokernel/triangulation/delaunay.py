"""
Delaunay Triangulation (Bowyer-Watson)
======================================
Triangulates the vertices of a simple polygon and keeps only the triangles
that lie inside it.

Algorithm
---------
1. Enclose all vertices in a large super-triangle built from their bounding
   box.
2. Insert the vertices one at a time, in input order. The triangles whose
   circumcircle strictly contains the new vertex are removed; the boundary of
   the resulting cavity (edges not shared by two removed triangles) is
   re-triangulated by connecting each edge to the new vertex.
3. Triangles that reference a super-triangle vertex are discarded.
4. A triangle is kept only when the midpoint of each of its edges and its
   centroid lie in the polygon; this drops triangles bridging concave
   notches. The clip runs after insertion so that the cavity re-triangulation
   never loses area the polygon covers.

The cost is quadratic in the number of vertices. Collinear triples have an
infinite circumradius and are never considered to contain a vertex.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING
import logging

from geokernel.config import EPSILON, SUPER_TRIANGLE_SCALE
from geokernel.model.predicates import points_aabb
from geokernel.model.triangle import Triangle, circumcircle
from geokernel.model.vector import Vector2

if TYPE_CHECKING:
    from geokernel.model.polygon import Polygon

logger = logging.getLogger(__name__)

Edge = Tuple[Vector2, Vector2]


def point_in_circumcircle(point: Vector2, center: Optional[Vector2], radius: float) -> bool:
    """Strict containment, with an EPSILON margin so cocircular points stay outside."""
    if center is None:
        return False
    return (point - center).length() < radius - EPSILON


def create_super_triangle(points: Sequence[Vector2]) -> Tuple[Vector2, Vector2, Vector2]:
    """A triangle that comfortably encloses every point."""
    min_x, max_x, min_y, max_y = points_aabb(points)
    d_max = max(max_x - min_x, max_y - min_y)
    mid_x = (min_x + max_x) / 2
    mid_y = (min_y + max_y) / 2
    scale = SUPER_TRIANGLE_SCALE
    return (
        Vector2(mid_x - scale * d_max, mid_y - d_max),
        Vector2(mid_x, mid_y + scale * d_max),
        Vector2(mid_x + scale * d_max, mid_y - d_max),
    )


def _same_edge(first: Edge, second: Edge) -> bool:
    return (first[0] == second[0] and first[1] == second[1]) or (first[0] == second[1] and first[1] == second[0])


def _cavity_boundary(bad_triangles: List[Triangle]) -> List[Edge]:
    edges: List[Edge] = []
    for triangle in bad_triangles:
        edges.extend([
            (triangle.point1, triangle.point2),
            (triangle.point2, triangle.point3),
            (triangle.point3, triangle.point1),
        ])
    return [
        edge for i, edge in enumerate(edges)
        if not any(_same_edge(edge, other) for j, other in enumerate(edges) if i != j)
    ]


def _inside_polygon(triangle: Triangle, polygon: Polygon) -> bool:
    midpoints = [edge.midpoint() for edge in triangle.get_edges()]
    return all(polygon.contains(point) for point in midpoints) and polygon.contains(triangle.centroid())


def delaunay_triangulation(points: Sequence[Vector2], polygon: Polygon) -> List[Triangle]:
    """
    Bowyer-Watson triangulation of ``points`` clipped to ``polygon``.

    Args:
        points: Vertices to triangulate, inserted in the given order.
        polygon: Region the resulting triangles must lie in.

    Returns:
        Unordered list of triangles; empty when fewer than 3 points are given.
    """
    if len(points) < 3:
        return []

    super_vertices = create_super_triangle(points)
    triangles: List[Triangle] = [Triangle(*super_vertices)]

    def touches_super(vertex: Vector2) -> bool:
        return any(vertex == super_vertex for super_vertex in super_vertices)

    for point in points:
        bad_triangles = [
            triangle for triangle in triangles
            if point_in_circumcircle(point, *circumcircle(triangle.point1, triangle.point2, triangle.point3))
        ]
        bad_ids = {id(triangle) for triangle in bad_triangles}
        boundary = _cavity_boundary(bad_triangles)
        triangles = [triangle for triangle in triangles if id(triangle) not in bad_ids]

        triangles.extend(Triangle(start, end, point) for start, end in boundary)

    result = [
        triangle for triangle in triangles
        if not any(touches_super(vertex) for vertex in triangle.points)
    ]
    result = [triangle for triangle in result if _inside_polygon(triangle, polygon)]
    logger.debug(f"Triangulated {len(points)} vertices into {len(result)} triangles")
    return result


def triangulate_polygon(polygon: Polygon) -> List[Triangle]:
    return delaunay_triangulation(polygon.points, polygon)
