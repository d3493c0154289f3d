from geokernel.triangulation.delaunay import (
    create_super_triangle,
    delaunay_triangulation,
    point_in_circumcircle,
    triangulate_polygon,
)

__all__ = [
    "create_super_triangle",
    "delaunay_triangulation",
    "point_in_circumcircle",
    "triangulate_polygon",
]
