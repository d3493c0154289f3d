"""
geokernel: 2D/3D shape value types, pairwise intersection dispatch and
Delaunay polygon triangulation.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from geokernel.model import (
    BezierCurve,
    BezierCurve3D,
    Circle,
    ClosedShape,
    Ellipse,
    ImmutableFieldError,
    Line,
    Polygon,
    Ray,
    Rectangle,
    Sector,
    Segment,
    Shape,
    ShapeConstructionError,
    ShapeKind,
    Triangle,
    Vector2,
    Vector3,
)
from geokernel.intersection import (
    DEFAULT_REGISTRY,
    IntersectionRegistry,
    get_unique_points,
    has_intersection,
    intersect,
)
from geokernel.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "BezierCurve",
    "BezierCurve3D",
    "Circle",
    "ClosedShape",
    "DEFAULT_REGISTRY",
    "Ellipse",
    "ImmutableFieldError",
    "IntersectionRegistry",
    "Line",
    "Polygon",
    "Ray",
    "Rectangle",
    "Sector",
    "Segment",
    "Shape",
    "ShapeConstructionError",
    "ShapeKind",
    "Triangle",
    "Vector2",
    "Vector3",
    "get_unique_points",
    "has_intersection",
    "intersect",
    "setup_logging",
]
