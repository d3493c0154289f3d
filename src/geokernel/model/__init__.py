"""
The MODEL layer contains the shape value types and the geometric predicates
they share. It has NO knowledge of intersection dispatch beyond delegating
`intersects` / `has_intersection` to the default registry.
"""
from geokernel.model.vector import Vector2, Vector3
from geokernel.model.kinds import ShapeKind
from geokernel.model.shape import ClosedShape, ImmutableFieldError, Shape, ShapeConstructionError
from geokernel.model.line import Line
from geokernel.model.ray import Ray
from geokernel.model.segment import Segment
from geokernel.model.circle import Circle
from geokernel.model.ellipse import Ellipse
from geokernel.model.sector import Sector
from geokernel.model.rectangle import Rectangle
from geokernel.model.triangle import Triangle
from geokernel.model.polygon import Polygon
from geokernel.model.bezier import BezierCurve
from geokernel.model.bezier3d import BezierCurve3D

__all__ = [
    "BezierCurve",
    "BezierCurve3D",
    "Circle",
    "ClosedShape",
    "Ellipse",
    "ImmutableFieldError",
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
]
