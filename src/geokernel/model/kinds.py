"""Shape kind tags used for intersection dispatch."""
from enum import StrEnum


class ShapeKind(StrEnum):
    """Closed set of 2D shape variants. The declaration order is the canonical pair order."""
    BEZIER_CURVE = "bezier_curve"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    SECTOR = "sector"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    LINE = "line"
    RAY = "ray"
    CIRCLE = "circle"
    SEGMENT = "segment"
