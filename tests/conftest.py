import pytest

from geokernel import (
    BezierCurve,
    Circle,
    Ellipse,
    Line,
    Polygon,
    Ray,
    Rectangle,
    Sector,
    Segment,
    Triangle,
    Vector2,
)


def build_sample_shapes():
    """One shape of every 2D kind, arranged so that most pairs overlap."""
    return [
        Line.create(Vector2(0, 0.5), Vector2(1, 0)),
        Ray.create(Vector2(-1, -1.5), Vector2(1, 1)),
        Segment.create(Vector2(-3, 1), Vector2(3, -1.2)),
        Circle.create(Vector2(1, 1), 2),
        Ellipse.create(Vector2(0, 0), 3, 1.5, Vector2(1, 1)),
        Sector.create(Vector2(0.2, -0.3), 2.5, Vector2(1, 0.2), 0.3),
        Rectangle.create(Vector2(0.5, 0), 4, 2, Vector2(1, 0.5)),
        Triangle.create(Vector2(-2, -1), Vector2(2, -1.3), Vector2(0.3, 3)),
        Polygon.create([Vector2(-1, -2), Vector2(3, -1), Vector2(2, 2), Vector2(0.5, 0.7), Vector2(-1.5, 2)]),
        BezierCurve.create_cubic(Vector2(-3, 0.2), Vector2(-1, 4), Vector2(1, -4), Vector2(3, 0.3)),
    ]


@pytest.fixture
def sample_shapes():
    return build_sample_shapes()
