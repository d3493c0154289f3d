"""
Boundary Decomposition
======================
Every 2D shape is reduced to a list of boundary pieces of four primitive
types, and all pairwise crossing computations are written against those
primitives:

* ``LinearPiece``  - origin + t * direction for t in [t_min, t_max]
  (lines, rays, segments, polygon / rectangle / triangle edges, sector radii)
* ``ArcPiece``     - circular arc (circles, sector arcs)
* ``EllipsePiece`` - full ellipse
* ``CurvePiece``   - bezier curve

Linear / linear, linear / arc, linear / ellipse and arc / arc crossings are
solved in closed form. Crossings involving an ellipse or a bezier curve are
found by sampling one piece's parameter against the other piece's implicit
function and refining each sign change with Brent's method; curve / curve
crossings are polished with a two-parameter Newton iteration. Tangential
contacts of curved pieces that do not change sign are not reported.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

import numpy as np

from geokernel.config import CURVE_SAMPLES, EPSILON, NEWTON_ITERATIONS
from geokernel.model.bezier import BezierCurve
from geokernel.model.ellipse import Ellipse
from geokernel.model.kinds import ShapeKind
from geokernel.model.line import INF
from geokernel.model.numeric import find_roots
from geokernel.model.predicates import iter_edges
from geokernel.model.sector import TWO_PI, normalize_angle
from geokernel.model.shape import Shape
from geokernel.model.vector import Vector2


# ------------------------------------------------------------------------------
# Pieces
# ------------------------------------------------------------------------------
@dataclass
class LinearPiece:
    origin: Vector2
    direction: Vector2
    t_min: float
    t_max: float

    @property
    def is_degenerate(self) -> bool:
        return self.direction.length() <= EPSILON

    def point_at(self, t: float) -> Vector2:
        return self.origin + self.direction * t

    def parameter_of(self, point: Vector2) -> float:
        return (point - self.origin).dot(self.direction) / self.direction.length_squared()

    def accepts_parameter(self, t: float, tolerance: float = EPSILON) -> bool:
        slack = tolerance / self.direction.length()
        return self.t_min - slack <= t <= self.t_max + slack

    def clamp_parameter(self, t: float) -> float:
        return min(self.t_max, max(self.t_min, t))

    def signed_distance(self, point: Vector2) -> float:
        return self.direction.cross(point - self.origin) / self.direction.length()


@dataclass
class ArcPiece:
    center: Vector2
    radius: float
    start: float
    span: float

    @property
    def is_full(self) -> bool:
        return self.span >= TWO_PI

    def signed_distance(self, point: Vector2) -> float:
        return (point - self.center).length() - self.radius

    def accepts(self, point: Vector2, tolerance: float = EPSILON) -> bool:
        if self.is_full:
            return True
        offset = point - self.center
        if offset.length() <= EPSILON:
            return True
        slack = tolerance / max(self.radius, EPSILON)
        relative = normalize_angle(offset.angle(), self.start) - self.start
        return relative <= self.span + slack or relative >= TWO_PI - slack


@dataclass
class EllipsePiece:
    ellipse: Ellipse


@dataclass
class CurvePiece:
    curve: BezierCurve


Piece = Union[LinearPiece, ArcPiece, EllipsePiece, CurvePiece]


def _edge_pieces(vertices: List[Vector2]) -> List[Piece]:
    pieces: List[Piece] = []
    for a, b in iter_edges(vertices):
        piece = LinearPiece(a, b - a, 0.0, 1.0)
        if not piece.is_degenerate:
            pieces.append(piece)
    return pieces


def boundary_pieces(shape: Shape) -> List[Piece]:
    """Decomposes a shape's boundary (or the curve itself) into primitive pieces."""
    match shape.kind:
        case ShapeKind.LINE:
            return [LinearPiece(shape.point, shape.direction, -INF, INF)]
        case ShapeKind.RAY:
            return [LinearPiece(shape.point, shape.direction, 0.0, INF)]
        case ShapeKind.SEGMENT:
            piece = LinearPiece(shape.point1, shape.to_vector2(), 0.0, 1.0)
            return [] if piece.is_degenerate else [piece]
        case ShapeKind.CIRCLE:
            return [ArcPiece(shape.center, shape.radius, 0.0, TWO_PI)]
        case ShapeKind.ELLIPSE:
            return [EllipsePiece(shape)]
        case ShapeKind.SECTOR:
            pieces: List[Piece] = [ArcPiece(shape.center, shape.radius, shape.get_start_angle(), shape.get_span())]
            for edge in shape.get_edges():
                piece = LinearPiece(edge.point1, edge.to_vector2(), 0.0, 1.0)
                if not piece.is_degenerate:
                    pieces.append(piece)
            return pieces
        case ShapeKind.RECTANGLE | ShapeKind.TRIANGLE | ShapeKind.POLYGON:
            return _edge_pieces(shape.get_defining_points())
        case ShapeKind.BEZIER_CURVE:
            return [CurvePiece(shape)]
    raise ValueError(f"Unsupported shape kind: {shape.kind}")


def anchor_point(shape: Shape) -> Vector2:
    """A point guaranteed to lie on the shape, used for nested-containment tests."""
    defining = shape.get_defining_points()
    if defining:
        return defining[0]
    match shape.kind:
        case ShapeKind.CIRCLE | ShapeKind.ELLIPSE:
            return shape.get_point(0.0)
    return shape.get_center()


# ------------------------------------------------------------------------------
# Closed-form crossings
# ------------------------------------------------------------------------------
def linear_linear(a: LinearPiece, b: LinearPiece) -> List[Vector2]:
    """
    Crossing of two linear pieces.

    Collinear pieces report the finite endpoints of their overlap; two
    coincident infinite lines report the foot of the origin on the line.
    """
    if a.is_degenerate or b.is_degenerate:
        return []
    len_a = a.direction.length()
    len_b = b.direction.length()
    w = b.origin - a.origin
    denom = a.direction.cross(b.direction)

    if abs(denom) <= EPSILON * len_a * len_b:
        if abs(w.cross(a.direction)) > EPSILON * len_a:
            return []
        return _collinear_overlap(a, b, w)

    t = w.cross(b.direction) / denom
    u = w.cross(a.direction) / denom
    if a.accepts_parameter(t) and b.accepts_parameter(u):
        return [a.point_at(a.clamp_parameter(t))]
    return []


def _collinear_overlap(a: LinearPiece, b: LinearPiece, w: Vector2) -> List[Vector2]:
    length_sq = a.direction.length_squared()
    ratio = b.direction.dot(a.direction) / length_sq
    offset = w.dot(a.direction) / length_sq
    b_lo = offset + ratio * b.t_min
    b_hi = offset + ratio * b.t_max
    if b_lo > b_hi:
        b_lo, b_hi = b_hi, b_lo

    lo = max(a.t_min, b_lo)
    hi = min(a.t_max, b_hi)
    slack = EPSILON / math.sqrt(length_sq)
    if lo > hi + slack:
        return []
    if math.isinf(lo) and math.isinf(hi):
        return [a.point_at(-a.origin.dot(a.direction) / length_sq)]
    if math.isfinite(lo) and math.isfinite(hi) and hi - lo <= slack:
        return [a.point_at(lo)]
    return [a.point_at(t) for t in (lo, hi) if math.isfinite(t)]


def _quadratic_roots(half_b: float, c: float, tolerance: float) -> List[float]:
    """Roots of t^2 + 2 * half_b * t + c = 0; a near-zero discriminant gives one root."""
    disc = half_b * half_b - c
    if disc < -tolerance:
        return []
    if disc <= tolerance:
        return [-half_b]
    root = math.sqrt(disc)
    return [-half_b - root, -half_b + root]


def linear_arc(a: LinearPiece, arc: ArcPiece) -> List[Vector2]:
    if a.is_degenerate:
        return []
    length = a.direction.length()
    unit = a.direction / length
    w = a.origin - arc.center
    tolerance = 2.0 * arc.radius * EPSILON + EPSILON * EPSILON
    points = []
    for s in _quadratic_roots(w.dot(unit), w.length_squared() - arc.radius ** 2, tolerance):
        t = s / length
        if not a.accepts_parameter(t):
            continue
        point = a.point_at(a.clamp_parameter(t))
        if arc.accepts(point):
            points.append(point)
    return points


def linear_ellipse(a: LinearPiece, piece: EllipsePiece) -> List[Vector2]:
    # The affine map onto the unit circle preserves the line parameter
    if a.is_degenerate:
        return []
    ellipse = piece.ellipse
    origin = ellipse.to_local(a.origin)
    origin = Vector2(origin.x / ellipse.rx, origin.y / ellipse.ry)
    normal = ellipse.direction.perpendicular()
    direction = Vector2(
        a.direction.dot(ellipse.direction) / ellipse.rx,
        a.direction.dot(normal) / ellipse.ry,
    )
    a_coef = direction.length_squared()
    points = []
    for t in _quadratic_roots(origin.dot(direction) / a_coef, (origin.length_squared() - 1.0) / a_coef, EPSILON):
        if a.accepts_parameter(t):
            points.append(a.point_at(a.clamp_parameter(t)))
    return points


def arc_arc(a: ArcPiece, b: ArcPiece) -> List[Vector2]:
    offset = b.center - a.center
    distance = offset.length()
    if distance <= EPSILON:
        if abs(a.radius - b.radius) > EPSILON:
            return []
        # Same circle: overlapping arcs meet at their endpoints
        points = []
        for arc, other in ((a, b), (b, a)):
            if arc.is_full:
                continue
            for angle in (arc.start, arc.start + arc.span):
                point = arc.center + Vector2.create_from_rad(angle, arc.radius)
                if other.accepts(point):
                    points.append(point)
        return points

    if distance > a.radius + b.radius + EPSILON or distance < abs(a.radius - b.radius) - EPSILON:
        return []

    along = (a.radius ** 2 - b.radius ** 2 + distance ** 2) / (2.0 * distance)
    height_sq = a.radius ** 2 - along ** 2
    unit = offset / distance
    base = a.center + unit * along
    if height_sq <= 2.0 * a.radius * EPSILON:
        candidates = [base]
    else:
        height = math.sqrt(height_sq)
        candidates = [base + unit.perpendicular() * height, base - unit.perpendicular() * height]
    return [point for point in candidates if a.accepts(point) and b.accepts(point)]


# ------------------------------------------------------------------------------
# Numeric crossings
# ------------------------------------------------------------------------------
def linear_curve(a: LinearPiece, piece: CurvePiece) -> List[Vector2]:
    if a.is_degenerate:
        return []
    curve = piece.curve
    points = []
    for s in find_roots(lambda s: a.signed_distance(curve.get_point(s)), 0.0, 1.0):
        point = curve.get_point(s)
        if a.accepts_parameter(a.parameter_of(point)):
            points.append(point)
    return points


def arc_ellipse(arc: ArcPiece, piece: EllipsePiece) -> List[Vector2]:
    ellipse = piece.ellipse
    points = []
    for theta in find_roots(lambda theta: arc.signed_distance(ellipse.get_point(theta)), 0.0, TWO_PI):
        point = ellipse.get_point(theta)
        if arc.accepts(point):
            points.append(point)
    return points


def arc_curve(arc: ArcPiece, piece: CurvePiece) -> List[Vector2]:
    curve = piece.curve
    points = []
    for s in find_roots(lambda s: arc.signed_distance(curve.get_point(s)), 0.0, 1.0):
        point = curve.get_point(s)
        if arc.accepts(point):
            points.append(point)
    return points


def ellipse_ellipse(a: EllipsePiece, b: EllipsePiece) -> List[Vector2]:
    thetas = find_roots(lambda theta: b.ellipse.implicit_value(a.ellipse.get_point(theta)), 0.0, TWO_PI)
    return [a.ellipse.get_point(theta) for theta in thetas]


def ellipse_curve(piece: EllipsePiece, curve_piece: CurvePiece) -> List[Vector2]:
    curve = curve_piece.curve
    parameters = find_roots(lambda s: piece.ellipse.implicit_value(curve.get_point(s)), 0.0, 1.0)
    return [curve.get_point(s) for s in parameters]


def refine_curve_pair(a: BezierCurve, b: BezierCurve, t: float, s: float) -> Optional[Tuple[float, float]]:
    """
    Newton iteration on A(t) - B(s) = 0.

    Returns:
        The refined (t, s), or None when the iteration does not converge.
    """
    for _ in range(NEWTON_ITERATIONS):
        diff = a.get_point(t) - b.get_point(s)
        if diff.length() <= EPSILON * 1e-4:
            break
        da = a.get_derivative(t)
        db = -b.get_derivative(s)
        det = da.cross(db)
        if abs(det) <= EPSILON * EPSILON:
            break
        rhs = -diff
        t = min(1.0, max(0.0, t + rhs.cross(db) / det))
        s = min(1.0, max(0.0, s + da.cross(rhs) / det))

    if (a.get_point(t) - b.get_point(s)).length() <= EPSILON:
        return t, s
    return None


def curve_curve(a: CurvePiece, b: CurvePiece, segments: int = CURVE_SAMPLES // 2) -> List[Vector2]:
    """Flattens A into chords, brackets B against each chord, then polishes on both curves."""
    ts = np.linspace(0.0, 1.0, segments + 1)
    samples = [a.curve.get_point(float(t)) for t in ts]
    points = []
    for i in range(segments):
        chord = LinearPiece(samples[i], samples[i + 1] - samples[i], 0.0, 1.0)
        if chord.is_degenerate:
            continue
        for s in find_roots(lambda s: chord.signed_distance(b.curve.get_point(s)), 0.0, 1.0):
            u = chord.parameter_of(b.curve.get_point(s))
            if not chord.accepts_parameter(u):
                continue
            t0 = float(ts[i] + min(1.0, max(0.0, u)) * (ts[i + 1] - ts[i]))
            refined = refine_curve_pair(a.curve, b.curve, t0, s)
            if refined is not None:
                points.append(a.curve.get_point(refined[0]))
    return points


# ------------------------------------------------------------------------------
# Dispatch on piece types
# ------------------------------------------------------------------------------
def intersect_pieces(a: Piece, b: Piece) -> List[Vector2]:
    """Crossing points of two boundary pieces, computed in A's parameterization where possible."""
    match a, b:
        case LinearPiece(), LinearPiece():
            return linear_linear(a, b)
        case LinearPiece(), ArcPiece():
            return linear_arc(a, b)
        case LinearPiece(), EllipsePiece():
            return linear_ellipse(a, b)
        case LinearPiece(), CurvePiece():
            return linear_curve(a, b)
        case ArcPiece(), ArcPiece():
            return arc_arc(a, b)
        case ArcPiece(), EllipsePiece():
            return arc_ellipse(a, b)
        case ArcPiece(), CurvePiece():
            return arc_curve(a, b)
        case EllipsePiece(), EllipsePiece():
            return ellipse_ellipse(a, b)
        case EllipsePiece(), CurvePiece():
            return ellipse_curve(a, b)
        case CurvePiece(), CurvePiece():
            return curve_curve(a, b)
    return intersect_pieces(b, a)
