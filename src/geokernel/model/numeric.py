"""
Numeric helpers for curved shapes.

Curves without closed-form answers (ellipses, bezier curves) are handled by
sampling the parameter range to bracket a solution and refining the bracket
with ``scipy.optimize.brentq``.
"""
from __future__ import annotations
from typing import Callable, List
import logging

import numpy as np
import scipy as sp

from geokernel.config import CURVE_SAMPLES, EPSILON, ROOT_XTOL
from geokernel.model.vector import Vector2

logger = logging.getLogger(__name__)

ParametricFunc = Callable[[float], Vector2]


def find_roots(
    func: Callable[[float], float],
    t_min: float,
    t_max: float,
    samples: int = CURVE_SAMPLES,
    tolerance: float = EPSILON,
) -> List[float]:
    """
    Finds the roots of a scalar function on [t_min, t_max].

    Samples that already evaluate within ``tolerance`` of zero are roots;
    every other interval with a sign change is refined with Brent's method.
    Roots of even multiplicity (touching without a sign change) are only
    found when a sample lands on them.

    Returns:
        Root parameters in increasing order.
    """
    ts = np.linspace(t_min, t_max, samples + 1)
    values = np.array([func(float(t)) for t in ts])
    hits = np.abs(values) <= tolerance

    roots: List[float] = []
    for i in range(samples + 1):
        if hits[i]:
            roots.append(float(ts[i]))
        if i < samples and not hits[i] and not hits[i + 1] and values[i] * values[i + 1] < 0:
            roots.append(float(sp.optimize.brentq(func, ts[i], ts[i + 1], xtol=ROOT_XTOL)))
    return roots


def closest_parameter(
    point: Vector2,
    point_at: ParametricFunc,
    derivative_at: ParametricFunc,
    t_min: float,
    t_max: float,
    periodic: bool = False,
    samples: int = CURVE_SAMPLES,
) -> float:
    """
    Parameter of the curve point nearest to ``point``.

    The nearest sample is refined by solving the tangency condition
    (C(t) - p) . C'(t) = 0 on the neighbouring intervals. For open curves the
    search stays inside [t_min, t_max], so an endpoint can be the answer.
    """
    ts = np.linspace(t_min, t_max, samples + 1)
    step = (t_max - t_min) / samples
    distances = [(point_at(float(t)) - point).length_squared() for t in ts]
    best = int(np.argmin(distances))
    t_best = float(ts[best])

    def tangency(t: float) -> float:
        return (point_at(t) - point).dot(derivative_at(t))

    candidates = [t_best]
    for lo, hi in ((t_best - step, t_best), (t_best, t_best + step)):
        if not periodic:
            lo, hi = max(lo, t_min), min(hi, t_max)
        if hi - lo <= 0.0:
            continue
        g_lo, g_hi = tangency(lo), tangency(hi)
        if g_lo * g_hi < 0:
            candidates.append(float(sp.optimize.brentq(tangency, lo, hi, xtol=ROOT_XTOL)))

    if len(candidates) == 1:
        logger.debug(f"No tangency bracket around t={t_best:.6f}; keeping the nearest sample")

    return min(candidates, key=lambda t: (point_at(t) - point).length_squared())
