"""Floating-point filter with exact fallback.

The determinant is evaluated in plain doubles and its sign trusted when it
exceeds the forward error bound (3 + 16 eps) eps * (|detleft| + |detright|),
eps = 2**-53. Anything inside the bound is settled in rational arithmetic.
"""

from __future__ import annotations

import logging

from orientkit.engine.registry import sign_evaluator
from orientkit.models.coordinates import Point
from orientkit.utils.math_helpers import exact_cross_sign, filtered_cross_sign

logger = logging.getLogger(__name__)

EPSILON = 2.0**-53
CCW_ERRBOUND_A = (3.0 + 16.0 * EPSILON) * EPSILON


@sign_evaluator(name="filtered", description="Float determinant with error bound, exact fallback")
def filtered_sign(p1: Point, p2: Point, q: Point) -> int:
    result = filtered_cross_sign(p1, p2, q, CCW_ERRBOUND_A)
    if result is not None:
        return result
    logger.debug("filter inconclusive for %s %s %s, using exact arithmetic", p1, p2, q)
    return exact_cross_sign(p1, p2, q)
