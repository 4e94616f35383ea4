"""Double-double evaluator.

Stage 1: a float filter with a deliberately loose bound (1e-15) settles the
well-separated cases.
Stage 2: the coordinate differences are formed exactly as double-doubles and
the determinant is evaluated to ~106 bits; its sign is accepted when the
magnitude exceeds the accumulated rounding bound.
Stage 3: rational arithmetic for whatever is left, and for coordinates
outside the range where the error-free transforms stay exact.
"""

from __future__ import annotations

import logging

from orientkit.engine.registry import sign_evaluator
from orientkit.models.coordinates import Point
from orientkit.utils.ddmath import dd_mul, dd_sub, in_safe_range, two_diff
from orientkit.utils.math_helpers import exact_cross_sign, filtered_cross_sign, sign

logger = logging.getLogger(__name__)

DP_SAFE_EPSILON = 1e-15

# Relative bound on the double-double determinant, well above the ~2**-104
# actually accumulated by two products and one subtraction.
DD_ERRBOUND = 2.0**-96


def dd_cross(p1: Point, p2: Point, q: Point) -> tuple[float, float]:
    """Return (det_hi, errbound) for (p2 - p1) x (q - p2)."""
    dx1 = two_diff(p2.x, p1.x)
    dy1 = two_diff(p2.y, p1.y)
    dx2 = two_diff(q.x, p2.x)
    dy2 = two_diff(q.y, p2.y)
    m1 = dd_mul(dx1, dy2)
    m2 = dd_mul(dy1, dx2)
    det = dd_sub(m1, m2)
    return det[0], DD_ERRBOUND * (abs(m1[0]) + abs(m2[0]))


@sign_evaluator(name="double_double", description="Float filter, then double-double, exact fallback")
def double_double_sign(p1: Point, p2: Point, q: Point) -> int:
    result = filtered_cross_sign(p1, p2, q, DP_SAFE_EPSILON)
    if result is not None:
        return result

    if in_safe_range(p1.x, p1.y, p2.x, p2.y, q.x, q.y):
        det, errbound = dd_cross(p1, p2, q)
        if abs(det) > errbound:
            return sign(det)

    logger.debug("double-double inconclusive for %s %s %s, using exact arithmetic", p1, p2, q)
    return exact_cross_sign(p1, p2, q)
