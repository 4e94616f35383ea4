"""Sign helpers shared by the evaluators. No engine imports."""

from __future__ import annotations

import math
from fractions import Fraction

from orientkit.models.coordinates import Point

# Below this the float products may have lost bits to gradual underflow
_UNDERFLOW_GUARD = 1e-280


def sign(value: float | Fraction) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def exact_cross_sign(p1: Point, p2: Point, q: Point) -> int:
    """Sign of (p2 - p1) x (q - p1) in rational arithmetic.

    Every finite float converts to a Fraction without rounding, so the result
    is the true sign.
    """
    x1, y1 = Fraction(p1.x), Fraction(p1.y)
    dx1 = Fraction(p2.x) - x1
    dy1 = Fraction(p2.y) - y1
    dx2 = Fraction(q.x) - x1
    dy2 = Fraction(q.y) - y1
    return sign(dx1 * dy2 - dy1 * dx2)


def filtered_cross_sign(p1: Point, p2: Point, q: Point, error_factor: float) -> int | None:
    """Plain float determinant, trusted only outside ``error_factor * detsum``.

    Returns None when the float result cannot certify the sign.
    """
    detleft = (p1.x - q.x) * (p2.y - q.y)
    detright = (p1.y - q.y) * (p2.x - q.x)
    det = detleft - detright
    detsum = abs(detleft) + abs(detright)
    if not math.isfinite(det) or detsum < _UNDERFLOW_GUARD:
        return None
    errbound = error_factor * detsum
    if det > errbound:
        return 1
    if -det > errbound:
        return -1
    return None
