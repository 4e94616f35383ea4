"""Orientation predicates for planar point triples and closed rings.

``index`` gives the turn sign of p1 -> p2 -> q through a registered robust
sign evaluator. ``is_ccw`` decides ring winding with a single ``index`` call
at the ring's topmost cap instead of summing signed area over every edge,
so the answer does not degrade with ring size or coordinate magnitude.
"""

from __future__ import annotations

import enum
import logging

from orientkit.config import settings
from orientkit.engine import get_registry
from orientkit.errors import InvalidRingError
from orientkit.models.coordinates import (
    CoordinateSequence,
    Point,
    PointLike,
    RingLike,
    as_coordinate_sequence,
    as_point,
)

logger = logging.getLogger(__name__)


class Orientation(enum.IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1

    RIGHT = -1
    STRAIGHT = 0
    LEFT = 1


def index(p1: PointLike, p2: PointLike, q: PointLike, evaluator: str | None = None) -> Orientation:
    """Orientation of q relative to the directed line p1 -> p2.

    COUNTERCLOCKWISE if q is to the left, CLOCKWISE if to the right, COLLINEAR
    only when the three points are exactly collinear.

    Args:
        evaluator: registered sign evaluator name; defaults to
            ``settings.orientkit_sign_evaluator``.
    """
    spec = get_registry().get(evaluator or settings.orientkit_sign_evaluator)
    return Orientation(spec.fn(as_point(p1), as_point(p2), as_point(q)))


def is_ccw(ring: RingLike, evaluator: str | None = None) -> bool:
    """True if the closed ring is oriented counter-clockwise.

    The ring must repeat its first point at the end. Flat rings and caps
    without three distinct points (coincident vertices, A-B-A spikes,
    collinear caps) have no defined winding and return False.

    Raises:
        InvalidRingError: the ring has fewer than 4 points.
    """
    seq = as_coordinate_sequence(ring)
    size = seq.size()
    if size < 4:
        raise InvalidRingError(size)

    # number of distinct vertices; index n is the closing repeat of 0
    n = size - 1

    # Last vertex reached by a rising edge at the greatest such height
    up_hi = seq.get_at(0)
    up_low: Point | None = None
    i_up_hi = 0
    prev_y = up_hi.y
    for i in range(1, n + 1):
        py = seq.get_y(i)
        if py > prev_y and py >= up_hi.y:
            up_hi = seq.get_at(i)
            up_low = seq.get_at(i - 1)
            i_up_hi = i
        prev_y = py

    if up_low is None:
        logger.debug("is_ccw: ring is flat, orientation undefined")
        return False

    # Walk past the flat run at the top to the first lower vertex.
    # One exists since the ring is not flat.
    i_down_low = i_up_hi
    while True:
        i_down_low = (i_down_low + 1) % n
        if i_down_low == i_up_hi or seq.get_y(i_down_low) != up_hi.y:
            break

    down_low = seq.get_at(i_down_low)
    i_down_hi = i_down_low - 1 if i_down_low > 0 else n - 1
    down_hi = seq.get_at(i_down_hi)

    if up_hi.equals_2d(down_hi):
        # Pointed cap
        if up_low.equals_2d(up_hi) or down_low.equals_2d(up_hi) or up_low.equals_2d(down_low):
            logger.debug("is_ccw: cap at %s lacks three distinct points", up_hi)
            return False

        orientation = index(up_low, up_hi, down_low, evaluator)
        if orientation == Orientation.COLLINEAR:
            logger.debug("is_ccw: cap at %s is collinear", up_hi)
        return orientation == Orientation.COUNTERCLOCKWISE

    # Flat cap: direction of the top segment decides
    return down_hi.x < up_hi.x


def normalize_ring(ring: RingLike, ccw: bool = True, evaluator: str | None = None) -> CoordinateSequence:
    """Return the ring oriented as requested, reversing it if needed.

    Degenerate rings report as not CCW, so they are reversed when ``ccw`` is
    True; the result is equally degenerate.
    """
    seq = as_coordinate_sequence(ring)
    if is_ccw(seq, evaluator) == ccw:
        return seq
    return seq.reversed()
