"""Shared test fixtures."""

from __future__ import annotations

import pytest

from orientkit.engine import get_registry

# Closed rings, first point repeated at the end

SQUARE_CCW = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]
SQUARE_CW = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
TRIANGLE_CCW = [(0, 0), (1, 0), (0.5, 1), (0, 0)]
FLAT_TOP_CCW = [(0, 0), (2, 0), (2, 2), (1, 2), (0, 2), (0, 0)]

# Two peaks of equal height with a valley between them ("M" shape)
TWIN_PEAKS_CCW = [(0, 0), (4, 0), (4, 3), (3, 1), (2, 3), (1, 1), (0, 3), (0, 0)]

# Concave "U" opening upward; both arms share the top height
U_SHAPE_CCW = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3), (0, 0)]

# Pointed top with repeated vertices along the way
DUPLICATES_CCW = [(0, 0), (2, 0), (2, 0), (3, 2), (1, 4), (1, 4), (-1, 2), (0, 0)]

SIMPLE_CCW_RINGS = {
    "square": SQUARE_CCW,
    "triangle": TRIANGLE_CCW,
    "flat_top": FLAT_TOP_CCW,
    "twin_peaks": TWIN_PEAKS_CCW,
    "u_shape": U_SHAPE_CCW,
    "duplicates": DUPLICATES_CCW,
}


@pytest.fixture(params=sorted(SIMPLE_CCW_RINGS))
def ccw_ring(request) -> list[tuple[float, float]]:
    return SIMPLE_CCW_RINGS[request.param]


@pytest.fixture(params=get_registry().names())
def evaluator_name(request) -> str:
    return request.param
