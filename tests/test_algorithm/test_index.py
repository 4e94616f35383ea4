"""Tests for the orientation index of point triples."""

import math
from fractions import Fraction

import pytest
from hypothesis import given, settings as hyp_settings, strategies as st

from orientkit.algorithm import Orientation, index
from orientkit.config import settings
from orientkit.models import Point

coord = st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False)
small_int = st.integers(min_value=-1000, max_value=1000)


def _fraction_sign(p1, p2, q) -> int:
    (x1, y1), (x2, y2), (xq, yq) = [(Fraction(x), Fraction(y)) for x, y in (p1, p2, q)]
    det = (x2 - x1) * (yq - y1) - (y2 - y1) * (xq - x1)
    return (det > 0) - (det < 0)


def test_left_right_and_on_line(evaluator_name):
    assert index((0, 0), (1, 0), (0, 1), evaluator_name) == Orientation.COUNTERCLOCKWISE
    assert index((0, 0), (1, 0), (0, -1), evaluator_name) == Orientation.CLOCKWISE
    assert index((0, 0), (1, 0), (5, 0), evaluator_name) == Orientation.COLLINEAR


def test_aliases():
    assert Orientation.LEFT is Orientation.COUNTERCLOCKWISE
    assert Orientation.RIGHT is Orientation.CLOCKWISE
    assert Orientation.STRAIGHT is Orientation.COLLINEAR
    assert int(Orientation.CLOCKWISE) == -1


def test_accepts_points_and_pairs():
    assert index(Point(0, 0), Point(1, 0), (0, 1)) == Orientation.COUNTERCLOCKWISE


def test_collinear_arbitrary_slope(evaluator_name):
    # slope 3/2, including the segment interior and both extensions
    for q in [(7, 11), (-3, -4), (2, 3.5)]:
        assert index((1, 2), (3, 5), q, evaluator_name) == Orientation.COLLINEAR


def test_collinear_axis_aligned(evaluator_name):
    assert index((0, 3), (0, 7), (0, -100), evaluator_name) == Orientation.COLLINEAR
    assert index((-2, 1), (4, 1), (1e6, 1), evaluator_name) == Orientation.COLLINEAR


def test_large_magnitude(evaluator_name):
    a = 1e300
    # products of these differences overflow double precision
    assert index((a, a), (2 * a, 2 * a), (4 * a, 4 * a), evaluator_name) == Orientation.COLLINEAR
    above = math.nextafter(4 * a, math.inf)
    assert index((a, a), (2 * a, 2 * a), (4 * a, above), evaluator_name) == Orientation.COUNTERCLOCKWISE
    below = math.nextafter(4 * a, 0.0)
    assert index((a, a), (2 * a, 2 * a), (4 * a, below), evaluator_name) == Orientation.CLOCKWISE


def test_offset_lattice_near_line(evaluator_name):
    # 2**53 + k is beyond the integer range of doubles for odd k
    c = 2.0**53
    assert index((c, c), (c + 2, c + 2), (c + 8, c + 8), evaluator_name) == Orientation.COLLINEAR
    assert index((c, c), (c + 2, c + 2), (c + 8, c + 10), evaluator_name) == Orientation.COUNTERCLOCKWISE


def test_tiny_magnitude(evaluator_name):
    t = 1e-300
    assert index((0, 0), (t, t), (2 * t, 2 * t), evaluator_name) == Orientation.COLLINEAR
    assert index((0, 0), (t, 0), (t, t), evaluator_name) == Orientation.COUNTERCLOCKWISE


def test_ulp_grid_near_diagonal(evaluator_name):
    # Perturb p1 by single ulps around the line through (12, 12) and (24, 24)
    ulp = 2.0**-53
    for i in range(12):
        for j in range(12):
            p1 = (0.5 + i * ulp, 0.5 + j * ulp)
            p2, q = (12.0, 12.0), (24.0, 24.0)
            assert index(p1, p2, q, evaluator_name) == _fraction_sign(p1, p2, q)


def test_uses_configured_default(monkeypatch):
    calls = []
    from orientkit.engine import get_registry

    spec = get_registry().get("exact")
    monkeypatch.setattr(spec, "fn", lambda *pts: calls.append(pts) or 1)
    monkeypatch.setattr(settings, "orientkit_sign_evaluator", "exact")
    assert index((0, 0), (1, 0), (0, 1)) == Orientation.COUNTERCLOCKWISE
    assert len(calls) == 1


def test_unknown_evaluator():
    with pytest.raises(KeyError, match="no_such_evaluator"):
        index((0, 0), (1, 0), (0, 1), "no_such_evaluator")


@given(coord, coord, coord, coord, coord, coord)
@hyp_settings(max_examples=300, deadline=None)
def test_antisymmetry(ax, ay, bx, by, cx, cy):
    a, b, c = (ax, ay), (bx, by), (cx, cy)
    assert index(a, b, c) == -index(b, a, c)


@given(small_int, small_int, small_int, small_int, st.integers(min_value=-50, max_value=50))
@hyp_settings(deadline=None)
def test_scaled_points_are_collinear(x1, y1, dx, dy, k):
    p1 = (x1, y1)
    p2 = (x1 + dx, y1 + dy)
    q = (x1 + k * dx, y1 + k * dy)
    assert index(p1, p2, q) == Orientation.COLLINEAR


@given(small_int, small_int, small_int, small_int, st.integers(min_value=-50, max_value=50))
@hyp_settings(deadline=None)
def test_one_ulp_off_the_line(x1, y1, dx, dy, k):
    p1 = (x1 / 7, y1 / 7)
    p2 = (p1[0] + dx, p1[1] + dy)
    qy = math.nextafter(p1[1] + k * dy, math.inf)
    q = (p1[0] + k * dx, qy)
    assert index(p1, p2, q) == _fraction_sign(p1, p2, q)
