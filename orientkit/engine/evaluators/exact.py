"""Rational arithmetic evaluator: always exact, slowest."""

from __future__ import annotations

from orientkit.engine.registry import sign_evaluator
from orientkit.models.coordinates import Point
from orientkit.utils.math_helpers import exact_cross_sign


@sign_evaluator(name="exact", description="Exact sign via fractions.Fraction")
def exact_sign(p1: Point, p2: Point, q: Point) -> int:
    return exact_cross_sign(p1, p2, q)
