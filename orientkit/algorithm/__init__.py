"""Orientation predicates."""

from orientkit.algorithm.orientation import Orientation, index, is_ccw, normalize_ring

__all__ = ["Orientation", "index", "is_ccw", "normalize_ring"]
