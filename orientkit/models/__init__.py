"""Coordinate model."""

from orientkit.models.coordinates import (
    CoordinateSequence,
    Point,
    PointLike,
    RingLike,
    as_coordinate_sequence,
    as_point,
)

__all__ = [
    "CoordinateSequence",
    "Point",
    "PointLike",
    "RingLike",
    "as_coordinate_sequence",
    "as_point",
]
