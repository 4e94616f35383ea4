"""Coordinate model: immutable points and numpy-backed coordinate sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """A 2-D coordinate. Equality is exact on (x, y)."""

    x: float
    y: float

    def equals_2d(self, other: Point) -> bool:
        return self.x == other.x and self.y == other.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float]]


def as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    return Point(float(p[0]), float(p[1]))


class CoordinateSequence:
    """Read-only ordered sequence of 2-D coordinates.

    Backed by an (N, 2) float64 array. Rings follow the closed convention:
    the last coordinate repeats the first.
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: NDArray[np.float64] | Iterable[PointLike]) -> None:
        arr = np.array(coords, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected (N, 2) array for coordinates, got shape {arr.shape}.")
        if not np.isfinite(arr).all():
            bad = np.argwhere(~np.isfinite(arr))[:, 0]
            raise ValueError(f"Non-finite coordinates at indices: {sorted(set(bad.tolist()))}")
        arr.setflags(write=False)
        self._coords = arr

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> CoordinateSequence:
        return cls([as_point(p).as_tuple() for p in points])

    def size(self) -> int:
        return self._coords.shape[0]

    def __len__(self) -> int:
        return self._coords.shape[0]

    def get_at(self, i: int) -> Point:
        row = self._coords[i]
        return Point(float(row[0]), float(row[1]))

    def get_x(self, i: int) -> float:
        return float(self._coords[i, 0])

    def get_y(self, i: int) -> float:
        return float(self._coords[i, 1])

    def __getitem__(self, i: int) -> Point:
        return self.get_at(i)

    def __iter__(self) -> Iterator[Point]:
        for x, y in self._coords.tolist():
            yield Point(x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateSequence):
            return NotImplemented
        return np.array_equal(self._coords, other._coords)

    def __repr__(self) -> str:
        return f"CoordinateSequence({self._coords.tolist()!r})"

    def is_ring(self) -> bool:
        """At least 4 coordinates and first == last exactly."""
        n = self.size()
        return n >= 4 and bool(np.array_equal(self._coords[0], self._coords[n - 1]))

    def reversed(self) -> CoordinateSequence:
        return CoordinateSequence(self._coords[::-1])

    def rotated(self, k: int) -> CoordinateSequence:
        """Start the ring at distinct vertex k, keeping the closing point."""
        n = self.size() - 1
        if n < 1:
            return self
        core = np.roll(self._coords[:n], -(k % n), axis=0)
        return CoordinateSequence(np.vstack((core, core[:1])))

    def to_array(self) -> NDArray[np.float64]:
        return self._coords.copy()


RingLike = Union[CoordinateSequence, NDArray[np.float64], Sequence[PointLike]]


def as_coordinate_sequence(ring: RingLike) -> CoordinateSequence:
    if isinstance(ring, CoordinateSequence):
        return ring
    if isinstance(ring, np.ndarray):
        return CoordinateSequence(ring)
    return CoordinateSequence.from_points(ring)
