"""Exception types raised by orientkit."""

from __future__ import annotations


class OrientkitError(Exception):
    """Base class for orientkit errors."""


class InvalidRingError(OrientkitError, ValueError):
    """Ring is too small for its orientation to be determined."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            "Ring has fewer than 4 points, so orientation cannot be determined "
            f"(got {size}; need 3 distinct points plus the closing point)"
        )
