"""orientkit: robust orientation predicates for planar points and rings."""

from orientkit.algorithm import Orientation, index, is_ccw, normalize_ring
from orientkit.config import Settings, configure_logging, settings
from orientkit.engine import get_registry, sign_evaluator
from orientkit.errors import InvalidRingError, OrientkitError
from orientkit.models import CoordinateSequence, Point

__version__ = "0.1.0"

__all__ = [
    "CoordinateSequence",
    "InvalidRingError",
    "Orientation",
    "OrientkitError",
    "Point",
    "Settings",
    "configure_logging",
    "get_registry",
    "index",
    "is_ccw",
    "normalize_ring",
    "settings",
    "sign_evaluator",
]
