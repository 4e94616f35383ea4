"""Sign evaluator registry. Every evaluator is a standalone function registered via decorator.

Usage:
    @sign_evaluator(name="exact", description="Rational arithmetic")
    def exact_sign(p1: Point, p2: Point, q: Point) -> int:
        ...

Adding an evaluator = creating one module under engine/evaluators with the
decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from orientkit.models.coordinates import Point

logger = logging.getLogger(__name__)

SignFunction = Callable[[Point, Point, Point], int]


@dataclass
class EvaluatorSpec:
    name: str
    fn: SignFunction
    description: str = ""


class EvaluatorRegistry:
    """Registry of robust cross-product sign evaluators."""

    def __init__(self) -> None:
        self._evaluators: dict[str, EvaluatorSpec] = {}

    def register(self, spec: EvaluatorSpec) -> None:
        if spec.name in self._evaluators:
            raise ValueError(f"Duplicate sign evaluator: {spec.name}")
        self._evaluators[spec.name] = spec
        logger.debug("Registered sign evaluator %s", spec.name)

    def get(self, name: str) -> EvaluatorSpec:
        try:
            return self._evaluators[name]
        except KeyError:
            raise KeyError(
                f"Unknown sign evaluator {name!r}; available: {', '.join(self.names())}"
            ) from None

    def names(self) -> list[str]:
        return sorted(self._evaluators)

    def all(self) -> list[EvaluatorSpec]:
        return [self._evaluators[n] for n in self.names()]

    @property
    def count(self) -> int:
        return len(self._evaluators)


# Module-level singleton
_registry = EvaluatorRegistry()


def get_registry() -> EvaluatorRegistry:
    return _registry


def sign_evaluator(*, name: str, description: str = ""):
    """Decorator to register a sign evaluator function."""

    def decorator(fn: SignFunction) -> SignFunction:
        _registry.register(EvaluatorSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
