"""Robust sign evaluation engine."""

import importlib
import pkgutil

from orientkit.engine.registry import (
    EvaluatorRegistry,
    EvaluatorSpec,
    get_registry,
    sign_evaluator,
)


def _register_evaluators() -> None:
    """Import all evaluator modules so @sign_evaluator decorators fire."""
    package = importlib.import_module("orientkit.engine.evaluators")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


_register_evaluators()

__all__ = [
    "EvaluatorRegistry",
    "EvaluatorSpec",
    "get_registry",
    "sign_evaluator",
]
