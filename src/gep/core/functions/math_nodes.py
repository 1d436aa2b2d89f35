"""Numeric function set (+, -, *, /, Sqrt, Ln, Min2, Add3, ...).

Guarded operations follow one rule: a non-finite result becomes NaN rather
than raising, so a single bad subtree never aborts the evaluation of a
population.
"""

from __future__ import annotations

import numpy as np

from gep.core.functions.registry import Function, FunctionRegistry


def _finite_or_nan(value: np.floating) -> float:
    return float(value) if np.isfinite(value) else float("nan")


def math_add(a: float, b: float, c: float, d: float) -> float:
    """Addition."""
    return a + b


def math_sub(a: float, b: float, c: float, d: float) -> float:
    """Subtraction."""
    return a - b


def math_mul(a: float, b: float, c: float, d: float) -> float:
    """Multiplication."""
    return a * b


def math_div(a: float, b: float, c: float, d: float) -> float:
    """Division; division by zero produces NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.divide(np.float64(a), np.float64(b))
    return _finite_or_nan(result)


def math_neg(a: float, b: float, c: float, d: float) -> float:
    """Negation."""
    return -a


def math_abs(a: float, b: float, c: float, d: float) -> float:
    """Absolute value."""
    return abs(a)


def math_sqrt(a: float, b: float, c: float, d: float) -> float:
    """Square root; negative and infinite values produce NaN."""
    with np.errstate(invalid="ignore"):
        result = np.sqrt(np.float64(a))
    return _finite_or_nan(result)


def math_ln(a: float, b: float, c: float, d: float) -> float:
    """Natural log; non-positive values produce NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.log(np.float64(a))
    return _finite_or_nan(result)


def math_exp(a: float, b: float, c: float, d: float) -> float:
    """Exponential; overflow produces NaN."""
    with np.errstate(over="ignore"):
        result = np.exp(np.float64(a))
    return _finite_or_nan(result)


def math_inv(a: float, b: float, c: float, d: float) -> float:
    """Reciprocal; zero produces NaN."""
    return math_div(1.0, a, 0.0, 0.0)


def math_x2(a: float, b: float, c: float, d: float) -> float:
    return a * a


def math_x3(a: float, b: float, c: float, d: float) -> float:
    return a * a * a


def math_min2(a: float, b: float, c: float, d: float) -> float:
    """Minimum of two operands."""
    return float(np.minimum(a, b))


def math_max2(a: float, b: float, c: float, d: float) -> float:
    """Maximum of two operands."""
    return float(np.maximum(a, b))


def math_avg2(a: float, b: float, c: float, d: float) -> float:
    return (a + b) / 2.0


def math_add3(a: float, b: float, c: float, d: float) -> float:
    return a + b + c


def math_sub3(a: float, b: float, c: float, d: float) -> float:
    return a - b - c


def math_mul3(a: float, b: float, c: float, d: float) -> float:
    return a * b * c


def math_add4(a: float, b: float, c: float, d: float) -> float:
    return a + b + c + d


def math_mul4(a: float, b: float, c: float, d: float) -> float:
    return a * b * c * d


def register_math_nodes(registry: FunctionRegistry) -> None:
    """Register the numeric function set into the registry.

    Args:
        registry: The function registry to populate.
    """
    registry.register(Function("+", 2, float64_function=math_add))
    registry.register(Function("-", 2, float64_function=math_sub))
    registry.register(Function("*", 2, float64_function=math_mul))
    registry.register(Function("/", 2, float64_function=math_div))
    registry.register(Function("Neg", 1, float64_function=math_neg))
    registry.register(Function("Abs", 1, float64_function=math_abs))
    registry.register(Function("Sqrt", 1, float64_function=math_sqrt))
    registry.register(Function("Ln", 1, float64_function=math_ln))
    registry.register(Function("Exp", 1, float64_function=math_exp))
    registry.register(Function("Inv", 1, float64_function=math_inv))
    registry.register(Function("X2", 1, float64_function=math_x2))
    registry.register(Function("X3", 1, float64_function=math_x3))
    registry.register(Function("Min2", 2, float64_function=math_min2))
    registry.register(Function("Max2", 2, float64_function=math_max2))
    registry.register(Function("Avg2", 2, float64_function=math_avg2))
    registry.register(Function("Add3", 3, float64_function=math_add3))
    registry.register(Function("Sub3", 3, float64_function=math_sub3))
    registry.register(Function("Mul3", 3, float64_function=math_mul3))
    registry.register(Function("Add4", 4, float64_function=math_add4))
    registry.register(Function("Mul4", 4, float64_function=math_mul4))


def build_math_registry() -> FunctionRegistry:
    """Build a fresh registry holding the numeric function set."""
    registry = FunctionRegistry()
    register_math_nodes(registry)
    return registry


MATH = build_math_registry()
