"""Tests for numeric function primitives."""

from __future__ import annotations

import math

import pytest

from gep.core.functions.math_nodes import (
    MATH,
    math_add,
    math_add4,
    math_div,
    math_exp,
    math_inv,
    math_ln,
    math_max2,
    math_min2,
    math_mul3,
    math_sqrt,
    math_sub,
)


class TestRegistration:
    def test_arithmetic_is_binary(self) -> None:
        for symbol in ("+", "-", "*", "/"):
            assert MATH[symbol].arity == 2

    def test_add4_is_quaternary(self) -> None:
        assert MATH["Add4"].arity == 4


class TestArithmetic:
    def test_add(self) -> None:
        assert math_add(2.0, 3.0, 0.0, 0.0) == 5.0

    def test_sub(self) -> None:
        assert math_sub(2.0, 3.0, 0.0, 0.0) == -1.0

    def test_nan_propagation(self) -> None:
        assert math.isnan(math_add(float("nan"), 1.0, 0.0, 0.0))

    def test_mul3_and_add4(self) -> None:
        assert math_mul3(2.0, 3.0, 4.0, 100.0) == 24.0
        assert math_add4(1.0, 2.0, 3.0, 4.0) == 10.0


class TestGuarded:
    def test_div(self) -> None:
        assert math_div(6.0, 3.0, 0.0, 0.0) == 2.0

    @pytest.mark.parametrize("numerator", [1.0, 0.0, -1.0])
    def test_div_by_zero_is_nan(self, numerator: float) -> None:
        assert math.isnan(math_div(numerator, 0.0, 0.0, 0.0))

    def test_inv_zero_is_nan(self) -> None:
        assert math.isnan(math_inv(0.0, 0.0, 0.0, 0.0))

    def test_sqrt_negative_is_nan(self) -> None:
        assert math.isnan(math_sqrt(-4.0, 0.0, 0.0, 0.0))
        assert math_sqrt(4.0, 0.0, 0.0, 0.0) == 2.0

    def test_sqrt_infinity_is_nan(self) -> None:
        assert math.isnan(math_sqrt(float("inf"), 0.0, 0.0, 0.0))
        assert math.isnan(math_sqrt(float("-inf"), 0.0, 0.0, 0.0))

    def test_ln_non_positive_is_nan(self) -> None:
        assert math.isnan(math_ln(0.0, 0.0, 0.0, 0.0))
        assert math.isnan(math_ln(-1.0, 0.0, 0.0, 0.0))
        assert math_ln(1.0, 0.0, 0.0, 0.0) == 0.0

    def test_exp_overflow_is_nan(self) -> None:
        assert math.isnan(math_exp(1e6, 0.0, 0.0, 0.0))

    def test_results_are_python_floats(self) -> None:
        assert type(math_div(1.0, 2.0, 0.0, 0.0)) is float
        assert type(math_min2(1.0, 2.0, 0.0, 0.0)) is float


class TestMinMax:
    def test_min_max(self) -> None:
        assert math_min2(1.0, 2.0, 0.0, 0.0) == 1.0
        assert math_max2(1.0, 2.0, 0.0, 0.0) == 2.0
