"""Termination and scaling checks on large inputs."""

import time

import pytest

from shuntcalc_pkg.config import MAX_INPUT_LENGTH
from shuntcalc_pkg.engine import evaluate


class TestLargeInputs:
    """The pipeline is linear and non-recursive."""

    def test_long_sum(self):
        text = "1+" * 4999 + "1"
        assert len(text) <= MAX_INPUT_LENGTH
        start = time.perf_counter()
        assert evaluate(text).value == 5000.0
        assert time.perf_counter() - start < 2.0

    def test_deep_parentheses(self):
        # Far deeper than the default recursion limit
        text = "(" * 3000 + "7" + ")" * 3000
        assert evaluate(text).value == 7.0

    def test_deep_unary_chain(self):
        assert evaluate("-" * 5001 + "1").value == -1.0

    def test_long_power_chain(self):
        # 1^1^...^1 is right-associative all the way down
        assert evaluate(" ^ ".join(["1"] * 2000)).value == 1.0

    def test_nested_functions(self):
        text = "sqrt(" * 500 + "1" + ")" * 500
        assert evaluate(text).value == pytest.approx(1.0)

    def test_over_limit_rejected(self):
        result = evaluate("1" * (MAX_INPUT_LENGTH + 1))
        assert result.error.code == "TOO_LONG"
