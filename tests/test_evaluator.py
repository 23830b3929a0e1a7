"""Tests for postfix evaluation, including IEEE special values."""

import math

import pytest

from shuntcalc_pkg.evaluator import apply_function, eval_postfix
from shuntcalc_pkg.types import EvalError, Function, LeftParen, Number, Operator


def n(value):
    return Number(float(value))


class TestArithmetic:
    """Test binary and unary operators."""

    def test_operand_order(self):
        assert eval_postfix([n(10), n(4), Operator("-")]) == 6.0
        assert eval_postfix([n(8), n(2), Operator("/")]) == 4.0
        assert eval_postfix([n(2), n(10), Operator("^")]) == 1024.0

    def test_power_aliases(self):
        caret = eval_postfix([n(3), n(4), Operator("^")])
        stars = eval_postfix([n(3), n(4), Operator("**")])
        assert caret == stars == 81.0

    def test_unary_operators(self):
        assert eval_postfix([n(5), Operator("-", unary=True)]) == -5.0
        assert eval_postfix([n(5), Operator("+", unary=True)]) == 5.0

    def test_result_is_plain_float(self):
        assert type(eval_postfix([n(2), n(3), Operator("^")])) is float
        assert type(eval_postfix([n(16), Function("sqrt")])) is float


class TestFunctions:
    """Test the registered one-argument functions."""

    def test_exact_values(self):
        assert apply_function("sqrt", 16.0) == 4.0
        assert apply_function("sin", 0.0) == 0.0
        assert apply_function("cos", 0.0) == 1.0
        assert apply_function("tan", 0.0) == 0.0
        assert apply_function("exp", 0.0) == 1.0

    def test_logarithms(self):
        assert apply_function("log", 1000.0) == pytest.approx(3.0)
        assert apply_function("ln", math.e) == pytest.approx(1.0)

    def test_radians(self):
        assert apply_function("sin", math.pi / 2) == pytest.approx(1.0)
        assert apply_function("cos", math.pi) == pytest.approx(-1.0)

    def test_unknown_function(self):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([n(1), Function("cbrt")])
        assert exc_info.value.code == "UNKNOWN_FUNCTION"


class TestSpecialValues:
    """Domain and overflow edge cases propagate instead of raising."""

    def test_negative_sqrt_is_nan(self):
        assert math.isnan(apply_function("sqrt", -1.0))

    def test_logarithm_edges(self):
        assert apply_function("ln", 0.0) == -math.inf
        assert math.isnan(apply_function("log", -1.0))

    def test_exp_overflow(self):
        assert apply_function("exp", 1000.0) == math.inf

    def test_power_edges(self):
        assert eval_postfix([n(0), n(0), Operator("^")]) == 1.0
        assert eval_postfix([n(0), n(-1), Operator("^")]) == math.inf
        assert eval_postfix([n(10), n(400), Operator("^")]) == math.inf
        assert math.isnan(eval_postfix([n(-8), n(1 / 3), Operator("^")]))

    def test_infinite_arithmetic(self):
        assert eval_postfix([n(1e308), n(10), Operator("*")]) == math.inf
        assert math.isnan(eval_postfix([n(math.inf), n(math.inf), Operator("-")]))

    def test_nan_denominator_is_not_zero(self):
        assert math.isnan(eval_postfix([n(1), n(math.nan), Operator("/")]))


class TestErrors:
    """Test evaluation error codes."""

    @pytest.mark.parametrize("denominator", [0.0, -0.0])
    def test_divide_by_zero(self, denominator):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([n(1), Number(denominator), Operator("/")])
        assert exc_info.value.code == "DIVIDE_BY_ZERO"
        assert exc_info.value.stage == "eval"

    def test_missing_operands(self):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([Operator("+")])
        assert exc_info.value.code == "MISSING_OPERANDS"
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([n(1), Operator("*")])
        assert exc_info.value.code == "MISSING_OPERANDS"

    def test_missing_operand_for_function(self):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([Function("sqrt")])
        assert exc_info.value.code == "MISSING_OPERAND"

    def test_missing_operand_for_unary(self):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([Operator("-", unary=True)])
        assert exc_info.value.code == "MISSING_OPERAND"

    @pytest.mark.parametrize("tokens", [[], [n(1), n(2)], [n(1), n(2), n(3), Operator("+")]])
    def test_residue_must_be_single_value(self, tokens):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix(tokens)
        assert exc_info.value.code == "MALFORMED_EXPRESSION"

    def test_parenthesis_in_postfix_rejected(self):
        with pytest.raises(EvalError) as exc_info:
            eval_postfix([n(1), LeftParen()])
        assert exc_info.value.code == "MALFORMED_EXPRESSION"
