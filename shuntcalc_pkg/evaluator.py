"""Stack-based evaluation of postfix token sequences.

Functions and exponentiation run through NumPy with floating-point warnings
silenced, so domain and overflow edge cases come back as nan or +/-inf
instead of raising. Division by an exact zero is the only arithmetic error.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable

import numpy as np

from .config import FUNCTIONS
from .logging_config import get_logger
from .types import EvalError, Function, Number, Operator, Token

logger = get_logger("evaluator")


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise EvalError("Division by zero", "DIVIDE_BY_ZERO")
    return a / b


def _power(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(b)))


BINARY_ACTIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
    "**": _power,
}

UNARY_ACTIONS = {
    "+": operator.pos,
    "-": operator.neg,
}


def apply_function(name: str, value: float) -> float:
    """Apply a registered one-argument function with IEEE semantics."""
    try:
        transform = FUNCTIONS[name]
    except KeyError:
        raise EvalError(f"Unknown function {name!r}", "UNKNOWN_FUNCTION") from None
    with np.errstate(all="ignore"):
        return float(transform(np.float64(value)))


def eval_postfix(tokens: Iterable[Token]) -> float:
    """Reduce a postfix sequence to a single value.

    Args:
        tokens: Number, Operator and Function tokens in postfix order

    Returns:
        The single value left on the stack

    Raises:
        EvalError: MISSING_OPERAND, MISSING_OPERANDS, DIVIDE_BY_ZERO,
            UNKNOWN_FUNCTION or MALFORMED_EXPRESSION
    """
    stack: list[float] = []
    for token in tokens:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Function):
            if not stack:
                raise EvalError(
                    f"Missing operand for function {token.name!r}", "MISSING_OPERAND"
                )
            stack.append(apply_function(token.name, stack.pop()))
        elif isinstance(token, Operator) and token.unary:
            if not stack:
                raise EvalError(
                    f"Missing operand for unary {token.symbol!r}", "MISSING_OPERAND"
                )
            stack.append(UNARY_ACTIONS[token.symbol](stack.pop()))
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise EvalError(
                    f"Missing operands for {token.symbol!r}", "MISSING_OPERANDS"
                )
            b = stack.pop()
            a = stack.pop()
            stack.append(BINARY_ACTIONS[token.symbol](a, b))
        else:
            raise EvalError(f"Unexpected token in postfix sequence: {token!r}", "MALFORMED_EXPRESSION")

    if len(stack) != 1:
        raise EvalError(
            f"Invalid expression ({len(stack)} values left after evaluation)",
            "MALFORMED_EXPRESSION",
        )
    logger.debug("Postfix evaluation produced %r", stack[0])
    return stack[0]
