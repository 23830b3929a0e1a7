"""Rendering of numbers and token sequences for display."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from . import config
from .types import Function, LeftParen, Number, Operator, RightParen, Token

UNARY_NAMES = {"-": "neg", "+": "pos"}


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a value in fixed-point notation.

    Args:
        val: Numeric value to format
        precision: Decimal places (default: config.OUTPUT_PRECISION)

    Returns:
        e.g. "14.000000", "nan", "-inf"
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    number = float(val)
    if not math.isfinite(number):
        return str(number)
    return f"{number:.{int(precision)}f}"


def format_token(token: Token) -> str:
    if isinstance(token, Number):
        return repr(token.value)
    if isinstance(token, Operator):
        return UNARY_NAMES[token.symbol] if token.unary else token.symbol
    if isinstance(token, Function):
        return token.name
    if isinstance(token, LeftParen):
        return "("
    if isinstance(token, RightParen):
        return ")"
    raise TypeError(f"Not a token: {token!r}")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens space-separated, e.g. ``2.0 3.0 4.0 * +``."""
    return " ".join(format_token(token) for token in tokens)
