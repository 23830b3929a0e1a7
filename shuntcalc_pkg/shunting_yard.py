"""Infix to postfix conversion (Dijkstra's shunting-yard algorithm).

Precedence and associativity come from the read-only tables in config.
A ``+`` or ``-`` in prefix position (start of input, after an operator, an
opening parenthesis or a function name) is re-tagged as a unary operator.
Unmatched parentheses in either direction raise ConvertError; operand
counts are left to the evaluator.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import BINARY_OPERATORS, UNARY_OPERATORS
from .logging_config import get_logger
from .types import (
    ConvertError,
    Function,
    LeftParen,
    Number,
    Operator,
    OperatorSpec,
    RightParen,
    Token,
)

logger = get_logger("shunting_yard")


def operator_spec(token: Operator) -> OperatorSpec:
    table = UNARY_OPERATORS if token.unary else BINARY_OPERATORS
    return table[token.symbol]


def _in_prefix_position(previous: Token | None) -> bool:
    return previous is None or isinstance(previous, (Operator, LeftParen, Function))


def _should_pop(top: Token, incoming: OperatorSpec) -> bool:
    if isinstance(top, Function):
        return True
    if not isinstance(top, Operator):
        return False
    top_spec = operator_spec(top)
    if top_spec.precedence > incoming.precedence:
        return True
    return top_spec.precedence == incoming.precedence and incoming.left_associative


def to_postfix(tokens: Iterable[Token]) -> tuple[Token, ...]:
    """Reorder infix tokens into postfix (reverse Polish) order.

    Args:
        tokens: Tokens as produced by lexer.tokenize

    Returns:
        Tuple of Number, Operator and Function tokens with no parentheses

    Raises:
        ConvertError: UNMATCHED_RIGHT_PAREN or UNMATCHED_LEFT_PAREN
    """
    output: list[Token] = []
    stack: list[Token] = []
    previous: Token | None = None

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Function):
            stack.append(token)
        elif isinstance(token, Operator):
            if token.symbol in UNARY_OPERATORS and _in_prefix_position(previous):
                # No left operand, so nothing on the stack can be completed yet
                token = Operator(token.symbol, unary=True)
            else:
                spec = operator_spec(token)
                while stack and _should_pop(stack[-1], spec):
                    output.append(stack.pop())
            stack.append(token)
        elif isinstance(token, LeftParen):
            stack.append(token)
        elif isinstance(token, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise ConvertError("Unmatched ')'", "UNMATCHED_RIGHT_PAREN")
            stack.pop()
            if stack and isinstance(stack[-1], Function):
                output.append(stack.pop())
        else:
            raise TypeError(f"Not a token: {token!r}")
        previous = token

    while stack:
        top = stack.pop()
        if isinstance(top, LeftParen):
            raise ConvertError("Unmatched '('", "UNMATCHED_LEFT_PAREN")
        output.append(top)

    logger.debug("Postfix sequence has %d tokens", len(output))
    return tuple(output)
