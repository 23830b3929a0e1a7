"""Public API for shuntcalc - returns structured objects without side effects."""

from __future__ import annotations

from .engine import evaluate as _evaluate
from .engine import evaluate_or_raise
from .formatting import format_tokens
from .lexer import tokenize
from .logging_config import get_logger
from .shunting_yard import to_postfix
from .types import CalcError, EvalResult

logger = get_logger("api")


def evaluate(expression: str, constants: bool | None = None) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "2+2", "sin(pi/2)")
        constants: Substitute ``pi`` and ``e``; None uses the configured default

    Returns:
        EvalResult with value, or with error describing the failing stage

    Example:
        >>> from shuntcalc_pkg.api import evaluate
        >>> evaluate("2 ^ 3 ^ 2").value
        512.0
        >>> evaluate("10 / 0").error.code
        'DIVIDE_BY_ZERO'
    """
    return _evaluate(expression, constants=constants)


def to_postfix_notation(expression: str, constants: bool | None = None) -> str:
    """Convert an infix expression to space-separated postfix text.

    Args:
        expression: Infix expression string

    Returns:
        Postfix rendering; prefix signs appear as ``neg`` / ``pos``

    Raises:
        LexError: If the expression cannot be tokenized
        ConvertError: If parentheses are unbalanced

    Example:
        >>> from shuntcalc_pkg.api import to_postfix_notation
        >>> to_postfix_notation("(2 + 3) * 4")
        '2.0 3.0 + 4.0 *'
    """
    return format_tokens(to_postfix(tokenize(expression, constants=constants)))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check whether an expression evaluates without error.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from shuntcalc_pkg.api import validate_expression
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 +")
        (False, "Missing operands for '+'")
    """
    try:
        evaluate_or_raise(expression)
    except CalcError as e:
        logger.debug("Validation of %r failed: %s", expression, e.code)
        return False, str(e)
    return True, None
