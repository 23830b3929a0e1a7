"""Expression engine: lexer -> shunting-yard converter -> postfix evaluator."""

from __future__ import annotations

from .evaluator import eval_postfix
from .lexer import tokenize
from .logging_config import get_logger
from .shunting_yard import to_postfix
from .types import CalcError, EngineError, EvalResult

logger = get_logger("engine")


def evaluate_or_raise(text: str, constants: bool | None = None) -> float:
    """Evaluate an expression, letting the failing stage's CalcError propagate."""
    tokens = tokenize(text, constants=constants)
    postfix = to_postfix(tokens)
    return eval_postfix(postfix)


def evaluate(text: str, constants: bool | None = None) -> EvalResult:
    """Evaluate an arithmetic expression.

    Failures from any stage are returned, not raised, so callers can render
    every error the same way.

    Args:
        text: Infix expression (e.g. "2 + 3 * 4", "sqrt(16)", "1e-3 ^ 2")
        constants: Substitute ``pi`` and ``e``; None uses config.ENABLE_CONSTANTS

    Returns:
        EvalResult with ``value`` on success or ``error`` (an EngineError)
    """
    try:
        value = evaluate_or_raise(text, constants=constants)
    except CalcError as e:
        logger.info("Evaluation of %r failed in %s stage: %s [%s]", text, e.stage, e, e.code)
        return EvalResult(ok=False, error=EngineError.from_exception(e))
    return EvalResult(ok=True, value=value)
