from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .api import evaluate, to_postfix_notation
from .config import CONSTANTS, FUNCTIONS, LOG_LEVEL, VERSION
from .formatting import format_number
from .logging_config import get_logger
from .types import CalcError, EngineError, EvalResult

logger = get_logger("cli")


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running shuntcalc health check...")
    print("-" * 50)

    try:
        import numpy

        print(f"[OK] NumPy {numpy.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] NumPy import failed: {e}")
        checks_failed += 1

    checks = [
        ("Precedence", "2 + 3 * 4", 14.0),
        ("Parentheses", "(2 + 3) * 4", 20.0),
        ("Right associativity", "2 ^ 3 ^ 2", 512.0),
        ("Functions", "sqrt(16)", 4.0),
    ]
    for label, expression, expected in checks:
        result = evaluate(expression)
        if result.ok and result.value == expected:
            print(f"[OK] {label}: {expression} = {format_number(result.value)}")
            checks_passed += 1
        else:
            print(f"[FAIL] {label}: expected {expected}, got {result!r}")
            checks_failed += 1

    result = evaluate("10 / 0")
    if not result.ok and result.error.code == "DIVIDE_BY_ZERO":
        print("[OK] Division by zero is reported")
        checks_passed += 1
    else:
        print(f"[FAIL] Division by zero check failed: {result!r}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(
    res: dict[str, Any], output_format: str = "human", precision: int | None = None
) -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary (EvalResult.to_dict() or a postfix result)
        output_format: "json" for JSON output, "human" for human-readable
        precision: Decimal places for human output (default: config.OUTPUT_PRECISION)
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print("Error:", res["error"]["detail"])
        return
    if "postfix" in res:
        print(res["postfix"])
    else:
        print(format_number(res["value"], precision))


def _postfix_result(expression: str, constants: bool | None = None) -> dict[str, Any]:
    try:
        return {"ok": True, "postfix": to_postfix_notation(expression, constants=constants)}
    except CalcError as e:
        return {"ok": False, "error": EngineError.from_exception(e).to_dict()}


def print_help_text() -> None:
    print(
        "Usage: shuntcalc -e EXPRESSION\n\n"
        "Operators: + - * / ^ (** is the same as ^), parentheses, prefix + and -\n"
        f"Functions: {', '.join(FUNCTIONS)}\n"
        f"Constants: {', '.join(CONSTANTS)} (disable with --no-constants)\n"
        "Scientific notation OK (e.g. 1e-3)"
    )


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for shuntcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, 1 for evaluation errors, 2 for usage errors)
    """
    parser = argparse.ArgumentParser(prog="shuntcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (decimal places)"
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the postfix (RPN) form instead of evaluating",
    )
    parser.add_argument(
        "--no-constants",
        action="store_true",
        help="Treat pi and e as unknown identifiers",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Overrides are passed per call so module-level config stays untouched
    precision = args.precision if args.precision is not None and args.precision >= 0 else None
    constants = False if args.no_constants else None

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is None:
        print_help_text()
        return 2

    expr = args.eval_expr.strip()
    if not expr:
        print("Error: Empty input. Please enter a valid expression.")
        return 1

    if args.postfix:
        res = _postfix_result(expr, constants=constants)
    else:
        result: EvalResult = evaluate(expr, constants=constants)
        res = result.to_dict()
    logger.debug("Result for %r: %s", expr, res)
    print_result_pretty(res, output_format=args.format, precision=precision)
    return 0 if res.get("ok") else 1


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m shuntcalc_pkg.cli"""
    sys.exit(main_entry())
