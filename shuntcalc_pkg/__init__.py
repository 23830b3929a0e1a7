"""shuntcalc package: lexer, shunting-yard converter and postfix evaluator."""

__all__ = [
    "config",
    "types",
    "lexer",
    "shunting_yard",
    "evaluator",
    "engine",
    "formatting",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "to_postfix_notation",
    "validate_expression",
]
