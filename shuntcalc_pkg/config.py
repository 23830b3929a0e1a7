"""Centralized configuration for shuntcalc.

This module defines:
- Input validation limits and cache sizes
- Output precision used by the formatter and CLI
- Read-only operator, function and constant tables
- Regex patterns for lexing

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SHUNTCALC_)
"""

import math
import os
import re
from types import MappingProxyType

import numpy as np

from .types import Associativity, OperatorSpec

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("shuntcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Feature switches
ENABLE_CONSTANTS = (
    os.getenv("SHUNTCALC_ENABLE_CONSTANTS", "true").lower() == "true"
)  # substitute pi / e at lex time

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("SHUNTCALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Output
OUTPUT_PRECISION = int(
    os.getenv("SHUNTCALC_OUTPUT_PRECISION", "6")
)  # decimal places
LOG_LEVEL = os.getenv("SHUNTCALC_LOG_LEVEL", "WARNING")

# Cache configuration
CACHE_SIZE_TOKENIZE = int(os.getenv("SHUNTCALC_CACHE_SIZE_TOKENIZE", "1024"))

# Binary operators. "**" is an alias of "^".
BINARY_OPERATORS = MappingProxyType(
    {
        "+": OperatorSpec(2, Associativity.LEFT),
        "-": OperatorSpec(2, Associativity.LEFT),
        "*": OperatorSpec(3, Associativity.LEFT),
        "/": OperatorSpec(3, Associativity.LEFT),
        "^": OperatorSpec(5, Associativity.RIGHT),
        "**": OperatorSpec(5, Associativity.RIGHT),
    }
)

# Prefix signs bind tighter than * and / but looser than ^ (-2^2 == -4).
UNARY_OPERATORS = MappingProxyType(
    {
        "+": OperatorSpec(4, Associativity.RIGHT),
        "-": OperatorSpec(4, Associativity.RIGHT),
    }
)

# Longest symbols first so "**" wins over "*"
OPERATOR_SYMBOLS = tuple(sorted(BINARY_OPERATORS, key=len, reverse=True))

FUNCTIONS = MappingProxyType(
    {
        "sin": np.sin,
        "cos": np.cos,
        "tan": np.tan,
        "sqrt": np.sqrt,
        "log": np.log10,
        "ln": np.log,
        "exp": np.exp,
    }
)

CONSTANTS = MappingProxyType(
    {
        "pi": math.pi,
        "e": math.e,
    }
)

NUMBER_REGEX = re.compile(r"(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
IDENTIFIER_REGEX = re.compile(r"[A-Za-z]+")
