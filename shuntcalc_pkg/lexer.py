"""Lexical analysis: expression text to a tuple of tokens.

Numbers follow ``(\\d+(\\.\\d*)?|\\.\\d+)([eE][+-]?\\d+)?``; a leading sign is
never part of a literal, it is lexed as an operator and resolved by the
converter. Identifiers are maximal runs of ASCII letters and must name a
function or, when constants are enabled, a constant.
"""

from __future__ import annotations

from functools import lru_cache

from . import config
from .config import (
    CACHE_SIZE_TOKENIZE,
    CONSTANTS,
    FUNCTIONS,
    IDENTIFIER_REGEX,
    NUMBER_REGEX,
    OPERATOR_SYMBOLS,
)
from .logging_config import get_logger
from .types import Function, LeftParen, LexError, Number, Operator, RightParen, Token

logger = get_logger("lexer")


def tokenize(text: str, constants: bool | None = None) -> tuple[Token, ...]:
    """Split an expression into tokens.

    Args:
        text: Raw expression (e.g. "2 * sin(pi / 2)")
        constants: Substitute ``pi`` and ``e``; None uses config.ENABLE_CONSTANTS

    Returns:
        Tuple of Number, Operator, Function, LeftParen and RightParen tokens

    Raises:
        LexError: TOO_LONG, INVALID_CHARACTER or UNKNOWN_IDENTIFIER
    """
    if constants is None:
        constants = config.ENABLE_CONSTANTS
    if len(text) > config.MAX_INPUT_LENGTH:
        raise LexError(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    tokens = _tokenize(text, bool(constants))
    logger.debug("Tokenized %r into %d tokens", text, len(tokens))
    return tokens


@lru_cache(maxsize=CACHE_SIZE_TOKENIZE)
def _tokenize(text: str, constants: bool) -> tuple[Token, ...]:
    tokens: list[Token] = []
    pos = 0
    end = len(text)
    while pos < end:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue

        number = NUMBER_REGEX.match(text, pos)
        if number:
            tokens.append(Number(float(number.group(0))))
            pos = number.end()
            continue

        if char == "(":
            tokens.append(LeftParen())
            pos += 1
            continue
        if char == ")":
            tokens.append(RightParen())
            pos += 1
            continue

        symbol = next((s for s in OPERATOR_SYMBOLS if text.startswith(s, pos)), None)
        if symbol is not None:
            tokens.append(Operator(symbol))
            pos += len(symbol)
            continue

        identifier = IDENTIFIER_REGEX.match(text, pos)
        if identifier:
            tokens.append(_resolve_identifier(identifier.group(0), pos, constants))
            pos = identifier.end()
            continue

        raise LexError(f"Invalid character {char!r} at position {pos}", "INVALID_CHARACTER", pos)
    return tuple(tokens)


def _resolve_identifier(name: str, pos: int, constants: bool) -> Token:
    if name in FUNCTIONS:
        return Function(name)
    if constants and name in CONSTANTS:
        return Number(CONSTANTS[name])
    raise LexError(f"Unknown identifier {name!r} at position {pos}", "UNKNOWN_IDENTIFIER", pos)
