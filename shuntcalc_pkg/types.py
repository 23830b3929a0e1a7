"""Token, table and result types shared by every pipeline stage."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorSpec:
    """Precedence (>= 1) and associativity of one operator symbol."""

    precedence: int
    associativity: Associativity

    @property
    def left_associative(self) -> bool:
        return self.associativity is Associativity.LEFT


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Operator:
    """Operator token. ``unary`` is set by the converter for prefix signs."""

    symbol: str
    unary: bool = False


@dataclass(frozen=True)
class Function:
    name: str


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


Token = Union[Number, Operator, Function, LeftParen, RightParen]


class CalcError(Exception):
    """Base class for failures raised inside the evaluation pipeline."""

    stage = "engine"

    def __init__(self, message: str, code: str, position: int | None = None):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class LexError(CalcError):
    """Raised when the input contains an unknown character or identifier."""

    stage = "lex"


class ConvertError(CalcError):
    """Raised when parentheses do not pair up."""

    stage = "convert"


class EvalError(CalcError):
    """Raised when a postfix sequence cannot be reduced to one value."""

    stage = "eval"


@dataclass(frozen=True)
class EngineError:
    """Uniform description of a failed evaluation."""

    stage: str
    code: str
    detail: str
    position: int | None = None

    @classmethod
    def from_exception(cls, exc: CalcError) -> EngineError:
        return cls(stage=exc.stage, code=exc.code, detail=exc.message, position=exc.position)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        error_dict: dict[str, Any] = {
            "stage": self.stage,
            "code": self.code,
            "detail": self.detail,
        }
        if self.position is not None:
            error_dict["position"] = self.position
        return error_dict


def _json_float(value: float) -> float | str:
    # JSON has no literal for nan/inf
    if math.isfinite(value):
        return value
    return str(value)


@dataclass
class EvalResult:
    """Result of evaluating an expression."""

    ok: bool
    value: float | None = None
    error: EngineError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = _json_float(self.value)
        if self.error is not None:
            result_dict["error"] = self.error.to_dict()
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r})"
        return f"EvalResult(ok=True, value={self.value!r})"
