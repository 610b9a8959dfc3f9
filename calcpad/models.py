"""Data models for calcpad.

Operator, ErrorKind, EvaluationError, KeypadState: the typed structures that
flow through tokenizer → evaluator → formatter → keypad/CLI.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Operator(str, Enum):
    """Binary operator symbols."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


OPERATOR_SYMBOLS = frozenset(op.value for op in Operator)

# A token is either a parsed number or an operator symbol.
Token = Union[float, Operator]


class ErrorKind(str, Enum):
    """Why an expression was rejected."""

    EMPTY_EXPRESSION = "empty-expression"
    INVALID_NUMBER = "invalid-number"
    MUST_START_WITH_NUMBER = "must-start-with-number"
    MUST_END_WITH_NUMBER = "must-end-with-number"
    DIVISION_BY_ZERO = "division-by-zero"
    INVALID_EXPRESSION = "invalid-expression"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_EXPRESSION: "Empty expression",
    ErrorKind.INVALID_NUMBER: "Invalid number",
    ErrorKind.MUST_START_WITH_NUMBER: "Must start with a number",
    ErrorKind.MUST_END_WITH_NUMBER: "Must end with a number",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.INVALID_EXPRESSION: "Invalid expression",
}


class EvaluationError(ValueError):
    """An expression could not be evaluated.

    Carries the ErrorKind and, for INVALID_NUMBER, the offending token text.
    str(err) is the message shown to the user.
    """

    def __init__(self, kind: ErrorKind, token: Optional[str] = None) -> None:
        self.kind = kind
        self.token = token
        message = _MESSAGES[kind]
        if token is not None:
            message = f"{message}: {token}"
        super().__init__(message)


class KeypadState(str, Enum):
    """States of the key-press caller."""

    IDLE = "idle"
    ACCUMULATING = "accumulating"
    ERROR = "error"


def is_number(token: Token) -> bool:
    """True for numeric tokens (operators are str subclasses, numbers are floats)."""
    return isinstance(token, float)
