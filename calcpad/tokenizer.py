"""Tokenizer and structural validator.

Splits an expression on whitespace, classifies each piece as an Operator or a
float, then checks the shape of the sequence before it reaches the evaluator:

- starts with a number
- ends with a number
- numbers and operators alternate
"""

from __future__ import annotations

import logging
import math
import re

from calcpad.models import OPERATOR_SYMBOLS, ErrorKind, EvaluationError, Operator, Token, is_number

logger = logging.getLogger(__name__)

# Plain decimal literals: "5", "-2.5", ".5", "3.", "1e-3". No inf/nan, no underscores.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE_RE = re.compile(r"\s+")


def _parse_number(text: str) -> float:
    if not _NUMBER_RE.fullmatch(text):
        raise EvaluationError(ErrorKind.INVALID_NUMBER, text)
    value = float(text)
    # Literals like 1e999 overflow to inf
    if not math.isfinite(value):
        raise EvaluationError(ErrorKind.INVALID_NUMBER, text)
    return value


def split_tokens(expression: str) -> list[Token]:
    """Classify each whitespace-separated piece of an expression.

    Raises:
        EvaluationError: EMPTY_EXPRESSION for blank input, INVALID_NUMBER for a
            piece that is neither an operator nor a numeric literal.
    """
    text = expression.strip()
    if not text:
        raise EvaluationError(ErrorKind.EMPTY_EXPRESSION)

    tokens: list[Token] = []
    for piece in _WHITESPACE_RE.split(text):
        if piece in OPERATOR_SYMBOLS:
            tokens.append(Operator(piece))
        else:
            tokens.append(_parse_number(piece))
    return tokens


def validate_structure(tokens: list[Token]) -> list[Token]:
    """Check that a token sequence is number (operator number)*.

    Boundary checks run first so that "+ 5" and "5 +" report the specific
    kind; interior breaks in alternation are INVALID_EXPRESSION.
    """
    if not tokens:
        raise EvaluationError(ErrorKind.EMPTY_EXPRESSION)
    if not is_number(tokens[0]):
        raise EvaluationError(ErrorKind.MUST_START_WITH_NUMBER)
    if not is_number(tokens[-1]):
        raise EvaluationError(ErrorKind.MUST_END_WITH_NUMBER)

    for i, token in enumerate(tokens):
        # Even slots hold numbers, odd slots hold operators
        if is_number(token) != (i % 2 == 0):
            logger.debug("Alternation broken at position %d: %r", i, token)
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION)
    return tokens


def tokenize(expression: str) -> list[Token]:
    """Split and validate an expression in one step."""
    tokens = validate_structure(split_tokens(expression))
    logger.debug("Tokens: %s", tokens)
    return tokens
