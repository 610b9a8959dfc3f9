"""Two-pass precedence evaluator.

Reduces a validated token list in place:
1. Fold every * and / left to right
2. Fold every + and - left to right
3. Exactly one number must remain

Each fold replaces the window [left, op, right] with its result and resumes
the scan at the slot the result now occupies, so chains like 2 * 3 * 4 and
100 - 20 - 30 fold strictly left to right.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable

from calcpad.models import ErrorKind, EvaluationError, Operator, Token, is_number
from calcpad.tokenizer import tokenize

logger = logging.getLogger(__name__)

_APPLY: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
}

_MULTIPLICATIVE = frozenset({Operator.MUL, Operator.DIV})
_ADDITIVE = frozenset({Operator.ADD, Operator.SUB})


def _fold(left: Token, op: Operator, right: Token) -> float:
    """Apply one binary operation."""
    if not (is_number(left) and is_number(right)):
        raise EvaluationError(ErrorKind.INVALID_EXPRESSION)
    if op is Operator.DIV and right == 0:
        raise EvaluationError(ErrorKind.DIVISION_BY_ZERO)
    return _APPLY[op](left, right)


def _reduce_pass(items: list[Token], tier: frozenset[Operator]) -> None:
    """Fold every operator of one precedence tier, left to right, in place."""
    i = 0
    while i < len(items):
        token = items[i]
        if is_number(token) or token not in tier:
            i += 1
            continue
        if i == 0 or i + 1 >= len(items):
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION)

        result = _fold(items[i - 1], token, items[i + 1])
        logger.debug("Fold %r %s %r -> %r", items[i - 1], token.value, items[i + 1], result)
        # The result takes the window's place; items[i] is now the next operator
        items[i - 1:i + 2] = [result]


def reduce_tokens(tokens: list[Token]) -> float:
    """Reduce a validated token sequence to a single number.

    The caller's list is not modified.
    """
    items = list(tokens)
    _reduce_pass(items, _MULTIPLICATIVE)
    _reduce_pass(items, _ADDITIVE)

    if len(items) != 1 or not is_number(items[0]):
        raise EvaluationError(ErrorKind.INVALID_EXPRESSION)
    return items[0]


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression like "5 + 3 * 2".

    Tokens must be separated by whitespace. * and / bind tighter than + and -;
    operators of the same tier apply left to right.

    Args:
        expression: The expression text.

    Returns:
        The result as a float.

    Raises:
        EvaluationError: The expression is blank, malformed or divides by zero.
            err.kind tells which.
    """
    tokens = tokenize(expression)
    result = reduce_tokens(tokens)
    logger.debug("%r = %r", expression, result)
    return result
