"""Key-press calculator state.

A Keypad turns discrete key presses (digits, ".", operators, clear, delete,
equals) into an expression string and evaluates it on "=". It owns all the
mutable state; evaluate() and format_result() stay pure.

The expression is built as "<number> <op> <number> <op> ", with a single space
on each side of every operator, which is the shape the tokenizer expects.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from calcpad.evaluator import evaluate
from calcpad.formatter import DEFAULT_PRECISION, format_result
from calcpad.models import OPERATOR_SYMBOLS, EvaluationError, KeypadState

logger = logging.getLogger(__name__)

CLEAR = "clear"
DELETE = "delete"
EQUALS = "="
DECIMAL_POINT = "."
DIGITS = frozenset("0123456789")

# Shown when a result overflows; "Infinity" can't be typed back in
OUT_OF_RANGE = "Result out of range"

# Keyboard key names → keypad values. Unmapped keys are ignored.
KEY_MAP: dict[str, str] = {
    **{d: d for d in DIGITS},
    **{op: op for op in OPERATOR_SYMBOLS},
    ".": DECIMAL_POINT,
    "Enter": EQUALS,
    "=": EQUALS,
    "Backspace": DELETE,
    "Delete": DELETE,
    "Escape": CLEAR,
    "c": CLEAR,
    "C": CLEAR,
    CLEAR: CLEAR,
    DELETE: DELETE,
}


@dataclass
class Keypad:
    """Calculator caller state: current number, pending expression, last error."""

    display: str = "0"
    expression: str = ""
    error: str = ""
    precision: int = DEFAULT_PRECISION

    @property
    def state(self) -> KeypadState:
        if self.error:
            return KeypadState.ERROR
        if self.expression:
            return KeypadState.ACCUMULATING
        return KeypadState.IDLE

    @property
    def screen(self) -> str:
        """What the main display shows: the error if any, else the current number."""
        return self.error or self.display

    def press(self, key: str) -> bool:
        """Handle one key press.

        Args:
            key: A keypad value ("7", "+", "clear", "=") or a keyboard key
                name ("Enter", "Backspace", "Escape").

        Returns:
            False if the key is not recognised, True otherwise.
        """
        value = KEY_MAP.get(key)
        if value is None:
            logger.debug("Ignoring unmapped key %r", key)
            return False

        # Any input dismisses a pending error
        self.error = ""

        if value == CLEAR:
            self.display = "0"
            self.expression = ""
        elif value == DELETE:
            self.display = self.display[:-1] if len(self.display) > 1 else "0"
        elif value == EQUALS:
            self._submit()
        elif value in OPERATOR_SYMBOLS:
            self._push_operator(value)
        elif value == DECIMAL_POINT:
            if DECIMAL_POINT not in self.display:
                self.display += DECIMAL_POINT
        else:
            self.display = value if self.display == "0" else self.display + value
        return True

    def press_many(self, keys: Iterable[str]) -> Keypad:
        """Press each key in order. Returns self for chaining."""
        for key in keys:
            self.press(key)
        return self

    def _push_operator(self, op: str) -> None:
        # Nothing typed yet: an expression can't start with an operator
        if self.display == "0" and not self.expression:
            return
        self.expression += f"{self.display} {op} "
        self.display = "0"

    def _submit(self) -> None:
        full = self.expression + self.display
        if not full or full == "0":
            return
        try:
            result = evaluate(full)
        except EvaluationError as e:
            logger.info("Rejected %r: %s", full, e)
            self.error = str(e)
            self.expression = ""
            return
        if not math.isfinite(result):
            logger.info("Non-finite result for %r: %r", full, result)
            self.error = OUT_OF_RANGE
            self.display = "0"
            self.expression = ""
            return
        self.display = format_result(result, self.precision)
        self.expression = ""
