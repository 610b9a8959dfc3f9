"""Display formatting for results.

Integers print without a decimal point. Everything else is rounded to a fixed
number of decimal places and trimmed, which hides binary floating-point noise
such as 0.1 + 0.2 == 0.30000000000000004.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

DEFAULT_PRECISION = 10

_CONTEXT = Context(prec=50)


def format_result(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render a number for display.

    Args:
        value: The number to render.
        precision: Maximum decimal places kept for non-integers.

    Returns:
        "8" for 8.0, "0.3" for 0.1 + 0.2, "3.3333333333" for 10 / 3.
        Non-finite values render as "Infinity", "-Infinity" or "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if float(value).is_integer():
        return str(int(value))

    # Ties round away from zero; the context is wide enough for 15 places on any non-integer float
    step = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(step, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Tiny negatives round to "-0"
    if text == "-0":
        return "0"
    return text
