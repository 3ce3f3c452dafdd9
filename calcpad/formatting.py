"""Number parsing, arithmetic and text rendering for calcpad.

The display works on text, so every operand goes through parse_number on the
way in and format_number / format_result on the way out. None of these raise:
a division by zero comes back as inf or nan and renders as such.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from calcpad.models import Operator

# Leading numeric prefix of a display string: "12.", ".5", "-0", "inf", "1e+21"
_NUMBER_RE = re.compile(
    r"^\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?))",
    re.IGNORECASE,
)

_RESULT_PLACES = Decimal("1e-8")

# Integers at or above this magnitude switch to exponent notation.
_EXPONENT_THRESHOLD = 1e21


def parse_number(text: str) -> float:
    """Parse the leading number of a display string.

    Trailing junk is ignored ("0." is 0, "5.x" is 5). Text with no leading
    number parses to nan.
    """
    match = _NUMBER_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def _positional(value: Decimal) -> str:
    return format(value, "f")


def format_number(value: float) -> str:
    """Shortest text for a float.

    Whole numbers drop the decimal point and -0.0 renders as "0". Other values
    use the shortest round-trip decimal, always written out positionally.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if abs(value) >= _EXPONENT_THRESHOLD:
            return repr(value)
        return str(int(value))
    return _positional(Decimal(repr(value)))


def format_result(value: float) -> str:
    """Render the result of "=".

    Non-integers are rounded half-up to 8 fractional digits of their shortest
    decimal form, then trailing zeros are dropped.
    """
    if not math.isfinite(value) or value.is_integer():
        return format_number(value)
    rounded = Decimal(repr(value)).quantize(_RESULT_PLACES, rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0"
    return _positional(rounded.normalize())


def _divide(first: float, second: float) -> float:
    # IEEE-754 quotient where Python would raise ZeroDivisionError
    if second == 0:
        if first == 0 or math.isnan(first):
            return math.nan
        return math.copysign(math.inf, first) * math.copysign(1.0, second)
    return first / second


def apply_operator(operator: Operator, first: float, second: float) -> float:
    """Combine two operands with a pending operator."""
    if operator is Operator.ADD:
        return first + second
    if operator is Operator.SUBTRACT:
        return first - second
    if operator is Operator.MULTIPLY:
        return first * second
    if operator is Operator.DIVIDE:
        return _divide(first, second)
    if operator is Operator.PERCENT:
        return first * (second / 100)
    raise ValueError(f"Unknown operator: {operator!r}")
