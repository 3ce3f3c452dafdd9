"""Data models for the calcpad calculator.

Operator enum, the key token sets, and Session — the immutable record every
key press turns into a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(str, Enum):
    """Binary operators that wait for a second operand."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    PERCENT = "%"

    @property
    def display_glyph(self) -> str:
        """Glyph used in the running equation text."""
        if self is Operator.DIVIDE:
            return "/"
        return self.value


DIGIT_KEYS = tuple("0123456789")
DECIMAL_KEY = "."
CLEAR_KEY = "C"
EQUALS_KEY = "="
SIGN_KEY = "+/-"

# Everything handled by the operator transition, including the immediate +/-
OPERATOR_KEYS = frozenset({op.value for op in Operator} | {SIGN_KEY})

ALL_KEYS = frozenset(DIGIT_KEYS) | {DECIMAL_KEY, CLEAR_KEY, EQUALS_KEY} | OPERATOR_KEYS


@dataclass(frozen=True)
class Session:
    """State of one calculator session.

    Frozen: transitions return a new Session so two sessions built from the
    same presses compare equal.
    """

    display_value: str = "0"
    ready_to_replace: bool = True
    pending_operator: Optional[Operator] = None
    equation_text: str = ""
    last_result: str = ""

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "display_value": self.display_value,
            "ready_to_replace": self.ready_to_replace,
            "pending_operator": self.pending_operator.value if self.pending_operator else None,
            "equation_text": self.equation_text,
            "last_result": self.last_result,
        }
