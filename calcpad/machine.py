"""Calculator state machine — turns key presses into new sessions.

Data flow per press:
1. Classify the token (digit/decimal, clear, operator, equals)
2. Run the matching transition on the current Session
3. Return a new Session (invalid presses return the same one)

The calculator is strictly sequential: "7 + 5 ×" starts a new operation
from 5, there is no precedence and no chaining of pending operators.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from calcpad.display import Screen
from calcpad.formatting import apply_operator, format_number, format_result, parse_number
from calcpad.models import (
    CLEAR_KEY,
    DECIMAL_KEY,
    DIGIT_KEYS,
    EQUALS_KEY,
    OPERATOR_KEYS,
    SIGN_KEY,
    Operator,
    Session,
)
from calcpad.theme import default_dark_mode


def _input_digit(session: Session, token: str) -> Session:
    """Start a new operand or extend the current one."""
    if session.ready_to_replace:
        if session.pending_operator is not None:
            equation = session.equation_text + token
        else:
            equation = token
        return replace(
            session,
            display_value="0." if token == DECIMAL_KEY else token,
            ready_to_replace=False,
            equation_text=equation,
        )

    if token == DECIMAL_KEY and DECIMAL_KEY in session.display_value:
        return session

    if session.display_value == "0" and token != DECIMAL_KEY:
        # Swap the lone zero instead of growing "05"
        head, sep, _ = session.equation_text.rpartition(" ")
        return replace(
            session,
            display_value=token,
            equation_text=head + sep + token,
        )

    return replace(
        session,
        display_value=session.display_value + token,
        equation_text=session.equation_text + token,
    )


def _clear(session: Session) -> Session:
    """Back to the initial record, keeping the last calculation subtitle."""
    return Session(last_result=session.last_result)


def _input_operator(session: Session, token: str) -> Session:
    current = parse_number(session.display_value)

    if token == SIGN_KEY:
        return replace(session, display_value=format_number(-current))

    operator = Operator(token)
    return replace(
        session,
        pending_operator=operator,
        ready_to_replace=True,
        equation_text=f"{format_number(current)} {operator.display_glyph} ",
    )


def _evaluate(session: Session) -> Session:
    operator = session.pending_operator
    if operator is None:
        return session

    # The first operand is whatever was on display at the last operator press
    previous = parse_number(session.equation_text.split(" ")[0])
    current = parse_number(session.display_value)
    formatted = format_result(apply_operator(operator, previous, current))

    return replace(
        session,
        display_value=formatted,
        ready_to_replace=True,
        pending_operator=None,
        equation_text="",
        last_result=(
            f"{format_number(previous)} {operator.value} "
            f"{format_number(current)} = {formatted}"
        ),
    )


def press(session: Session, token: str) -> Session:
    """Apply one key press and return the resulting session.

    Unknown tokens leave the session as it is.
    """
    if token in DIGIT_KEYS or token == DECIMAL_KEY:
        return _input_digit(session, token)
    if token == CLEAR_KEY:
        return _clear(session)
    if token in OPERATOR_KEYS:
        return _input_operator(session, token)
    if token == EQUALS_KEY:
        return _evaluate(session)
    return session


def press_all(session: Session, tokens: Iterable[str]) -> Session:
    """Fold a sequence of key presses through press()."""
    for token in tokens:
        session = press(session, token)
    return session


class Calculator:
    """Owns the current session and theme flag for a rendering surface."""

    def __init__(self, dark_mode: Optional[bool] = None) -> None:
        self.session = Session()
        self.dark_mode = default_dark_mode() if dark_mode is None else dark_mode

    def press(self, token: str) -> Session:
        self.session = press(self.session, token)
        return self.session

    def reset_session(self) -> Session:
        """Start over, dropping the last calculation as well."""
        self.session = Session()
        return self.session

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    def screen(self) -> Screen:
        return Screen.from_session(self.session, self.dark_mode)
