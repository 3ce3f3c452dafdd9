"""Colour palettes for the calcpad screen.

Two fixed palettes, dark and light. The startup theme comes from the
CALCPAD_THEME environment variable ("dark" unless set to "light").
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class ButtonKind(str, Enum):
    """Visual class of a keypad button."""

    DIGIT = "digit"
    OPERATION = "operation"
    SPECIAL = "special"


@dataclass(frozen=True)
class Palette:
    """All colours used to draw one theme variant.

    The terminal draws no elevation, so the *_shadow colours are carried for
    surfaces that render button shadows. `name` is what CALCPAD_THEME and
    the --json output call the variant.
    """

    name: str
    background: str
    display_bg: str
    text: str
    subtitle: str
    digit_bg: str
    digit_shadow: str
    operation_bg: str
    operation_shadow: str
    special_bg: str
    special_shadow: str
    special_text: str
    switch_track: str
    switch_thumb: str

    def button_colors(self, kind: ButtonKind) -> tuple[str, str]:
        """Return (background, foreground) for a button kind."""
        if kind == ButtonKind.OPERATION:
            return self.operation_bg, "#ffffff"
        if kind == ButtonKind.SPECIAL:
            return self.special_bg, self.special_text
        return self.digit_bg, self.text


DARK = Palette(
    name="dark",
    background="#101014",
    display_bg="#1a1a23",
    text="#ffffff",
    subtitle="#9e9ea7",
    digit_bg="#2d2d39",
    digit_shadow="#222230",
    operation_bg="#0088ff",
    operation_shadow="#0066cc",
    special_bg="#9e9ea7",
    special_shadow="#89898f",
    special_text="#1a1a23",
    switch_track="#81b0ff",
    switch_thumb="#f5dd4b",
)

LIGHT = Palette(
    name="light",
    background="#f8f9fa",
    display_bg="#e9ecef",
    text="#212529",
    subtitle="#6c757d",
    digit_bg="#e9ecef",
    digit_shadow="#d8dbe0",
    operation_bg="#0088ff",
    operation_shadow="#0077dd",
    special_bg="#ced4da",
    special_shadow="#b1b6bc",
    special_text="#495057",
    switch_track="#767577",
    switch_thumb="#f4f3f4",
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK if dark_mode else LIGHT


def default_dark_mode() -> bool:
    """Startup theme from CALCPAD_THEME. Anything but "light" means dark."""
    return os.environ.get("CALCPAD_THEME", DARK.name).strip().lower() != LIGHT.name
