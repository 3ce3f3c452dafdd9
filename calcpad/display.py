"""Rendering surface for calcpad — derives what to show and draws it with Rich.

Screen is the read-only view of a Session plus the theme flag: equation line,
main value with its font-size hint, and the last-calculation subtitle.
render_screen turns a Screen into a Rich renderable with the fixed keypad.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calcpad.models import ALL_KEYS, Session
from calcpad.theme import ButtonKind, palette_for

BASE_FONT_SIZE = 80
_FONT_SHRINK_AFTER = 8  # characters shown at full size
_FONT_SHRINK_STEP = 5


def font_size_for(display_value: str) -> int:
    """Font size hint for the main value, shrinking past 8 characters.

    Not clamped; the surface decides how small it can go.
    """
    if len(display_value) > _FONT_SHRINK_AFTER:
        return BASE_FONT_SIZE - (len(display_value) - _FONT_SHRINK_AFTER) * _FONT_SHRINK_STEP
    return BASE_FONT_SIZE


@dataclass(frozen=True)
class Screen:
    """Everything the surface shows for one session."""

    equation: str
    value: str
    font_size: int
    subtitle: str
    dark_mode: bool = True

    @classmethod
    def from_session(cls, session: Session, dark_mode: bool = True) -> Screen:
        return cls(
            equation=session.equation_text,
            value=session.display_value,
            font_size=font_size_for(session.display_value),
            subtitle=session.last_result,
            dark_mode=dark_mode,
        )


@dataclass(frozen=True)
class Button:
    label: str
    kind: ButtonKind
    wide: bool = False


_D, _O, _S = ButtonKind.DIGIT, ButtonKind.OPERATION, ButtonKind.SPECIAL

KEYPAD: tuple[tuple[Button, ...], ...] = (
    (Button("C", _S), Button("+/-", _S), Button("%", _S), Button("÷", _O)),
    (Button("7", _D), Button("8", _D), Button("9", _D), Button("×", _O)),
    (Button("4", _D), Button("5", _D), Button("6", _D), Button("-", _O)),
    (Button("1", _D), Button("2", _D), Button("3", _D), Button("+", _O)),
    (Button("0", _D, wide=True), Button(".", _D), Button("=", _O)),
)

# Typed labels for terminals without the keypad glyphs (keys are lowercase)
ALIASES: dict[str, str] = {
    "*": "×",
    "x": "×",
    "/": "÷",
    "±": "+/-",
    "c": "C",
    "ac": "C",
    "enter": "=",
}


def resolve_token(label: str) -> Optional[str]:
    """Map a typed label onto a key token, or None if it names no key."""
    label = label.strip()
    if label in ALL_KEYS:
        return label
    return ALIASES.get(label.lower())


def _button_cell(button: Button, dark_mode: bool) -> Text:
    bg, fg = palette_for(dark_mode).button_colors(button.kind)
    justify = "left" if button.wide else "center"
    return Text(f" {button.label} ", style=f"bold {fg} on {bg}", justify=justify)


def _render_keypad(dark_mode: bool) -> Table:
    palette = palette_for(dark_mode)
    table = Table(
        show_header=False,
        box=None,
        padding=(0, 1),
        expand=True,
        style=f"on {palette.background}",
    )
    for _ in range(4):
        table.add_column(justify="center", ratio=1)

    for row in KEYPAD:
        cells: list[Text] = []
        for button in row:
            cells.append(_button_cell(button, dark_mode))
            if button.wide:
                # The wide button's second column keeps its colour
                bg, _ = palette.button_colors(button.kind)
                cells.append(Text(" ", style=f"on {bg}"))
        table.add_row(*cells)
    return table


def render_header(screen: Screen) -> Text:
    """The "Dark Mode" switch line."""
    palette = palette_for(screen.dark_mode)
    switch = " ● on " if screen.dark_mode else " ○ off "
    return Text.assemble(
        ("Dark Mode ", f"bold {palette.text}"),
        (switch, f"{palette.switch_thumb} on {palette.switch_track}"),
        justify="right",
    )


def value_style(screen: Screen) -> str:
    """Style of the main value: bold at full size, dimmed once shrunk."""
    palette = palette_for(screen.dark_mode)
    if screen.font_size >= BASE_FONT_SIZE:
        return f"bold {palette.text}"
    return f"dim {palette.text}"


def render_screen(screen: Screen) -> Group:
    """Build the full calculator screen: theme switch, display, keypad."""
    palette = palette_for(screen.dark_mode)

    display = Panel(
        Group(
            Text(screen.equation, style=palette.text, justify="right"),
            Text(screen.value, style=value_style(screen), justify="right"),
            Text(screen.subtitle, style=palette.subtitle, justify="right"),
        ),
        box=box.ROUNDED,
        style=f"on {palette.display_bg}",
        border_style=palette.subtitle,
    )

    return Group(render_header(screen), display, _render_keypad(screen.dark_mode))
