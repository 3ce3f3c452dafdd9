"""CLI for the calcpad calculator.

Usage:
    python -m calcpad keys                    # Show the keypad tokens
    python -m calcpad press 7 + 5 =           # Press keys, show the screen
    python -m calcpad press 6 / 4 = --json    # Dump the session record
    python -m calcpad run [--light]           # Interactive session
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from calcpad.display import ALIASES, KEYPAD, render_screen, resolve_token
from calcpad.machine import Calculator
from calcpad.theme import palette_for

app = typer.Typer(
    name="calcpad",
    help="Single-screen keypad calculator",
    no_args_is_help=True,
)
console = Console()

_QUIT_WORDS = {"q", "quit", "exit"}
_THEME_WORD = "theme"
_RESET_WORD = "reset"


def _dark_mode(light: bool) -> Optional[bool]:
    # None defers to CALCPAD_THEME
    return False if light else None


@app.command("keys")
def cmd_keys() -> None:
    """Show every keypad token with its kind and typed aliases."""
    table = Table(title="Keypad", show_header=True, header_style="bold")
    table.add_column("Key", style="green", justify="center")
    table.add_column("Kind")
    table.add_column("Aliases", style="dim")

    for row in KEYPAD:
        for button in row:
            aliases = sorted(a for a, token in ALIASES.items() if token == button.label)
            table.add_row(button.label, button.kind.value, ", ".join(aliases) or "--")

    console.print()
    console.print(table)
    console.print()


@app.command("press")
def cmd_press(
    labels: list[str] = typer.Argument(help="Keys to press in order, e.g. 7 + 5 ="),
    light: bool = typer.Option(False, "--light", help="Use the light palette"),
    as_json: bool = typer.Option(False, "--json", help="Print the session record as JSON"),
) -> None:
    """Press a sequence of keys on a fresh calculator and show the result."""
    tokens = []
    for label in labels:
        token = resolve_token(label)
        if token is None:
            console.print(f"[red]Unknown key:[/red] {label!r}. Run 'calcpad keys' for the keypad.")
            raise typer.Exit(1)
        tokens.append(token)

    calc = Calculator(dark_mode=_dark_mode(light))
    for token in tokens:
        calc.press(token)

    if as_json:
        data = calc.session.to_dict()
        data["theme"] = palette_for(calc.dark_mode).name
        console.print_json(data=data)
        return
    console.print(render_screen(calc.screen()))


@app.command("run")
def cmd_run(
    light: bool = typer.Option(False, "--light", help="Start with the light palette"),
) -> None:
    """Interactive session: type space-separated keys, 'theme' to switch, 'reset' to start over, 'q' to quit."""
    calc = Calculator(dark_mode=_dark_mode(light))
    console.print(render_screen(calc.screen()))

    while True:
        try:
            line = console.input("[dim]keys>[/dim] ")
        except EOFError:
            break

        for word in line.split():
            if word.lower() in _QUIT_WORDS:
                return
            if word.lower() == _THEME_WORD:
                calc.toggle_theme()
                continue
            if word.lower() == _RESET_WORD:
                calc.reset_session()
                continue
            token = resolve_token(word)
            if token is None:
                console.print(f"[yellow]Skipped unknown key:[/yellow] {word}")
                continue
            calc.press(token)

        console.print(render_screen(calc.screen()))


if __name__ == "__main__":
    app()
