"""Rich rendering for calcpad results and keypad screens."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calcpad.keypad import Keypad
from calcpad.models import EvaluationError, KeypadState

_STATE_STYLES = {
    KeypadState.IDLE: "green",
    KeypadState.ACCUMULATING: "cyan",
    KeypadState.ERROR: "red",
}


def render_error(err: EvaluationError, console: Console) -> None:
    """Print an evaluation failure the same way everywhere."""
    console.print(f"[red]Error:[/red] {escape(str(err))} [dim]({err.kind.value})[/dim]", highlight=False)


def render_keypad(keypad: Keypad, console: Console) -> None:
    """Render a keypad's expression line, screen and state as a table."""
    table = Table(title="calcpad", show_header=False, min_width=24)
    table.add_column("Field", style="dim")
    table.add_column("Value", justify="right")

    style = _STATE_STYLES[keypad.state]
    table.add_row("Expression", keypad.expression.rstrip() or "[dim]--[/dim]")
    screen_style = "bold red" if keypad.error else "bold"
    table.add_row("Display", f"[{screen_style}]{escape(keypad.screen)}[/{screen_style}]")
    table.add_row("State", f"[{style}]{keypad.state.value}[/{style}]")

    console.print()
    console.print(table)
    console.print()
