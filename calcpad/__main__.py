"""CLI for calcpad.

Usage:
    python -m calcpad eval "5 + 3 * 2"          # Evaluate and format
    python -m calcpad eval "10 / 3" --raw       # Unformatted float
    python -m calcpad format 0.30000000000000004
    python -m calcpad keys "5+3*2="             # Drive the keypad
    python -m calcpad keys --words "7 Backspace 8 Enter"
    python -m calcpad repl                      # Interactive session
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from calcpad.config import Settings, load_settings
from calcpad.display import render_error, render_keypad
from calcpad.evaluator import evaluate
from calcpad.formatter import format_result
from calcpad.keypad import Keypad
from calcpad.models import EvaluationError

app = typer.Typer(
    name="calcpad",
    help="Four-function calculator with operator precedence",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()
logger = logging.getLogger("calcpad")

_QUIT_WORDS = ("quit", "exit", "q")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _settings(ctx: typer.Context) -> Settings:
    # Loaded once by the callback; commands invoked without it load their own
    if not isinstance(ctx.obj, Settings):
        ctx.obj = load_settings()
    return ctx.obj


def _precision(ctx: typer.Context, option: Optional[int]) -> int:
    return option if option is not None else _settings(ctx).precision


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Evaluate "a OP b OP c" expressions with + - * /."""
    settings = load_settings()
    ctx.obj = settings
    _setup_logging("DEBUG" if verbose else settings.log_level)


@app.command("eval")
def cmd_eval(
    ctx: typer.Context,
    expression: str = typer.Argument(help="Expression with space-separated tokens, e.g. '5 + 3 * 2'"),
    raw: bool = typer.Option(False, "--raw", help="Print the unformatted float"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, max=15, help="Decimal places to keep"),
) -> None:
    """Evaluate an expression and print the result."""
    try:
        result = evaluate(expression)
    except EvaluationError as e:
        render_error(e, console)
        raise typer.Exit(1)
    out.print(repr(result) if raw else format_result(result, _precision(ctx, precision)), highlight=False)


@app.command("format")
def cmd_format(
    ctx: typer.Context,
    number: str = typer.Argument(help="Number to format, e.g. 0.30000000000000004"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, max=15, help="Decimal places to keep"),
) -> None:
    """Format a number the way results are displayed."""
    try:
        value = float(number)
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid number: {escape(number)}")
        raise typer.Exit(1)
    out.print(format_result(value, _precision(ctx, precision)), highlight=False)


@app.command("keys")
def cmd_keys(
    ctx: typer.Context,
    sequence: str = typer.Argument(help="Keys to press, e.g. '5+3*2=' or 'c' to clear"),
    words: bool = typer.Option(False, "--words", "-w", help="Split on whitespace so keys like 'Enter' or 'delete' work"),
) -> None:
    """Press keys on a fresh keypad and show the final screen."""
    keys = sequence.split() if words else [ch for ch in sequence if not ch.isspace()]
    keypad = Keypad(precision=_settings(ctx).precision)
    ignored = [key for key in keys if not keypad.press(key)]
    if ignored:
        console.print(f"[yellow]Ignored keys:[/yellow] {escape(' '.join(ignored))}")
    render_keypad(keypad, out)
    if keypad.error:
        raise typer.Exit(1)


@app.command("repl")
def cmd_repl(
    ctx: typer.Context,
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, max=15, help="Decimal places to keep"),
) -> None:
    """Read expressions line by line until 'quit' or EOF."""
    places = _precision(ctx, precision)
    console.print("[dim]Enter an expression like '5 + 3 * 2'. 'quit' to leave.[/dim]")
    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        if not line.strip():
            continue
        try:
            result = evaluate(line)
        except EvaluationError as e:
            render_error(e, console)
            continue
        out.print(format_result(result, places), highlight=False)
    logger.info("Session ended")


if __name__ == "__main__":
    app()
