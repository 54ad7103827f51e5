"""Logging utilities with colored output via Rich.

Messages may echo user input (task titles, command lines), so they are
escaped before being wrapped in the colored label, and emoji codes such
as ``:bug:`` are never substituted.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, emoji=False)
_err_console = Console(highlight=False, emoji=False, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def out(text: str = "", end: str = "\n") -> None:
    """Print user data verbatim: no markup, emoji codes, highlighting or wrapping."""
    console.print(text, end=end, markup=False, highlight=False, emoji=False, soft_wrap=True)


def success(msg: str) -> None:
    console.print(f"[green]\\[OK][/green] {escape(msg)}", soft_wrap=True)


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}", soft_wrap=True)


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {escape(msg)}", soft_wrap=True)


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]", soft_wrap=True)
