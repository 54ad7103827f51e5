"""Interactive read-dispatch loop."""

from __future__ import annotations

from collections.abc import Callable

from dotodo import log
from dotodo.commands import Outcome, dispatch, parse_command
from dotodo.errors import ParseError, StorageError
from dotodo.todo_list import TodoList

WELCOME = "Welcome to todo list! Use 'help' command to show help info!"
PROMPT = "> "

LineReader = Callable[[], str]


def prompt_line() -> str:
    """Read one line after printing ``> ``. Raises EOFError when input ends."""
    return input(PROMPT)


def show(outcome: Outcome) -> None:
    if outcome.output is not None:
        log.out(outcome.output)
    if outcome.notice:
        log.success(outcome.notice)
    if outcome.warning:
        log.warn(outcome.warning)


def run_loop(todos: TodoList, read_line: LineReader = prompt_line) -> int:
    """Run until ``quit`` or end of input. Returns the process exit code."""
    log.out(WELCOME)
    while True:
        try:
            line = read_line()
        except EOFError:
            log.out()
            break
        except KeyboardInterrupt:
            log.out()
            log.warn("Interrupted.")
            break

        if not line.strip():
            continue
        try:
            outcome = dispatch(todos, parse_command(line))
        except ParseError as exc:
            log.error(str(exc))
            continue
        except StorageError as exc:
            log.error(f"{exc} (changes are kept in memory; try 'save' again)")
            continue

        show(outcome)
        if outcome.quit:
            break
    return finish(todos)


def finish(todos: TodoList) -> int:
    """Flush anything a failed save left behind. Returns the exit code."""
    try:
        todos.flush()
    except StorageError as exc:
        log.error(f"{exc}; unsaved changes were lost")
        return 1
    return 0
