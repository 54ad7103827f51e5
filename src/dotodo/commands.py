"""Parse one line of input into a Command and run it against a TodoList."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dotodo import log
from dotodo.errors import InvalidCommand, ParseError
from dotodo.tasks.model import is_unsigned_int, validate_title
from dotodo.todo_list import TodoList

EMPTY_MESSAGE = "There is no todos!"

HELP_TEXT = """\
Commands:
    help        print this help text
    list        list all tasks
    add         add new task, example 'add new task title'
    edit        edit existing task, example 'edit 1 new task title for 1'
    complete    complete task, example 'complete 1'
    incomplete  mark task as not done, example 'incomplete 1'
    remove      remove task, example 'remove 1'
    save        write pending changes to disk
    quit        quit"""


class CommandKind(str, Enum):
    HELP = "help"
    LIST = "list"
    ADD = "add"
    EDIT = "edit"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    REMOVE = "remove"
    SAVE = "save"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    task_id: int | None = None
    title: str = ""


@dataclass(frozen=True)
class Outcome:
    """What the loop should show after a command, and whether to stop."""

    output: str | None = None
    notice: str | None = None
    warning: str | None = None
    quit: bool = False


@dataclass(frozen=True)
class _Matcher:
    kind: CommandKind
    token: str
    exact: bool = False

    def matches(self, text: str) -> bool:
        if self.exact:
            return text == self.token
        return text.startswith(self.token)

    def argument(self, text: str) -> str:
        return text[len(self.token):].strip()


# First match wins. Prefix tokens that take arguments keep their trailing space.
COMMAND_TABLE: tuple[_Matcher, ...] = (
    _Matcher(CommandKind.HELP, "help", exact=True),
    _Matcher(CommandKind.LIST, "list", exact=True),
    _Matcher(CommandKind.ADD, "add "),
    _Matcher(CommandKind.EDIT, "edit "),
    _Matcher(CommandKind.COMPLETE, "complete "),
    _Matcher(CommandKind.INCOMPLETE, "incomplete "),
    _Matcher(CommandKind.REMOVE, "remove "),
    _Matcher(CommandKind.SAVE, "save"),
    _Matcher(CommandKind.QUIT, "quit"),
)

_ID_COMMANDS = frozenset({CommandKind.COMPLETE, CommandKind.INCOMPLETE, CommandKind.REMOVE})


def parse_task_id(raw: str) -> int:
    text = raw.strip()
    if not is_unsigned_int(text):
        raise ParseError(f"Invalid task id: {text!r}")
    return int(text)


def parse_command(line: str) -> Command:
    """Match ``line`` against COMMAND_TABLE.

    Raises InvalidCommand for unknown input and ParseError for bad arguments.
    """
    text = line.strip()
    for matcher in COMMAND_TABLE:
        if matcher.matches(text):
            return _build(matcher, text)
    raise InvalidCommand(text)


def _build(matcher: _Matcher, text: str) -> Command:
    kind = matcher.kind
    if kind is CommandKind.ADD:
        return Command(kind, title=validate_title(matcher.argument(text)))
    if kind is CommandKind.EDIT:
        parts = matcher.argument(text).split(None, 1)
        if len(parts) < 2:
            raise ParseError("Usage: edit <id> <new title>")
        return Command(kind, task_id=parse_task_id(parts[0]), title=validate_title(parts[1]))
    if kind in _ID_COMMANDS:
        return Command(kind, task_id=parse_task_id(matcher.argument(text)))
    return Command(kind)


def _missing(task_id: int | None) -> Outcome:
    return Outcome(warning=f"No task with id {task_id}.")


def dispatch(todos: TodoList, command: Command) -> Outcome:
    """Run one command. StorageError from a save propagates to the caller."""
    log.debug(f"Dispatching {command}")
    match command.kind:
        case CommandKind.HELP:
            return Outcome(output=HELP_TEXT)
        case CommandKind.LIST:
            rendered = todos.render()
            return Outcome(output=rendered if rendered is not None else EMPTY_MESSAGE)
        case CommandKind.ADD:
            task = todos.add(command.title)
            log.debug(f"Added task {task.id}")
            return Outcome()
        case CommandKind.EDIT:
            found = todos.edit(command.task_id, command.title)
        case CommandKind.COMPLETE:
            found = todos.complete(command.task_id)
        case CommandKind.INCOMPLETE:
            found = todos.incomplete(command.task_id)
        case CommandKind.REMOVE:
            found = todos.remove(command.task_id)
        case CommandKind.SAVE:
            if todos.flush():
                return Outcome(notice=f"Saved {len(todos)} task(s).")
            return Outcome(notice="Nothing to save.")
        case CommandKind.QUIT:
            return Outcome(quit=True)
    return Outcome() if found else _missing(command.task_id)
