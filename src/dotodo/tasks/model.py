"""Task data model and its one-line text encoding.

A task is stored as ``"<id>. [X] <title>"`` when complete and
``"<id>. [ ] <title>"`` otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dotodo.errors import ParseError

ID_SEPARATOR = ". "
COMPLETE_MARK = "[X]"
INCOMPLETE_MARK = "[ ]"
# Every character str.splitlines() treats as a line boundary.
LINE_BREAKS = "\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029"
FORBIDDEN_TITLE_PARTS: tuple[str, ...] = (COMPLETE_MARK, INCOMPLETE_MARK, *LINE_BREAKS)


@dataclass
class Task:
    id: int
    title: str = ""
    complete: bool = False


def is_unsigned_int(text: str) -> bool:
    return text.isascii() and text.isdigit()


def validate_title(title: str) -> str:
    """Return the trimmed title, or raise ParseError if it cannot be stored."""
    cleaned = title.strip()
    if not cleaned:
        raise ParseError("Task title must not be empty.")
    for part in FORBIDDEN_TITLE_PARTS:
        if part in cleaned:
            raise ParseError(f"Task title must not contain {part!r}.")
    return cleaned


def parse_task(line: str) -> Task:
    """Decode one storage line into a Task."""
    text = line.strip()
    id_part, sep, _ = text.partition(ID_SEPARATOR + "[")
    if not sep or not is_unsigned_int(id_part):
        raise ParseError(f"invalid task id in {text!r}")

    rest = text[len(id_part) + len(ID_SEPARATOR):]
    if rest.startswith(COMPLETE_MARK):
        complete = True
    elif rest.startswith(INCOMPLETE_MARK):
        complete = False
    else:
        raise ParseError(f"expected {COMPLETE_MARK} or {INCOMPLETE_MARK} in {text!r}")

    title = rest[len(COMPLETE_MARK):].strip()
    return Task(id=int(id_part), title=title, complete=complete)


def format_task(task: Task) -> str:
    mark = COMPLETE_MARK if task.complete else INCOMPLETE_MARK
    return f"{task.id}{ID_SEPARATOR}{mark} {task.title.strip()}"


def parse_content(content: str) -> list[Task]:
    """Parse a whole storage file. Blank lines are skipped; any bad line fails the load."""
    tasks: list[Task] = []
    for line_no, line in enumerate(content.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            tasks.append(parse_task(line))
        except ParseError as exc:
            raise ParseError(str(exc), line_no=line_no) from None
    return tasks


def format_content(tasks: Iterable[Task]) -> str:
    return "\n".join(format_task(t) for t in tasks)
