"""Storage adapter: the task list as a newline-delimited text file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from dotodo import log
from dotodo.errors import StorageError
from dotodo.io_utils import read_text, write_text
from dotodo.tasks.model import Task, format_content, parse_content


class TaskStorage:
    """Reads and writes tasks at a fixed path (normally ``~/.todo``).

    The file is not locked: two processes sharing the same path can
    overwrite each other's changes.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[Task]:
        """Return every stored task. A missing file is an empty list."""
        if not self.path.exists():
            log.debug(f"No storage file at {self.path}; starting empty")
            return []
        try:
            content = read_text(self.path)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        tasks = parse_content(content)
        log.debug(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the file contents with ``tasks``. The old file survives a failed write."""
        content = format_content(tasks)
        try:
            write_text(self.path, content)
        except OSError as exc:
            raise StorageError(f"Save todos failed: cannot write {self.path}: {exc}") from exc
        log.debug(f"Saved {self.path}")
