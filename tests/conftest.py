"""Shared fixtures for dotodo tests.

File handling in tests:
- Use the ``home`` fixture so every test gets its own ``$HOME/.todo``.
- Use dotodo.io_utils read_text/write_text for consistent UTF-8 I/O.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dotodo.tasks.io import TaskStorage
from dotodo.tasks.model import Task
from dotodo.todo_list import TodoList


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty temporary directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def todo_file(home: Path) -> Path:
    return home / ".todo"


def _make_task(id: int, title: str = "", complete: bool = False) -> Task:
    return Task(id=id, title=title or f"Task {id}", complete=complete)


@pytest.fixture
def make_task():
    """Factory fixture that creates Task instances."""
    return _make_task


@pytest.fixture
def todo_list(todo_file: Path):
    """Factory fixture: TodoList backed by ``$HOME/.todo`` holding ``tasks``."""

    def _build(tasks: list[Task] | None = None) -> TodoList:
        return TodoList(TaskStorage(todo_file), tasks)

    return _build


@pytest.fixture(autouse=True)
def _quiet_log():
    """Reset verbose logging so one test's -v does not leak into the next."""
    from dotodo import log

    log.set_verbose(False)
    yield
    log.set_verbose(False)
