"""In-memory task list with add/edit/complete/remove operations.

Every mutation is written back to storage immediately. Operations that name
a missing id are no-ops: they return ``False`` and write nothing.
"""

from __future__ import annotations

from dotodo import log
from dotodo.tasks.io import TaskStorage
from dotodo.tasks.model import Task, format_content, validate_title


class TodoList:
    """Ordered collection of tasks; insertion order is display order.

    Usage::

        todos = TodoList(TaskStorage(path))
        todos.load()
        todos.add("buy milk")     # id 1, saved
        todos.complete(1)         # saved
        print(todos.render())     # "1. [X] buy milk"
    """

    def __init__(self, storage: TaskStorage, tasks: list[Task] | None = None) -> None:
        self._storage = storage
        self._tasks: list[Task] = list(tasks or [])
        self._dirty = False

    # ── queries ──────────────────────────────────────────────────

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def next_id(self) -> int:
        # max + 1 rather than len + 1 so ids freed by remove are never reused
        return max((t.id for t in self._tasks), default=0) + 1

    def render(self) -> str | None:
        """Formatted task lines, or ``None`` when there is nothing to show."""
        if not self._tasks:
            return None
        return format_content(self._tasks)

    # ── mutations ────────────────────────────────────────────────

    def add(self, title: str) -> Task:
        task = Task(id=self.next_id(), title=validate_title(title), complete=False)
        self._tasks.append(task)
        self._commit()
        return task

    def edit(self, task_id: int, title: str) -> bool:
        new_title = validate_title(title)
        task = self.get(task_id)
        if task is None:
            return False
        task.title = new_title
        self._commit()
        return True

    def complete(self, task_id: int) -> bool:
        return self._set_complete(task_id, True)

    def incomplete(self, task_id: int) -> bool:
        return self._set_complete(task_id, False)

    def remove(self, task_id: int) -> bool:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                break
        else:
            return False
        del self._tasks[index]
        self._commit()
        return True

    def _set_complete(self, task_id: int, complete: bool) -> bool:
        task = self.get(task_id)
        if task is None:
            return False
        task.complete = complete
        self._commit()
        return True

    # ── persistence ──────────────────────────────────────────────

    def load(self) -> None:
        """Replace the in-memory tasks with the stored ones."""
        self._tasks = self._storage.load()
        self._dirty = False

    def save(self) -> None:
        """Write every task to storage. On StorageError the list stays dirty."""
        self._storage.save(self._tasks)
        self._dirty = False

    def flush(self) -> bool:
        """Save only if there are unsaved changes. Returns whether a write happened."""
        if not self._dirty:
            log.debug("Nothing to save")
            return False
        self.save()
        return True

    def _commit(self) -> None:
        self._dirty = True
        self.save()
