# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path

from .errors import IndexOutOfRangeError, InvalidDescriptionError, PersistenceError
from .task_file import read_tasks, write_tasks
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

# ASCII letters, digits, space/tab and "- . , ! ?". No line breaks: one task per line.
DESCRIPTION_RE = re.compile(r"[A-Za-z0-9 \t\-.,!?]+")


def is_valid_description(description: str) -> bool:
    return bool(description) and DESCRIPTION_RE.fullmatch(description) is not None


class TaskStore:
    """
    Ordered task list backed by a flat text file.

    Persistence:
    - the file is loaded once at construction (if it exists)
    - every successful mutation rewrites the whole file before returning
    - if the write fails, the in-memory list is rolled back and
      PersistenceError propagates, so memory and file never diverge

    Thread-safety:
    - one lock guards every entry point, including the file write

    Indices are 0-based here; the command interface converts from 1-based.
    Returned tasks are detached copies; the store owns the live ones.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))

    def _commit(self, previous: list[Task]) -> None:
        """Persist the current list; restore `previous` if the write fails."""
        try:
            write_tasks(self._path, self._tasks)
        except PersistenceError:
            logger.exception("Task write failed path=%s; rolling back", self._path)
            self._tasks = previous
            raise

    @staticmethod
    def _detached(task: Task) -> Task:
        return Task(task.description, task.status)

    def _snapshot_for_rollback(self) -> list[Task]:
        # Task objects are mutable (status), so copy them too.
        return [self._detached(t) for t in self._tasks]

    # ---- load ----

    def reload(self) -> None:
        """
        Replace in-memory state with the backing file contents.

        A missing file means an empty store (no file is created).
        MalformedRecordError propagates and leaves the current state untouched.
        """
        with self._lock:
            loaded = read_tasks(self._path)
            if loaded is None:
                self._tasks = []
                logger.info("TaskStore ready path=%s (no file yet)", self._path)
                return
            self._tasks = loaded
            logger.info("TaskStore ready path=%s total=%d", self._path, len(loaded))

    # ---- public API ----

    def add(self, description: str) -> Task:
        if not is_valid_description(description):
            logger.info("Rejected task description %r", description)
            raise InvalidDescriptionError(description)

        with self._lock:
            previous = list(self._tasks)
            task = Task(description)
            self._tasks.append(task)
            self._commit(previous)
            logger.debug("Task added index=%d description=%r", len(self._tasks) - 1, description)
            return self._detached(task)

    def mark_complete(self, index: int) -> Task:
        with self._lock:
            self._check_index(index)
            task = self._tasks[index]
            if task.is_completed:
                return self._detached(task)
            previous = self._snapshot_for_rollback()
            task.mark_complete()
            self._commit(previous)
            logger.debug("Task completed index=%d", index)
            return self._detached(task)

    def view(self) -> list[str]:
        """Rendered lines numbered from 1. An empty list means there are no tasks."""
        with self._lock:
            return [f"{i}. {t.render()}" for i, t in enumerate(self._tasks, start=1)]

    def delete(self, index: int) -> Task:
        with self._lock:
            self._check_index(index)
            previous = list(self._tasks)
            task = self._tasks.pop(index)
            self._commit(previous)
            logger.debug("Task deleted index=%d description=%r", index, task.description)
            return task

    def delete_completed(self) -> int:
        with self._lock:
            previous = list(self._tasks)
            self._tasks = [t for t in self._tasks if not t.is_completed]
            removed = len(previous) - len(self._tasks)
            self._commit(previous)
            logger.debug("Deleted completed tasks removed=%d", removed)
            return removed

    def clear_all(self) -> int:
        with self._lock:
            previous = list(self._tasks)
            self._tasks = []
            self._commit(previous)
            logger.debug("Cleared all tasks removed=%d", len(previous))
            return len(previous)

    # ---- read-only helpers ----

    def snapshot(self) -> list[tuple[str, TaskStatus]]:
        with self._lock:
            return [(t.description, t.status) for t in self._tasks]

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def count_completed(self) -> int:
        with self._lock:
            return sum(1 for t in self._tasks if t.is_completed)

    def __len__(self) -> int:
        return self.count_tasks()
