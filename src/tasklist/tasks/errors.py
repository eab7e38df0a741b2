# src/tasklist/tasks/errors.py

"""
Task store error taxonomy.

The store raises these; only the command interface (task_api.py) turns them
into user-facing messages.
"""

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for every task store failure."""


class InvalidDescriptionError(TaskStoreError, ValueError):
    def __init__(self, description: str) -> None:
        super().__init__(f"Invalid task description: {description!r}")
        self.description = description


class IndexOutOfRangeError(TaskStoreError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Invalid task index {index} (tasks: {size})")
        self.index = index
        self.size = size


class MalformedRecordError(TaskStoreError):
    """A backing-file line is not `<description>,<status>`. Fails the whole load."""

    def __init__(self, path: str | Path, lineno: int, line: str, reason: str) -> None:
        super().__init__(f"{path}:{lineno}: malformed task record ({reason}): {line!r}")
        self.path = Path(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason


class PersistenceError(TaskStoreError):
    """Writing the backing file failed. The underlying OSError is __cause__."""

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(f"Failed to write tasks to {path}: {message}")
        self.path = Path(path)
