# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Presentation code depends on this Protocol instead of the concrete TaskStore,
which keeps tests free to pass in-memory fakes.
"""

from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Ordered task collection with 0-based indices."""

    @property
    def path(self) -> Path: ...

    def add(self, description: str) -> Task: ...
    def mark_complete(self, index: int) -> Task: ...
    def view(self) -> list[str]: ...
    def delete(self, index: int) -> Task: ...
    def delete_completed(self) -> int: ...
    def clear_all(self) -> int: ...
    def count_tasks(self) -> int: ...
    def count_completed(self) -> int: ...
