# src/tasklist/tasks/task_api.py

"""
Command interface for presentation layers.

Each command takes a TaskRepo, uses 1-based indices, and returns a
CommandResult ready for display. Validation and index errors become failed
results; persistence and load errors are not handled here and propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..core.ports import TaskRepo
from .errors import IndexOutOfRangeError, InvalidDescriptionError

logger = logging.getLogger(__name__)

MSG_TASK_ADDED = "Task added"
MSG_INVALID_DESCRIPTION = "Invalid task description. Please enter a valid description."
MSG_TASK_COMPLETED = "Task marked as complete"
MSG_INVALID_INDEX = "Invalid task index"
MSG_INVALID_INPUT = "Invalid input"
MSG_NO_TASKS = "No tasks in the list"
MSG_TASK_DELETED = "Task deleted successfully"
MSG_COMPLETED_DELETED = "Completed tasks deleted successfully"
MSG_ALL_CLEARED = "All tasks cleared"


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    message: str
    lines: list[str] = field(default_factory=list)

    def text(self) -> str:
        return "\n".join(self.lines) if self.lines else self.message


def parse_index(raw: str) -> int | None:
    """User text -> 1-based index, or None if it is not an integer."""
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None


def add_task(repo: TaskRepo, description: str) -> CommandResult:
    try:
        repo.add(description)
    except InvalidDescriptionError:
        return CommandResult(False, MSG_INVALID_DESCRIPTION)
    return CommandResult(True, MSG_TASK_ADDED)


def mark_task_complete(repo: TaskRepo, number: int) -> CommandResult:
    try:
        repo.mark_complete(number - 1)
    except IndexOutOfRangeError:
        logger.debug("mark_task_complete: bad index %s", number)
        return CommandResult(False, MSG_INVALID_INDEX)
    return CommandResult(True, MSG_TASK_COMPLETED)


def view_tasks(repo: TaskRepo) -> CommandResult:
    lines = repo.view()
    if not lines:
        return CommandResult(True, MSG_NO_TASKS)
    return CommandResult(True, f"{len(lines)} task(s)", lines)


def delete_task(repo: TaskRepo, number: int) -> CommandResult:
    try:
        repo.delete(number - 1)
    except IndexOutOfRangeError:
        logger.debug("delete_task: bad index %s", number)
        return CommandResult(False, MSG_INVALID_INDEX)
    return CommandResult(True, MSG_TASK_DELETED)


def delete_completed_tasks(repo: TaskRepo) -> CommandResult:
    repo.delete_completed()
    return CommandResult(True, MSG_COMPLETED_DELETED)


def clear_all_tasks(repo: TaskRepo) -> CommandResult:
    repo.clear_all()
    return CommandResult(True, MSG_ALL_CLEARED)
