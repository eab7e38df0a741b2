# src/tasklist/tasks/task_models.py

from __future__ import annotations

from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task completion status.

    Values double as the status tokens written to the backing file.
    Transitions are one-way: INCOMPLETE -> COMPLETED.
    """

    INCOMPLETE = "Incomplete"
    COMPLETED = "Completed"

    @classmethod
    def from_token(cls, raw: str) -> TaskStatus:
        return cls(raw)


class Task:
    """A single to-do entry: read-only description plus completion status."""

    __slots__ = ("_description", "_status")

    def __init__(self, description: str, status: TaskStatus = TaskStatus.INCOMPLETE) -> None:
        self._description = description
        self._status = TaskStatus.INCOMPLETE
        if status is TaskStatus.COMPLETED:
            self.mark_complete()

    @property
    def description(self) -> str:
        return self._description

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def is_completed(self) -> bool:
        return self._status is TaskStatus.COMPLETED

    def mark_complete(self) -> None:
        self._status = TaskStatus.COMPLETED

    def render(self) -> str:
        mark = "[x]" if self.is_completed else "[ ]"
        return f"{mark} {self._description}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return (self._description, self._status) == (other._description, other._status)

    def __hash__(self) -> int:
        return hash((self._description, self._status))

    def __repr__(self) -> str:
        return f"Task(description={self._description!r}, status={self._status.value})"
