# src/tasklist/tasks/task_file.py

"""
Flat-text backing file for the task store.

Format: one task per line, `<description>,<status>`, where status is the
literal token `Incomplete` or `Completed`.

Records are split on the LAST comma. The status token never contains a comma,
so descriptions with commas round-trip without escaping.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import MalformedRecordError, PersistenceError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","


def format_record(task: Task) -> str:
    return f"{task.description}{FIELD_SEPARATOR}{task.status.value}"


def parse_record(line: str, *, path: str | Path = "<memory>", lineno: int = 1) -> Task:
    description, sep, token = line.rpartition(FIELD_SEPARATOR)
    if not sep:
        raise MalformedRecordError(path, lineno, line, "missing status field")
    if not description:
        raise MalformedRecordError(path, lineno, line, "empty description")
    try:
        status = TaskStatus.from_token(token)
    except ValueError:
        raise MalformedRecordError(path, lineno, line, f"unknown status {token!r}") from None
    return Task(description, status)


def read_tasks(path: str | Path) -> list[Task] | None:
    """
    Read every task from `path` in file order.

    Returns None if the file does not exist. Any malformed line raises
    MalformedRecordError; nothing is skipped.
    """
    path = Path(path)
    if not path.exists():
        return None

    tasks: list[Task] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            tasks.append(parse_record(raw.rstrip("\r\n"), path=path, lineno=lineno))
    return tasks


def write_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """
    Rewrite `path` from the given snapshot.

    Writes a sibling .tmp file and replaces the target, so a failed write
    leaves the previous snapshot in place.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as f:
            for task in tasks:
                f.write(format_record(task) + "\n")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise PersistenceError(path, e.strerror or str(e)) from e
