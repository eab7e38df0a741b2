# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings kept on the state so commands can show paths/app name.
    settings: object
    task_store: TaskRepo
