# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path is injectable, so tests never touch the real task file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Connectors ----
    console_enabled: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_file_path: Path
    log_file_path: Path

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> Settings:
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))
        tasks_file_path = _env_path(_k("TASKS_FILE"), data_dir / "tasks.txt")
        log_file_path = _env_path(_k("LOG_FILE"), data_dir / "tasklist.log")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            console_enabled=console_enabled,
            data_dir=data_dir,
            tasks_file_path=tasks_file_path,
            log_file_path=log_file_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
