# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.errors import PersistenceError

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def handle_line(state: AppState, line: str, emit: OutputFn | None = None) -> str:
    """
    One console input line -> reply text.

    Slash commands go to the registry; plain text is added as a new task.
    """
    try:
        reply = command_registry.handle(state, line.lstrip(), emit=emit)
        if reply is None:
            reply = task_api.add_task(state.task_store, line).text()
    except PersistenceError as e:
        logger.warning("Persistence failure: %s", e)
        reply = f"Could not save tasks: {e}"
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    return reply


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started (file=%s).", state.task_store.path)
    app_name = str(getattr(state.settings, "app_name", "tasklist"))

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    write(f"Welcome to {app_name}. Type a task to add it, /help for commands, /exit to quit.")

    while True:
        try:
            user_input = read("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input.strip():
            continue

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        emit(handle_line(state, user_input, emit=emit))

    write(f"Exiting {app_name}...")
    logger.info("Console connector finished.")
