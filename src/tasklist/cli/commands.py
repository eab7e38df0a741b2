# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks import task_api

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw_args: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True passes the text after the command word as a single
        argument, whitespace untouched (or no arguments if there is none).
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for k in [key, *(a.lower() for a in aliases)]:
            self._handlers[k] = handler
            if raw_args:
                self._raw_args.add(k)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw_args:
            rest = line[1:].split(None, 1)
            args = rest[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _index_arg(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    return task_api.parse_index(args[0])


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    total = store.count_tasks()
    done = store.count_completed()
    return (
        "Status:\n"
        f"  Task file: {store.path}\n"
        f"  Tasks: {total} ({done} completed, {total - done} open)"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <description>

    The description is the raw text after "/add" (tabs and runs of spaces kept).
    """
    if not args:
        return "Usage: /add <description>"
    return task_api.add_task(state.task_store, args[0]).text()


def cmd_list(state: AppState, args: list[str]) -> str:
    return task_api.view_tasks(state.task_store).text()


def cmd_done(state: AppState, args: list[str]) -> str:
    number = _index_arg(args)
    if number is None:
        return task_api.MSG_INVALID_INPUT
    return task_api.mark_task_complete(state.task_store, number).text()


def cmd_delete(state: AppState, args: list[str]) -> str:
    number = _index_arg(args)
    if number is None:
        return task_api.MSG_INVALID_INPUT
    return task_api.delete_task(state.task_store, number).text()


def cmd_clean(state: AppState, args: list[str]) -> str:
    return task_api.delete_completed_tasks(state.task_store).text()


def cmd_clear(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /clear      -> ask for confirmation
    /clear yes  -> remove every task
    """
    if not args or args[0].lower() not in ("y", "yes"):
        return "Are you sure you want to clear all tasks? Use /clear yes to confirm."

    if emit:
        emit(f"Clearing {state.task_store.count_tasks()} task(s)...")

    logger.debug("Clear-all confirmed")
    return task_api.clear_all_tasks(state.task_store).text()


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add <description>.", aliases=["a"], raw_args=True
)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls", "view"])
registry.register("done", cmd_done, help_text="Mark a task complete: /done <n>.", aliases=["complete"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["del", "rm"])
registry.register("clean", cmd_clean, help_text="Delete all completed tasks.")
registry.register("clear", cmd_clear, help_text="Delete ALL tasks: /clear yes.")
registry.register("status", cmd_status, help_text="Show task file and counts.")
