# tests/test_console.py

from __future__ import annotations

import pytest

from tasklist.connectors.console_connector import handle_line, run_console_loop
from tasklist.tasks import task_store as task_store_module
from tasklist.tasks.errors import PersistenceError

from .fakes import ScriptedInput, Transcript


def test_console_session(state) -> None:
    read = ScriptedInput(["Buy milk", "", "/add Walk the dog", "/done 1", "/list", "/exit", "/list"])
    out = Transcript()

    run_console_loop(state, read=read, write=out)

    text = out.joined()
    assert "Welcome to tasklist-test" in text
    assert "1. [x] Buy milk\n2. [ ] Walk the dog" in text
    assert out.lines[-1] == "Exiting tasklist-test..."
    # "/exit" stops the loop before the trailing "/list" is read
    assert read.prompts.count("> ") == 6


def test_console_stops_on_eof(state) -> None:
    out = Transcript()
    run_console_loop(state, read=ScriptedInput([]), write=out)
    assert out.lines[-1] == "Exiting tasklist-test..."


def test_plain_text_is_added_as_task(state) -> None:
    assert handle_line(state, "Water the plants") == "Task added"
    assert handle_line(state, "Pay $100").startswith("Invalid task description")
    assert state.task_store.view() == ["1. [ ] Water the plants"]


def test_persistence_failure_is_reported(state, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_write(path, tasks) -> None:
        raise PersistenceError(path, "read-only file system")

    monkeypatch.setattr(task_store_module, "write_tasks", failing_write)

    reply = handle_line(state, "/add Anything")
    assert reply.startswith("Could not save tasks")
    assert state.task_store.count_tasks() == 0


def test_console_passes_tabs_and_spaces_through(state) -> None:
    read = ScriptedInput(["a\tb", "/add x  y", "  /list"])
    out = Transcript()

    run_console_loop(state, read=read, write=out)

    assert state.task_store.view() == ["1. [ ] a\tb", "2. [ ] x  y"]
    assert "1. [ ] a\tb\n2. [ ] x  y" in out.joined()
