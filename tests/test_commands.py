# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_task_commands_end_to_end(state) -> None:
    assert registry.handle(state, "/add Buy milk") == "Task added"
    assert registry.handle(state, "/a Walk the dog") == "Task added"
    assert registry.handle(state, "/done 1") == "Task marked as complete"
    assert registry.handle(state, "/list") == "1. [x] Buy milk\n2. [ ] Walk the dog"

    assert registry.handle(state, "/done 9") == "Invalid task index"
    assert registry.handle(state, "/delete two") == "Invalid input"

    assert registry.handle(state, "/clean") == "Completed tasks deleted successfully"
    assert registry.handle(state, "/ls") == "1. [ ] Walk the dog"

    assert registry.handle(state, "/rm 1") == "Task deleted successfully"
    assert registry.handle(state, "/list") == "No tasks in the list"


def test_add_rejects_bad_description(state) -> None:
    assert registry.handle(state, "/add") == "Usage: /add <description>"
    assert registry.handle(state, "/add cost $5").startswith("Invalid task description")
    assert state.task_store.count_tasks() == 0


def test_clear_requires_confirmation(state) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")

    reply = registry.handle(state, "/clear")
    assert "Are you sure" in (reply or "")
    assert state.task_store.count_tasks() == 2

    notes: list[str] = []
    assert registry.handle(state, "/clear yes", emit=notes.append) == "All tasks cleared"
    assert notes == ["Clearing 2 task(s)..."]
    assert state.task_store.count_tasks() == 0
    assert state.settings.tasks_file_path.read_text("utf-8") == ""


def test_status_and_help(state) -> None:
    registry.handle(state, "/add A")
    registry.handle(state, "/add B")
    registry.handle(state, "/done 2")

    status = registry.handle(state, "/status") or ""
    assert str(state.settings.tasks_file_path) in status
    assert "2 (1 completed, 1 open)" in status

    help_text = registry.handle(state, "/help") or ""
    for name in ("/add", "/done", "/list", "/delete", "/clean", "/clear"):
        assert name in help_text


def test_add_keeps_description_whitespace(state) -> None:
    assert registry.handle(state, "/add a\tb  c") == "Task added"
    assert registry.handle(state, "/a   spaced") == "Task added"
    assert registry.handle(state, "/add   ") == "Usage: /add <description>"
    assert state.task_store.snapshot()[0][0] == "a\tb  c"
    assert state.task_store.snapshot()[1][0] == "spaced"
