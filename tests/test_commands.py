# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.core.state import AppState
from tasklist.tasks.task_service import TaskService

from .fakes import FailingTaskRepo


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "ok"
    assert reg.handle(state, "/ALPHA z") == "ok"
    assert seen == [["x", "y"], ["z"]]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_undo_rm_flow(state) -> None:
    out = registry.handle(state, "/add   buy milk  ")
    assert out is not None and "buy milk" in out

    task = state.task_store.select_all()[0]

    listing = registry.handle(state, "/list") or ""
    assert f"[ ] #{task.id} buy milk" in listing

    assert f"[x] #{task.id}" in (registry.handle(state, f"/done {task.id}") or "")
    assert f"[ ] #{task.id}" in (registry.handle(state, f"/undo {task.id}") or "")

    assert registry.handle(state, f"/rm {task.id}") == f"Removed task #{task.id}."
    # Removing again is not an error.
    assert registry.handle(state, f"/rm {task.id}") == f"Removed task #{task.id}."
    assert "No tasks yet" in (registry.handle(state, "/ls") or "")


def test_done_on_missing_task_is_reported_not_raised(state) -> None:
    assert registry.handle(state, "/done 999") == "Task 999 no longer exists."


def test_add_without_text_reports_validation(state) -> None:
    out = registry.handle(state, "/add    ") or ""
    assert out.startswith("Invalid input")
    assert "Task text cannot be empty" in out
    assert state.task_store.count_tasks() == 0


def test_usage_on_bad_ids(state) -> None:
    assert registry.handle(state, "/done") == "Usage: /done <id>"
    assert registry.handle(state, "/undo abc") == "Usage: /undo <id>"
    assert registry.handle(state, "/rm 1 2") == "Usage: /rm <id>"


def test_stats(state) -> None:
    registry.handle(state, "/add one")
    registry.handle(state, "/add two")
    first = state.task_store.select_all()[-1]
    registry.handle(state, f"/done {first.id}")

    out = registry.handle(state, "/stats") or ""
    assert "Total tasks: 2" in out
    assert "Completed: 1" in out
    assert "Remaining: 1" in out


def test_storage_errors_are_reported(settings, store) -> None:
    repo = FailingTaskRepo()
    state = AppState(settings=settings, task_store=store, tasks=TaskService(repo))

    assert (registry.handle(state, "/list") or "").startswith("Storage error")
    assert (registry.handle(state, "/add x") or "").startswith("Storage error")
    assert repo.calls == ["select_all", "insert"]


def test_done_with_out_of_range_id_is_not_found(state) -> None:
    assert registry.handle(state, "/done 99999999999999999999") == (
        "Task 99999999999999999999 no longer exists."
    )
    assert registry.handle(state, "/rm 99999999999999999999") == (
        "Removed task #99999999999999999999."
    )
