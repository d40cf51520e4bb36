# src/tasklist/cli/commands.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from ..core.errors import ErrorKind, NotFoundError, TaskServiceError, ValidationError
from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    # Console commands are synchronous; each one drives a single service call.
    return asyncio.run(coro)


def describe_error(exc: TaskServiceError) -> str:
    """User-facing text for a service failure, chosen by kind."""
    if exc.kind is ErrorKind.NOT_FOUND and isinstance(exc, NotFoundError):
        return f"Task {exc.task_id} no longer exists."
    if exc.kind is ErrorKind.VALIDATION and isinstance(exc, ValidationError):
        reasons = [str(e.get("msg", "")).removeprefix("Value error, ") for e in exc.errors]
        reasons = [r for r in reasons if r]
        return "Invalid input: " + ("; ".join(reasons) if reasons else str(exc))
    return "Storage error while handling the command. See the log for details."


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
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

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskServiceError as exc:
            logger.debug("/%s failed kind=%s: %s", name, exc.kind, exc)
            return describe_error(exc)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    created = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{mark}] #{task.id} {task.text}  (created {created})"


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = _run(state.tasks.list_tasks())
    if not tasks:
        return "No tasks yet. Add one with /add <text>."
    return "\n".join(_format_task(t) for t in tasks)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = _run(state.tasks.create_task({"text": " ".join(args)}))
    return f"Added: {_format_task(task)}"


def _set_completed(state: AppState, args: list[str], completed: bool, usage: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return usage
    task = _run(state.tasks.update_task({"id": task_id, "completed": completed}))
    return _format_task(task)


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True, "Usage: /done <id>")


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False, "Usage: /undo <id>")


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    _run(state.tasks.delete_task({"id": task_id}))
    return f"Removed task #{task_id}."


def cmd_stats(state: AppState, args: list[str]) -> str:
    summary = _run(state.tasks.summarize())
    return (
        f"Total tasks: {summary.total}\n"
        f"  Completed: {summary.completed}\n"
        f"  Remaining: {summary.remaining}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List tasks, newest first.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Create a task: /add <text>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a task not completed: /undo <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("stats", cmd_stats, help_text="Show total / completed / remaining counts.")
