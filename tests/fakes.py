# tests/fakes.py

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

from tasklist.core.errors import InfrastructureError
from tasklist.tasks.task_models import Task


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    The clock is manual: every call to `tick()` moves it forward one second, so tests
    control whether timestamps collide or not.
    """

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self.calls: list[str] = []
        self._next_id = 1
        self.now = datetime(2024, 1, 1, tzinfo=UTC)

    def tick(self, seconds: float = 1.0) -> None:
        self.now += timedelta(seconds=seconds)

    def insert(self, text: str, completed: bool = False) -> Task:
        self.calls.append("insert")
        task = Task(
            id=self._next_id,
            text=text,
            completed=completed,
            created_at=self.now,
            updated_at=self.now,
        )
        self._next_id += 1
        self.tasks[task.id] = task
        return task

    def select_all(self) -> list[Task]:
        self.calls.append("select_all")
        return sorted(self.tasks.values(), key=lambda t: (t.created_at, t.id), reverse=True)

    def update_by_id(self, task_id: int, completed: bool) -> Task | None:
        self.calls.append("update_by_id")
        t = self.tasks.get(task_id)
        if t is None:
            return None
        self.tasks[task_id] = replace(t, completed=completed, updated_at=max(self.now, t.created_at))
        return self.tasks[task_id]

    def delete_by_id(self, task_id: int) -> None:
        self.calls.append("delete_by_id")
        self.tasks.pop(task_id, None)


class FailingTaskRepo(FakeTaskRepo):
    """Every store primitive fails the way an unreachable database would."""

    def _fail(self, op: str):
        self.calls.append(op)
        raise InfrastructureError(f"Task store {op} failed: database is locked")

    def insert(self, text: str, completed: bool = False) -> Task:
        return self._fail("insert")

    def select_all(self) -> list[Task]:
        return self._fail("select_all")

    def update_by_id(self, task_id: int, completed: bool) -> Task | None:
        return self._fail("update_by_id")

    def delete_by_id(self, task_id: int) -> None:
        self._fail("delete_by_id")
