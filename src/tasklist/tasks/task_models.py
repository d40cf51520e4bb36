# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


def ts_to_datetime(ts: float) -> datetime:
    """Unix seconds (as stored) -> aware UTC datetime."""
    return datetime.fromtimestamp(float(ts), tz=UTC)


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Boundary shape: timestamps as ISO-8601 strings."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class TaskSummary:
    total: int
    completed: int

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @classmethod
    def from_tasks(cls, tasks: list[Task]) -> TaskSummary:
        return cls(total=len(tasks), completed=sum(1 for t in tasks if t.completed))
