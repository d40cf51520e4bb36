"""Minimal task-list service backed by SQLite."""

from .core.errors import (
    ErrorKind,
    InfrastructureError,
    NotFoundError,
    TaskServiceError,
    ValidationError,
)
from .tasks.task_models import Task, TaskSummary
from .tasks.task_service import TaskService
from .tasks.task_store import TaskStore

__all__ = [
    "ErrorKind",
    "InfrastructureError",
    "NotFoundError",
    "Task",
    "TaskService",
    "TaskServiceError",
    "TaskStore",
    "TaskSummary",
    "ValidationError",
]
