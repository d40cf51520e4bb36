# src/tasklist/core/errors.py

"""
Failure taxonomy for task operations.

Callers branch on `kind` (or the exception class), never on message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"


class TaskServiceError(Exception):
    """Base class for every failure surfaced by the task service."""

    kind: ErrorKind


class ValidationError(TaskServiceError):
    """Malformed or semantically invalid input. Raised before any store mutation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors: list[dict[str, Any]] = list(errors or [])


class NotFoundError(TaskServiceError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class InfrastructureError(TaskServiceError):
    """Store unreachable or query failure. Not retried."""

    kind = ErrorKind.INFRASTRUCTURE
