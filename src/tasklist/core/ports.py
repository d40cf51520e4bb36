# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on this Protocol instead of the concrete SQLite store,
which keeps storage swappable and makes testing easier.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    def insert(self, text: str, completed: bool = False) -> Any: ...
    def select_all(self) -> list[Any]: ...

    # None means no row matched.
    def update_by_id(self, task_id: int, completed: bool) -> Any | None: ...

    def delete_by_id(self, task_id: int) -> None: ...
