# src/tasklist/tasks/task_service.py

from __future__ import annotations

"""
Task service operations: List / Create / Update / Delete (+ Summarize).

Each operation:
- validates its raw input (if any) before touching the store,
- makes exactly one store call, run in a worker thread so the event loop never blocks,
- shapes the result or raises a tagged TaskServiceError.
"""

import asyncio
import logging
from typing import Any

from ..core.errors import NotFoundError, ValidationError
from ..core.ports import TaskRepo
from .task_models import Task, TaskSummary
from .task_schemas import CreateTaskInput, DeleteTaskInput, UpdateTaskInput, parse_input

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo

    async def list_tasks(self) -> list[Task]:
        # Store failures are logged by the store and surface as InfrastructureError.
        return await asyncio.to_thread(self._repo.select_all)

    async def create_task(self, raw: Any) -> Task:
        try:
            data = parse_input(CreateTaskInput, raw)
        except ValidationError as exc:
            logger.info("create_task rejected: %s", exc)
            raise

        task = await asyncio.to_thread(self._repo.insert, data.text, False)
        logger.info("Task created id=%s", task.id)
        return task

    async def update_task(self, raw: Any) -> Task:
        try:
            data = parse_input(UpdateTaskInput, raw)
        except ValidationError as exc:
            logger.info("update_task rejected: %s", exc)
            raise

        task = await asyncio.to_thread(self._repo.update_by_id, data.id, data.completed)
        if task is None:
            logger.info("update_task: task id=%s not found", data.id)
            raise NotFoundError(data.id)

        logger.info("Task updated id=%s completed=%s", task.id, task.completed)
        return task

    async def delete_task(self, raw: Any) -> None:
        try:
            data = parse_input(DeleteTaskInput, raw)
        except ValidationError as exc:
            logger.info("delete_task rejected: %s", exc)
            raise

        # Absent rows are not an error.
        await asyncio.to_thread(self._repo.delete_by_id, data.id)
        logger.info("Task deleted id=%s", data.id)

    async def summarize(self) -> TaskSummary:
        return TaskSummary.from_tasks(await self.list_tasks())
