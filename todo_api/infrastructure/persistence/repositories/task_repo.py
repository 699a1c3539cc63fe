"""Task repository: Core statements on the todos table, executed through the gateway."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, insert, select

from todo_api.application.dtos.task import TaskResult
from todo_api.infrastructure.exceptions import StorageException
from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.infrastructure.persistence.models.task import Task

_COLUMNS = (Task.id, Task.task, Task.created_at)


def _to_result(row: Mapping[str, Any]) -> TaskResult:
    """Map a result row to TaskResult DTO."""
    return TaskResult(id=row["id"], task=row["task"], created_at=row["created_at"])


class TaskRepository:
    """Task repository. Implements ITaskRepository."""

    def __init__(self, gateway: StorageGateway) -> None:
        self.gateway = gateway

    async def list_newest_first(self) -> list[TaskResult]:
        """Return all tasks, newest first; id breaks created_at ties."""
        stmt = select(*_COLUMNS).order_by(Task.created_at.desc(), Task.id.desc())
        result = await self.gateway.execute(stmt)
        return [_to_result(row) for row in result.rows]

    async def insert(self, text: str) -> TaskResult:
        """Insert a task; id and created_at come back via RETURNING."""
        stmt = insert(Task).values(task=text).returning(*_COLUMNS)
        result = await self.gateway.execute(stmt)
        if not result.rows:
            raise StorageException("insert returned no row", operation="insert")
        return _to_result(result.rows[0])

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return the task with this id, or None."""
        stmt = select(*_COLUMNS).where(Task.id == task_id)
        result = await self.gateway.execute(stmt)
        return _to_result(result.rows[0]) if result.rows else None

    async def delete_by_id(self, task_id: int) -> int:
        """Delete by id without an existence check; return rows removed."""
        stmt = delete(Task).where(Task.id == task_id)
        result = await self.gateway.execute(stmt)
        return max(result.rowcount, 0)
