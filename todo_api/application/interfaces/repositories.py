"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
Types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from todo_api.application.dtos.task import TaskResult


class ITaskRepository(Protocol):
    """Protocol for task storage.

    Implementations raise StorageException when the store fails.
    """

    async def list_newest_first(self) -> list[TaskResult]:
        """Return all tasks, created_at descending, then id descending."""

    async def insert(self, text: str) -> TaskResult:
        """Insert a task and return id/created_at assigned by the store."""

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return the task with this id, or None."""

    async def delete_by_id(self, task_id: int) -> int:
        """Delete the task with this id; return the number of rows removed (0 or 1)."""
