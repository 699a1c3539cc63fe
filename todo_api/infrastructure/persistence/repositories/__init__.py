"""Repository implementations over the storage gateway."""

from todo_api.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["TaskRepository"]
