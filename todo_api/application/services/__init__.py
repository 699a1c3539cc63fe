"""Application services (use cases over repository ports)."""

from todo_api.application.services.task_service import TaskService, normalize_task_text

__all__ = ["TaskService", "normalize_task_text"]
