from todo_api.application.dtos.task import TaskResult

__all__ = ["TaskResult"]
