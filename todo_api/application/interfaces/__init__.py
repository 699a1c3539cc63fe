from todo_api.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]
