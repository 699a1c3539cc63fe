"""Pydantic request/response schemas for the HTTP API."""

from todo_api.schemas.health import HealthResponse
from todo_api.schemas.task import TaskCreateRequest, TaskDeleteResponse, TaskResponse

__all__ = ["HealthResponse", "TaskCreateRequest", "TaskDeleteResponse", "TaskResponse"]
