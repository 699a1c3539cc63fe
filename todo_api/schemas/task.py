"""Task API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskCreateRequest(BaseModel):
    """Request body for POST /api/todos.

    task is untyped at the schema level so a missing, blank or non-string
    value is reported by the service as "Task is required" (400) rather
    than as a schema error.
    """

    task: Any = Field(default=None, description="Task text; trimmed before storage")


class TaskResponse(BaseModel):
    """A stored task."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    task: str
    created_at: datetime


class TaskDeleteResponse(BaseModel):
    """Confirmation returned by DELETE /api/todos/{id} (matched or not)."""

    message: str = Field(default="Todo deleted successfully")
