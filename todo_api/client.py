"""Async HTTP client for the todo API, plus a local mirror of the last fetched list.

TodoClient speaks only the public HTTP contract (list, add, delete,
health). TodoListMirror keeps the client-side copy the way a UI does:
replace on fetch, prepend on add, drop on delete.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from todo_api.application.dtos.task import TaskResult
from todo_api.core.config import get_settings
from todo_api.domain.exceptions import TodoException, ValidationException
from todo_api.schemas.task import TaskResponse

logger = logging.getLogger(__name__)


class TodoClientError(TodoException):
    """Non-2xx response or transport failure talking to the API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, "CLIENT_ERROR", {"status_code": status_code})
        self.status_code = status_code


def _to_result(data: dict[str, Any]) -> TaskResult:
    parsed = TaskResponse.model_validate(data)
    return TaskResult(id=parsed.id, task=parsed.task, created_at=parsed.created_at)


class TodoClient:
    """Client for /todos and /health under a base URL such as http://localhost:5000/api."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url or get_settings().api_base_url
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def __aenter__(self) -> TodoClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _request(self, method: str, path: str, failure: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s: %s", failure, exc)
            raise TodoClientError(failure) from exc
        if response.is_error:
            try:
                message = response.json().get("error", failure)
            except ValueError:
                message = failure
            raise TodoClientError(message, response.status_code)
        return response.json()

    async def list_todos(self) -> list[TaskResult]:
        data = await self._request("GET", "/todos", "Failed to fetch todos")
        return [_to_result(item) for item in data]

    async def add_todo(self, text: str) -> TaskResult:
        """Create a todo. Blank text is rejected locally without a request."""
        if not text or not text.strip():
            raise ValidationException("Please enter a task", field="task")
        data = await self._request("POST", "/todos", "Failed to add todo", json={"task": text})
        return _to_result(data)

    async def delete_todo(self, todo_id: int) -> str:
        data = await self._request("DELETE", f"/todos/{todo_id}", "Failed to delete todo")
        return data["message"]

    async def health(self) -> dict[str, str]:
        return await self._request("GET", "/health", "Health check failed")


class TodoListMirror:
    """Local copy of the last fetched list; holds no other state."""

    def __init__(self, client: TodoClient) -> None:
        self.client = client
        self.todos: list[TaskResult] = []

    async def refresh(self) -> list[TaskResult]:
        self.todos = await self.client.list_todos()
        return self.todos

    async def add(self, text: str) -> TaskResult:
        created = await self.client.add_todo(text)
        self.todos = [created, *self.todos]
        return created

    async def remove(self, todo_id: int) -> None:
        await self.client.delete_todo(todo_id)
        self.todos = [t for t in self.todos if t.id != todo_id]
