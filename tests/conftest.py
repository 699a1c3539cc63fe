"""Pytest configuration and fixtures for todo-api.

HTTP tests run the app over httpx ASGITransport (no lifespan, so no real
database); the task repository is replaced with FakeTaskRepository via
dependency_overrides. DB-dependent tests are marked requires_db and skip
when PostgreSQL is unreachable.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from todo_api.api.dependencies import get_task_repo
from todo_api.application.dtos.task import TaskResult
from todo_api.core.config import get_settings
from todo_api.infrastructure.exceptions import ConnectivityException, StorageException
from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.main import create_app

_EPOCH = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeTaskRepository:
    """In-memory ITaskRepository. Store assigns increasing ids and created_at.

    fail_on names operations ("list", "insert", "get", "delete") that raise
    StorageException. vanish_after_insert drops each row right after insert
    to simulate a concurrent delete before the re-read.
    """

    def __init__(self) -> None:
        self.rows: dict[int, TaskResult] = {}
        self.next_id = 1
        self.fail_on: set[str] = set()
        self.vanish_after_insert = False
        self.calls: list[str] = []

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StorageException(f"simulated {operation} failure", operation=operation)

    async def list_newest_first(self) -> list[TaskResult]:
        self._check("list")
        return sorted(self.rows.values(), key=lambda t: (t.created_at, t.id), reverse=True)

    async def insert(self, text: str) -> TaskResult:
        self._check("insert")
        task_id = self.next_id
        self.next_id += 1
        row = TaskResult(id=task_id, task=text, created_at=_EPOCH + timedelta(seconds=task_id))
        if not self.vanish_after_insert:
            self.rows[task_id] = row
        return row

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        self._check("get")
        return self.rows.get(task_id)

    async def delete_by_id(self, task_id: int) -> int:
        self._check("delete")
        return 1 if self.rows.pop(task_id, None) is not None else 0


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def app(fake_repo: FakeTaskRepository) -> FastAPI:
    """App with the task repository replaced by the in-memory fake."""
    application = create_app()
    application.dependency_overrides[get_task_repo] = lambda: fake_repo
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def unreachable_gateway() -> StorageGateway:
    """Gateway that was never initialized; every execute() raises StorageException."""
    return StorageGateway("postgresql+asyncpg://nobody@127.0.0.1:1/none", max_attempts=1)


@pytest.fixture
async def db_gateway() -> StorageGateway:
    """Initialized gateway against the configured PostgreSQL. Skips when unreachable."""
    settings = get_settings()
    gateway = StorageGateway.from_settings(settings)
    gateway.max_attempts = 1
    try:
        await gateway.initialize()
    except ConnectivityException:
        await gateway.dispose()
        pytest.skip(
            "PostgreSQL not reachable: set DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME, "
            "then run: uv run alembic upgrade head"
        )
    yield gateway
    await gateway.dispose()
