"""Smoke tests for health and app wiring."""

from httpx import ASGITransport, AsyncClient

from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.main import create_app


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/health returns 200 with the fixed status payload."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Server is running"}


async def test_health_ok_when_storage_unreachable(
    unreachable_gateway: StorageGateway,
) -> None:
    """Health never touches storage, so it stays 200 while todo routes fail."""
    app = create_app(storage_gateway=unreachable_gateway)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        health = await ac.get("/api/health")
        todos = await ac.get("/api/todos")

    assert health.status_code == 200
    assert health.json()["status"] == "OK"
    assert todos.status_code == 500
    assert todos.json() == {"error": "Failed to fetch todos"}


async def test_request_id_generated(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.headers.get("x-request-id")


async def test_request_id_forwarded_when_safe(client: AsyncClient) -> None:
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"


async def test_unknown_route_returns_json_error(client: AsyncClient) -> None:
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
