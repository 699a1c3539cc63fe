"""Tests for /api/todos: contract, validation, ordering, and error shaping."""

import pytest
from httpx import AsyncClient

from tests.conftest import FakeTaskRepository


async def test_create_trims_and_returns_201(client: AsyncClient) -> None:
    response = await client.post("/api/todos", json={"task": "  buy milk "})
    assert response.status_code == 201
    data = response.json()
    assert data["task"] == "buy milk"
    assert data["id"] == 1
    assert "created_at" in data


async def test_create_assigns_unique_ids(client: AsyncClient) -> None:
    ids = set()
    for text in ("a", "b", "c"):
        response = await client.post("/api/todos", json={"task": text})
        ids.add(response.json()["id"])
    assert len(ids) == 3


@pytest.mark.parametrize("payload", [{"task": ""}, {"task": "   "}, {"task": "\t\n"}, {"task": None}, {}])
async def test_create_blank_returns_400_and_stores_nothing(
    client: AsyncClient, fake_repo: FakeTaskRepository, payload: dict
) -> None:
    """Blank or missing task is rejected before any storage call."""
    response = await client.post("/api/todos", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Task is required"}
    assert fake_repo.rows == {}
    assert fake_repo.calls == []


async def test_create_without_body_returns_400(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    response = await client.post("/api/todos")
    assert response.status_code == 400
    assert response.json() == {"error": "Task is required"}
    assert fake_repo.calls == []


@pytest.mark.parametrize("value", [5, ["not", "text"], {"text": "x"}, True])
async def test_create_non_string_task_returns_task_required(
    client: AsyncClient, fake_repo: FakeTaskRepository, value: object
) -> None:
    response = await client.post("/api/todos", json={"task": value})
    assert response.status_code == 400
    assert response.json() == {"error": "Task is required"}
    assert fake_repo.calls == []


async def test_create_malformed_json_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/todos", content=b"{not json", headers={"content-type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request"}


async def test_create_rereads_inserted_row(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    await client.post("/api/todos", json={"task": "walk dog"})
    assert fake_repo.calls == ["insert", "get"]


async def test_create_reread_miss_returns_inserted_values(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    """Row deleted between insert and re-read: respond with what the insert returned."""
    fake_repo.vanish_after_insert = True
    response = await client.post("/api/todos", json={"task": " walk dog "})
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert response.json()["task"] == "walk dog"


@pytest.mark.parametrize("failing", ["insert", "get"])
async def test_create_storage_failure_returns_500(
    client: AsyncClient, fake_repo: FakeTaskRepository, failing: str
) -> None:
    fake_repo.fail_on = {failing}
    response = await client.post("/api/todos", json={"task": "x"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to add todo"}


async def test_list_newest_first(client: AsyncClient) -> None:
    await client.post("/api/todos", json={"task": "A"})
    await client.post("/api/todos", json={"task": "B"})
    response = await client.get("/api/todos")
    assert response.status_code == 200
    assert [t["task"] for t in response.json()] == ["B", "A"]


async def test_list_empty(client: AsyncClient) -> None:
    response = await client.get("/api/todos")
    assert response.status_code == 200
    assert response.json() == []


async def test_list_storage_failure_hides_cause(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    fake_repo.fail_on = {"list"}
    response = await client.get("/api/todos")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch todos"}
    assert "simulated" not in response.text


async def test_delete_existing_removes_one_row(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    await client.post("/api/todos", json={"task": "keep"})
    await client.post("/api/todos", json={"task": "drop"})
    response = await client.delete("/api/todos/2")
    assert response.status_code == 200
    assert response.json() == {"message": "Todo deleted successfully"}
    assert list(fake_repo.rows) == [1]
    listing = await client.get("/api/todos")
    assert [t["id"] for t in listing.json()] == [1]


async def test_delete_missing_id_is_success(client: AsyncClient) -> None:
    response = await client.delete("/api/todos/999")
    assert response.status_code == 200
    assert response.json() == {"message": "Todo deleted successfully"}


@pytest.mark.parametrize("raw_id", ["abc", "1.5", "99999999999", "-99999999999"])
async def test_delete_unmatchable_id_is_success_without_storage_call(
    client: AsyncClient, fake_repo: FakeTaskRepository, raw_id: str
) -> None:
    """Ids no row can carry succeed like any missing id."""
    await client.post("/api/todos", json={"task": "keep"})
    fake_repo.calls.clear()

    response = await client.delete(f"/api/todos/{raw_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Todo deleted successfully"}
    assert fake_repo.calls == []
    assert list(fake_repo.rows) == [1]


async def test_delete_storage_failure_returns_500(
    client: AsyncClient, fake_repo: FakeTaskRepository
) -> None:
    fake_repo.fail_on = {"delete"}
    response = await client.delete("/api/todos/1")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete todo"}


async def test_end_to_end_scenario(client: AsyncClient) -> None:
    """Create two, list newest first, delete the first, list again."""
    first = await client.post("/api/todos", json={"task": "  buy milk "})
    assert first.status_code == 201
    assert first.json()["id"] == 1
    assert first.json()["task"] == "buy milk"

    second = await client.post("/api/todos", json={"task": "walk dog"})
    assert second.status_code == 201
    assert second.json()["id"] == 2
    assert second.json()["created_at"] > first.json()["created_at"]

    listing = await client.get("/api/todos")
    assert [t["id"] for t in listing.json()] == [2, 1]

    deleted = await client.delete("/api/todos/1")
    assert deleted.status_code == 200

    listing = await client.get("/api/todos")
    assert [t["id"] for t in listing.json()] == [2]
