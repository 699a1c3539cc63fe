"""Request dependencies (composition root).

The storage gateway is built by the lifespan and stored on app.state;
everything below it is assembled per request. Tests substitute any layer
via app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from todo_api.application.interfaces.repositories import ITaskRepository
from todo_api.application.services.task_service import TaskService
from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.infrastructure.persistence.repositories import TaskRepository


def get_storage_gateway(request: Request) -> StorageGateway:
    """Return the gateway created at startup."""
    gateway = getattr(request.app.state, "storage_gateway", None)
    if gateway is None:
        raise RuntimeError("Storage gateway not configured; application lifespan did not run")
    return gateway


def get_task_repo(
    gateway: Annotated[StorageGateway, Depends(get_storage_gateway)],
) -> ITaskRepository:
    """Task repository bound to the shared gateway."""
    return TaskRepository(gateway)


def get_task_service(
    repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> TaskService:
    """Task service for list/create/delete."""
    return TaskService(repo)
