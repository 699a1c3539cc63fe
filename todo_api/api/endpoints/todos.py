"""Todo API: thin routes delegating to TaskService."""

from typing import Annotated

from fastapi import APIRouter, Depends

from todo_api.api.dependencies import get_task_service
from todo_api.application.services.task_service import TaskService
from todo_api.schemas.task import TaskCreateRequest, TaskDeleteResponse, TaskResponse

router = APIRouter()


@router.get("", response_model=list[TaskResponse])
async def list_todos(
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """List all todos, most recently created first."""
    tasks = await service.list_tasks()
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=201)
async def create_todo(
    service: Annotated[TaskService, Depends(get_task_service)],
    body: TaskCreateRequest | None = None,
):
    """Create a todo from trimmed text; 400 when text is missing or blank."""
    task = await service.create_task(body.task if body is not None else None)
    return TaskResponse.model_validate(task)


@router.delete("/{todo_id}", response_model=TaskDeleteResponse)
async def delete_todo(
    todo_id: str,
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a todo by id. Unknown or unmatchable ids succeed the same way."""
    await service.delete_task(todo_id)
    return TaskDeleteResponse()
