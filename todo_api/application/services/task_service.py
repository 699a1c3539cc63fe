"""Task service: validation, trimming, and storage-error mapping for task operations.

Storage failures are logged with their cause here and re-raised as generic
ServiceException subclasses; the HTTP layer never sees StorageException.
"""

from __future__ import annotations

import logging
import re

from todo_api.application.dtos.task import TaskResult
from todo_api.application.interfaces.repositories import ITaskRepository
from todo_api.domain.exceptions import (
    CreateFailedException,
    DeleteFailedException,
    FetchFailedException,
    ValidationException,
)
from todo_api.infrastructure.exceptions import StorageException

logger = logging.getLogger(__name__)

TASK_REQUIRED_MESSAGE = "Task is required"

# ids are int4 serials; anything else cannot match a row
TASK_ID_MIN = -(2**31)
TASK_ID_MAX = 2**31 - 1
_TASK_ID_PATTERN = re.compile(r"^-?[0-9]+$")


def normalize_task_text(raw: object) -> str:
    """Return trimmed task text; raise ValidationException if missing or blank."""
    if not isinstance(raw, str):
        raise ValidationException(TASK_REQUIRED_MESSAGE, field="task")
    text = raw.strip()
    if not text:
        raise ValidationException(TASK_REQUIRED_MESSAGE, field="task")
    return text


def parse_task_id(raw: str | int) -> int | None:
    """Return raw as a task id, or None when no stored row could carry it."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _TASK_ID_PATTERN.match(raw):
        value = int(raw)
    else:
        return None
    if not TASK_ID_MIN <= value <= TASK_ID_MAX:
        return None
    return value


class TaskService:
    """List, create and delete tasks through an ITaskRepository."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def list_tasks(self) -> list[TaskResult]:
        """Return all tasks newest first.

        Raises:
            FetchFailedException: storage failed.
        """
        try:
            return await self.task_repo.list_newest_first()
        except StorageException as exc:
            logger.error("Error fetching todos: %s", exc.details, exc_info=exc)
            raise FetchFailedException() from exc

    async def create_task(self, raw_text: object) -> TaskResult:
        """Validate and trim, insert, then re-read the new row by id.

        When the re-read finds nothing (the row was deleted concurrently),
        the values returned by the insert are used instead.

        Raises:
            ValidationException: text missing or blank; no storage call made.
            CreateFailedException: storage failed at insert or re-read.
        """
        text = normalize_task_text(raw_text)
        try:
            inserted = await self.task_repo.insert(text)
            created = await self.task_repo.get_by_id(inserted.id)
        except StorageException as exc:
            logger.error("Error adding todo: %s", exc.details, exc_info=exc)
            raise CreateFailedException() from exc
        if created is None:
            logger.warning(
                "Todo %s vanished before re-read; responding with inserted values",
                inserted.id,
            )
            return inserted
        return created

    async def delete_task(self, raw_id: str | int) -> None:
        """Delete by id. A missing or unparseable id is a successful no-op.

        Ids that are not integers or fall outside the column range cannot
        match a row, so no statement is sent for them.

        Raises:
            DeleteFailedException: storage failed.
        """
        task_id = parse_task_id(raw_id)
        if task_id is None:
            logger.debug("Delete todo %r matches no row; nothing to do", raw_id)
            return
        try:
            removed = await self.task_repo.delete_by_id(task_id)
        except StorageException as exc:
            logger.error("Error deleting todo %s: %s", task_id, exc.details, exc_info=exc)
            raise DeleteFailedException(task_id) from exc
        logger.debug("Delete todo %s removed %d row(s)", task_id, removed)
