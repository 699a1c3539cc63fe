"""Seed sample todos into the configured database.

Usage:
    uv run python -m scripts.seed_dev_data [task text ...]

With no arguments a few sample tasks are inserted. Requires the todos table
(run: uv run alembic upgrade head). Uses the same DB_* settings as the API.
"""

from __future__ import annotations

import asyncio
import sys

from dotenv import load_dotenv

from todo_api.application.services.task_service import TaskService
from todo_api.core.config import get_settings
from todo_api.domain.exceptions import TodoException
from todo_api.infrastructure.exceptions import ConnectivityException
from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.infrastructure.persistence.repositories import TaskRepository

SAMPLE_TASKS = ("buy milk", "walk dog", "write report")


async def main(texts: list[str]) -> int:
    """Insert each text through TaskService; return process exit status."""
    load_dotenv()
    gateway = StorageGateway.from_settings(get_settings())
    try:
        await gateway.initialize()
    except ConnectivityException as exc:
        print(exc.message, file=sys.stderr)
        return 1
    service = TaskService(TaskRepository(gateway))
    try:
        for text in texts:
            try:
                created = await service.create_task(text)
            except TodoException as exc:
                print(f"Skipped {text!r}: {exc.message}", file=sys.stderr)
                continue
            print(f"Created todo {created.id}: {created.task}")
    finally:
        await gateway.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:] or list(SAMPLE_TASKS))))
