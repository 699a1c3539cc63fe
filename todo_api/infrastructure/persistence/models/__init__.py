"""ORM models. Import here so Alembic sees every table on Base.metadata."""

from todo_api.infrastructure.persistence.models.task import Task

__all__ = ["Task"]
