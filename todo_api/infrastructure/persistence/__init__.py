"""Persistence: storage gateway, ORM models, repositories, migrations."""

from todo_api.infrastructure.persistence.database import (
    Base,
    GatewayState,
    QueryResult,
    StorageGateway,
)

__all__ = ["Base", "GatewayState", "QueryResult", "StorageGateway"]
