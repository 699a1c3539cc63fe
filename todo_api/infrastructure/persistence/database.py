"""Persistence: storage gateway (pooled async engine), query results, and ORM Base.

The gateway is constructed once by the application lifespan and handed to
request handlers through FastAPI dependencies; there is no module-level
engine. Schema is managed by Alembic migrations (see migrations/).

Startup gate: initialize() moves the gateway through
CONNECTING -> READY, or CONNECTING -> RETRYING -> ... -> FAILED once the
attempt bound is exhausted. FAILED is terminal; the lifespan turns it into
process exit.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import text
from sqlalchemy.engine import URL, CursorResult
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.expression import Executable, Insert

from todo_api.infrastructure.exceptions import ConnectivityException, StorageException

if TYPE_CHECKING:
    from todo_api.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_RETRY_DELAY_SECONDS = 5.0


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class GatewayState(str, Enum):
    """Lifecycle of the storage gateway's startup gate."""

    CONNECTING = "connecting"
    RETRYING = "retrying"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one statement: rows for reads, inserted_id for inserts."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0
    inserted_id: int | None = None


def _inserted_id(
    statement: Executable, result: CursorResult[Any], rows: list[dict[str, Any]]
) -> int | None:
    """Return the new row's id for INSERT statements (RETURNING row first, then driver PK)."""
    if not isinstance(statement, Insert):
        return None
    if rows and "id" in rows[0]:
        return rows[0]["id"]
    try:
        primary_key = result.inserted_primary_key
    except SQLAlchemyError:
        return None
    return primary_key[0] if primary_key else None


class StorageGateway:
    """Bounded connection pool over the relational store with parameterized execution.

    Pool policy: pool_size connections, no overflow, and no acquisition
    timeout, so callers wait (suspend) for a free connection without a
    queue bound.
    """

    def __init__(
        self,
        url: URL | str,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
        echo: bool = False,
    ) -> None:
        self.url = url
        self.pool_size = pool_size
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._state = GatewayState.CONNECTING

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageGateway:
        """Build a gateway from host/port/user/password/database settings."""
        url = URL.create(
            "postgresql+asyncpg",
            username=settings.db_user,
            password=settings.db_password.get_secret_value(),
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name,
        )
        return cls(
            url,
            pool_size=settings.db_pool_size,
            max_attempts=settings.db_connect_attempts,
            retry_delay=settings.db_connect_retry_delay,
            echo=settings.database_echo,
        )

    @property
    def state(self) -> GatewayState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is GatewayState.READY

    def _safe_url(self) -> str:
        if isinstance(self.url, URL):
            return self.url.render_as_string(hide_password=True)
        return str(self.url)

    def _create_engine(self) -> AsyncEngine:
        return create_async_engine(
            self.url,
            echo=self.echo,
            pool_size=self.pool_size,
            max_overflow=0,
            pool_timeout=None,
            pool_pre_ping=True,
        )

    async def _probe(self) -> None:
        """Acquire one pooled connection, run a trivial query, release it."""
        assert self._engine is not None
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def _wait_before_retry(self) -> None:
        await asyncio.sleep(self.retry_delay)

    async def initialize(self) -> None:
        """Block until storage is reachable or the attempt bound is exhausted.

        Raises:
            ConnectivityException: every attempt failed; state is FAILED.
        """
        if self._state is GatewayState.READY:
            return
        if self._state is GatewayState.FAILED:
            raise ConnectivityException(self.max_attempts)
        if self._engine is None:
            self._engine = self._create_engine()

        last_error: BaseException | None = None
        for attempt in range(1, self.max_attempts + 1):
            self._state = GatewayState.CONNECTING
            try:
                await self._probe()
            except (SQLAlchemyError, OSError) as exc:
                last_error = exc
                retries_left = self.max_attempts - attempt
                self._state = GatewayState.RETRYING
                logger.warning(
                    "Database connection failed. Retries left: %d (%s)",
                    retries_left,
                    exc,
                )
                if retries_left == 0:
                    break
                await self._wait_before_retry()
            else:
                self._state = GatewayState.READY
                logger.info("Connected to database %s", self._safe_url())
                return

        self._state = GatewayState.FAILED
        raise ConnectivityException(self.max_attempts, str(last_error)) from last_error

    async def execute(
        self,
        statement: Executable | str,
        params: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Run one statement on a pooled connection in its own short transaction.

        User-supplied values must arrive as bound parameters: either inside
        a Core construct (select/insert/delete with column comparisons) or
        in params for text() statements using :name placeholders.

        Raises:
            StorageException: gateway not ready, or the connection/query failed.
        """
        if not self.is_ready or self._engine is None:
            raise StorageException(
                f"storage gateway is not ready (state={self._state.value})"
            )
        if isinstance(statement, str):
            statement = text(statement)
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement, dict(params) if params else None)
                rows = (
                    [dict(row) for row in result.mappings().all()]
                    if result.returns_rows
                    else []
                )
                return QueryResult(
                    rows=rows,
                    rowcount=result.rowcount,
                    inserted_id=_inserted_id(statement, result, rows),
                )
        except (SQLAlchemyError, OSError) as exc:
            raise StorageException(str(exc)) from exc

    async def dispose(self) -> None:
        """Close all pooled connections. The gateway must be initialized again before use."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("Database engine disposed")
        self._state = GatewayState.CONNECTING
