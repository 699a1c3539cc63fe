"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring. Startup builds the storage
gateway (unless one was injected on app.state) and blocks on its
initialization gate; requests are only served once it is READY.
A FAILED gate is fatal: SystemExit(1) aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from todo_api.core.config import get_settings
from todo_api.infrastructure.exceptions import ConnectivityException
from todo_api.infrastructure.persistence.database import StorageGateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the storage gateway, yield, then dispose of it."""
    settings = get_settings()

    # ---- Startup ----
    gateway: StorageGateway | None = getattr(app.state, "storage_gateway", None)
    if gateway is None:
        gateway = StorageGateway.from_settings(settings)
        app.state.storage_gateway = gateway

    try:
        await gateway.initialize()
    except ConnectivityException as exc:
        logger.critical(
            "Could not connect to database after multiple attempts (%s)",
            exc.details.get("reason"),
        )
        raise SystemExit(1) from exc

    logger.info("%s %s ready", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await gateway.dispose()
