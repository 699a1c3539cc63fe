"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See todo_api.core.lifespan and
todo_api.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api import api_router
from todo_api.core.config import get_settings
from todo_api.core.exception_handlers import register_exception_handlers
from todo_api.core.lifespan import create_lifespan
from todo_api.infrastructure.persistence.database import StorageGateway
from todo_api.middleware import RequestIDMiddleware
from todo_api.shared.logging import setup_logging


def create_app(storage_gateway: StorageGateway | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        storage_gateway: Optional pre-built gateway; when omitted the
            lifespan builds one from settings.
    """
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=create_lifespan,
    )
    if storage_gateway is not None:
        app.state.storage_gateway = storage_gateway

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
