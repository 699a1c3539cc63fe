"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error response body
has the shape {"error": <message>}; cause detail stays in server logs.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.core.config import get_settings
from todo_api.domain.exceptions import ServiceException, TodoException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "FETCH_FAILED": 500,
    "CREATE_FAILED": 500,
    "DELETE_FAILED": 500,
    "STORAGE_ERROR": 500,
}

INVALID_REQUEST_MESSAGE = "Invalid request"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _todo_exception_handler(request: Request, exc: TodoException) -> JSONResponse:
    """Return JSON from TodoException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    if status >= 500 and not isinstance(exc, ServiceException):
        # Storage errors must be mapped by the service layer before reaching here.
        logger.error("Unmapped %s: %s %s", exc.error_code, exc.message, exc.details)
        return JSONResponse(status_code=status, content={"error": INTERNAL_ERROR_MESSAGE})
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 for malformed request data (e.g. a body that is not JSON)."""
    logger.debug("Request validation failed for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (404, 405, ...)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a generic 500; the cause is only logged.

    Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
    request ID header is set here from request.state.
    """
    request_id = getattr(request.state, "request_id", None)
    logger.error("Unhandled exception (request %s)", request_id, exc_info=exc)
    headers = {get_settings().request_id_header: request_id} if request_id else None
    return JSONResponse(
        status_code=500, content={"error": INTERNAL_ERROR_MESSAGE}, headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: TodoException (and subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TodoException, _todo_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
