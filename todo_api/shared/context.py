"""Request-scoped context stored in contextvars.

The request ID middleware binds the current request's ID here for the
duration of the request; the logging filter reads it back so every log
line emitted while serving a request can be matched to the response's
X-Request-ID header.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def bind_request_id(request_id: str) -> Token:
    """Bind request_id to the current task; pass the token to reset_request_id."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the ID of the request being served, or None outside a request."""
    return _current_request_id.get()
