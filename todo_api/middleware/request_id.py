"""Request ID middleware.

Forwards a client's X-Request-ID (or generates one), binds it to the
request context for log lines, stores it on request.state for error
handlers that run outside this middleware, and echoes it on the response.
Client values are only forwarded when short and limited to
[a-zA-Z0-9_-], so they are safe to write into log lines.
"""

import re
import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from todo_api.shared.context import bind_request_id, reset_request_id

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(rf"[a-zA-Z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}")


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client value when safe to log; otherwise a new UUID."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Raw ASGI middleware; http scopes only."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = sanitize_request_id(Headers(scope=scope).get(self.header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                MutableHeaders(scope=message).append(self.header_name, request_id)
            await send(message)

        token = bind_request_id(request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            reset_request_id(token)
