"""HTTP middleware. Applied in the app factory; last added = outermost."""

from todo_api.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
