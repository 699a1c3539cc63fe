"""Shared cross-cutting helpers (logging, request context). No business logic."""

from todo_api.shared.context import get_request_id
from todo_api.shared.logging import setup_logging

__all__ = ["setup_logging", "get_request_id"]
