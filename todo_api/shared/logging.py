"""Logging configuration for the application.

Every record is stamped with the ID of the request being served ("-" for
startup, shutdown and scripts) so storage failures logged by the service
layer can be traced to the client response that reported them.
"""

import logging
import sys

from todo_api.core.config import get_settings
from todo_api.shared.context import get_request_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
NO_REQUEST_ID = "-"


class RequestIDLogFilter(logging.Filter):
    """Copy the current request ID onto each record as ``request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or NO_REQUEST_ID
        return True


def setup_logging() -> None:
    """Configure stdout logging; DEBUG when settings.debug is True, otherwise INFO."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
    )
