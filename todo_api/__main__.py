"""Run the API server: python -m todo_api.

Exits with status 1 when startup fails (storage unreachable after all
connection attempts), so the server never begins serving.
"""

import logging
import sys

import uvicorn

from todo_api.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    config = uvicorn.Config(
        "todo_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
    server = uvicorn.Server(config)
    server.run()
    if not server.started:
        logger.error("Server did not start")
        sys.exit(1)


if __name__ == "__main__":
    main()
