"""
Serve the API with uvicorn.

Host and port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0``
and ``9090``); see ``core/config.py`` for the other variables.  The
``todo-api`` console script and the root ``run.py`` both call
``main``.
"""

import asyncio
import logging

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app

logger = logging.getLogger(__name__)


def build_server() -> Server:
    """Return a uvicorn server bound to the configured host and port."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def run_api() -> None:
    """Start the API server and block until it shuts down."""
    server = build_server()
    logger.info("Listening on http://localhost:%d", settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
