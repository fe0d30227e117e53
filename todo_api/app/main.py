"""
Main entrypoint for the To-Do List API.

This module assembles the FastAPI application, sets up logging,
registers the plain-text error handler and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn todo_api.app.main:app

Each application owns exactly one ``ToDoService``.  Pass one in to
share or pre-populate it; otherwise a fresh, empty service is created.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.todo_service import ToDoService


async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text to match the successful responses."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(service: Optional[ToDoService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[ToDoService]
        Service instance the handlers will use for the lifetime of the
        application.  A new one is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that handlers can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.todo_service = service if service is not None else ToDoService()

    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    # The routes live at the root; the versioned mount exposes the same
    # endpoints for clients that expect the ``/api/v1`` layout.
    app.include_router(v1_router)
    if settings.api_prefix:
        app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
