"""
Main entrypoint for the Astronaut API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn astronaut_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_connection, init_db, is_memory_database
from .core.errors import (
    ServiceError,
    handle_service_error,
    handle_unexpected_error,
    handle_validation_error,
)
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Bring the schema up to date before serving requests.

    An in-memory database only lives as long as one of its connections
    is open, so for ``:memory:`` a connection is held until shutdown.
    """
    anchor = get_connection() if is_memory_database() else None
    init_db(anchor)
    app.state.db_anchor = anchor
    try:
        yield
    finally:
        if anchor is not None:
            anchor.close()
        app.state.db_anchor = None


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that ASGI servers
# can import ``app`` directly.
app = create_app()
