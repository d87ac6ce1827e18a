"""Entry point for serving the Astronaut API.

Starts the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example in Docker, where only a
single Python file is specified.

Host and port are read from the environment variables ``HOST`` and
``PORT``.  Defaults are ``0.0.0.0`` and ``8000``.  All other settings
(database path, log level, ...) are read by
``astronaut_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from astronaut_api.app.main import app
from astronaut_api.app.core.config import settings


async def run_api() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info("Starting %s %s", settings.project_name, settings.api_version)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
