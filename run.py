"""Entry point for the Playlist API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level come from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``playlist_api/app/core/config.py`` for
every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from playlist_api.app.core.config import settings
from playlist_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Loggers and handlers come from setup_logging in create_app.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Playlist API listening on http://%s:%s (Swagger at /swagger)", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
