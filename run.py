"""Entry point for the CineBase API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from ``Settings`` (``HOST``, ``PORT`` and ``LOG_LEVEL``
environment variables).  It is intended to be executed from the
project root, for example under Docker where you only specify a
single Python file to run.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from cinebase_api.app.core.config import settings
from cinebase_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    logging.getLogger("cinebase_api.run").info(
        "CineBase server running at http://%s:%d", settings.host, settings.port
    )
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
