"""Entry point for the SelectShop API server.

Launches the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where only a
single Python file is specified.

Host, port and log level come from the environment (``HOST``,
``PORT``, ``LOG_LEVEL``); see ``selectshop_api/app/core/config.py`` for
every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from selectshop_api.app.core.config import settings
from selectshop_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
