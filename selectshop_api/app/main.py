"""
Main entrypoint for the SelectShop API.

This module assembles the FastAPI application: it sets up logging,
registers the handler that turns domain errors into JSON responses and
mounts the versioned routers under ``/api``.  The app is instantiated
at import time as ``app``, e.g.::

    uvicorn selectshop_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.exceptions import ShopError
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    """Serialise a domain error as ``{"code", "detail"}`` with its status."""
    logger.warning("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code.value)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_exception_handler(ShopError, shop_error_handler)
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    return app


app = create_app()
