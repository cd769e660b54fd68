"""
Main entrypoint for the Event Finder API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn event_finder_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .core import config
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and applies migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the version 1 routes under ``/api/v1``
    and prepares the credential store on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that anything below can log.
    setup_logging(config.settings.log_level, config.settings.log_file or None)

    app = FastAPI(
        title=config.settings.project_name,
        version=config.settings.api_version,
        lifespan=lifespan,
    )

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
