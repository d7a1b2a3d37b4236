"""
Main entrypoint for the Resource API.

This module assembles the FastAPI application: it sets up logging,
registers the exception handlers, includes the routers and ties the
store's lifecycle to the application's lifespan.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app`` so it can be served directly, e.g.::

    uvicorn resource_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.endpoints import system
from .api.router import router as api_router
from .core.config import Settings, get_database_path, settings as default_settings
from .core.db import Database, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured application.  The store is opened and the schema
        initialised when the application starts, and the store is
        closed when it shuts down.
    """
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(get_database_path(settings))
        database.open()
        try:
            init_db(database)
            app.state.db = database
            yield
        finally:
            database.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(system.router, tags=["system"])

    return app


app = create_app()
