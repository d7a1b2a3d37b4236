"""Entry point for the Resource API server.

Loads a ``.env`` file from the working directory (if one exists),
builds the settings and serves the application with Uvicorn.

Supported variables: ``PORT``, ``HOST``, ``DB_PATH``, ``DB_FILENAME``, ``ACCESS_LOG``,
``LOG_LEVEL``, ``LOG_FILE``, ``LOG_FORMAT``, ``PROJECT_NAME`` and ``API_VERSION``.

Usage:
    python run.py
"""
import asyncio
import logging

from dotenv import load_dotenv
from uvicorn import Config, Server

logger = logging.getLogger("resource_api.run")


async def serve() -> None:
    """Start the API using Uvicorn on the configured host and port."""
    # Imported here so that values from .env are visible to Settings.
    from resource_api.app.core.config import Settings
    from resource_api.app.main import create_app

    settings = Settings()
    app = create_app(settings)
    base_url = f"http://localhost:{settings.port}"
    logger.info("Server is running on port %s", settings.port)
    logger.info("API endpoints:")
    logger.info("  - Health check: %s/health", base_url)
    logger.info("  - Resources: %s/api/resources", base_url)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=settings.access_log,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    load_dotenv()
    asyncio.run(serve())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
