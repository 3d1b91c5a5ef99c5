"""
Server Entry Point

Starts the Submission Service with uvicorn.

Usage:
    python -m src.api.server
    submission-service            # console script from pyproject.toml

Exit Codes:
    0: Server stopped normally
    1: MONGO_URI missing, invalid configuration, or startup failed
       (initial MongoDB connection)
"""

import logging
import sys

import uvicorn

from src.api.main import create_app
from src.domain.shared.exceptions import ConfigurationError
from src.shared.config import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Load settings, build the app and serve until terminated.

    Returns:
        Process exit code
    """
    try:
        settings = Settings.from_env()
        settings.require_mongo_uri()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
        return 1

    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    logger.info(f"Starting server on {settings.host}:{settings.port}")
    server.run()

    if not server.started:
        logger.error("Server startup failed, exiting")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
