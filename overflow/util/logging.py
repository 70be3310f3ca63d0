"""Logging configuration for the application."""

import logging
import sys

from overflow.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for uvicorn and third-party libraries.

    Application code logs through Logfire; this only sets the level and
    format of the root logger.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL statements are traced by Logfire already
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("overflow").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
