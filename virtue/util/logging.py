"""Logging configuration for the application."""

import logging
import sys

import logfire

from virtue.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the process.

    Application code logs through Logfire directly. Libraries that use the
    standard library (uvicorn, alembic, SQLAlchemy) are printed to stdout
    and forwarded to Logfire so both end up in the same trace view.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,  # Override any existing configuration
    )

    # SQL echo is switched on per engine in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    # Alembic reports each applied revision at INFO
    logging.getLogger("alembic").setLevel(logging.INFO)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
