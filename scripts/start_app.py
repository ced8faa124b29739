#!/usr/bin/env python3
"""Migrate the database, then serve the API with uvicorn.

Set ``DATABASE__MIGRATE_ON_START=false`` when migrations run as a separate
deploy step.
"""

import sys

import logfire
import uvicorn

from virtue.config import Settings
from virtue.persistence.migrations import upgrade_database
from virtue.util.logging import setup_logging
from virtue.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        if settings.database.migrate_on_start:
            upgrade_database(settings)

        logfire.info(
            "Starting Virtue API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
        )
        uvicorn.run(
            "virtue.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
