#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage: ``python scripts/run_migrations.py [revision]`` (default ``head``).
"""

import sys

import logfire

from virtue.config import Settings
from virtue.persistence.migrations import upgrade_database
from virtue.util.logging import setup_logging
from virtue.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema and log any failure to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        upgrade_database(settings, revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than serve a half-migrated schema
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
