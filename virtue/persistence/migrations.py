"""Programmatic Alembic upgrades.

The Alembic project (``alembic.ini`` and ``migrations/``) lives at the
repository root, next to the ``virtue`` package.
"""

from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from virtue.config import Settings

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def upgrade_database(settings: Settings, revision: str = "head") -> None:
    """Upgrade the configured database to ``revision``.

    Args:
        settings: Application settings (database URL)
        revision: Target revision
    """
    alembic_cfg = Config(str(ALEMBIC_INI))
    # Callers have already set up logging; keep env.py from resetting it
    alembic_cfg.attributes["configure_logger"] = False
    # configparser interpolation would choke on "%" in passwords
    alembic_cfg.set_main_option(
        "sqlalchemy.url", settings.database_url.replace("%", "%%")
    )

    with logfire.span("upgrade_database", revision=revision):
        command.upgrade(alembic_cfg, revision)
    logfire.info("Database is at revision {revision}", revision=revision)
