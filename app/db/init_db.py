"""
Database initialization.

Applies all pending Alembic migrations. Run it once per deployment with
``python -m app.db.init_db`` or set ``DB_INIT_ON_STARTUP=true``.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from app.core.config import settings
from app.db.database import engine

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


def get_alembic_config() -> Config:
    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "alembic"))
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    # logging is already configured by app.utils.logger
    config.attributes["configure_logger"] = False
    return config


def get_pending_revisions(config: Config) -> list:
    """Return the revisions between the database's current head and the script head."""
    script = ScriptDirectory.from_config(config)
    with engine.connect() as connection:
        current = MigrationContext.configure(connection).get_current_heads()
    return [
        revision.revision
        for revision in script.iterate_revisions("heads", current or "base")
    ]


def init_db() -> None:
    """
    Apply pending migrations.

    Raises:
        Exception: Any error while checking or applying migrations is logged and re-raised
    """
    try:
        logger.info("Starting database initialization...")
        config = get_alembic_config()

        pending = get_pending_revisions(config)
        logger.info("Found %d pending migrations: %s", len(pending), ", ".join(pending))

        command.upgrade(config, "head")

        remaining = get_pending_revisions(config)
        if remaining:
            logger.warning(
                "After migration, %d migrations are still pending: %s",
                len(remaining),
                ", ".join(remaining),
            )
        else:
            logger.info("All migrations have been applied successfully")
    except Exception:
        logger.exception("An error occurred while initializing the database")
        raise


if __name__ == "__main__":
    from app.utils import logger as _  # noqa: F401 - Import to configure logging

    init_db()
