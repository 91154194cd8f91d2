"""
Schema sync script.

Drops every table and creates it again from the ORM models. This is
destructive: all stored rows are lost. It runs separately from the server:

    python -m identity_vault.database.sync
"""

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from identity_vault.database.config.config import get_settings
from identity_vault.database.config.connection_engine import Database

logger = logging.getLogger(__name__)


def sync_schema(database: Database) -> None:
    """Drop and recreate all tables on `database`."""
    database.drop_all()
    database.create_all()


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    database = Database.from_settings(settings)
    try:
        sync_schema(database)
    except SQLAlchemyError as e:
        logger.error("Unable to connect to the database: %s", e)
        return 1
    finally:
        database.dispose()
    logger.info("Database & tables created!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
