"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.
- Provides the `Database` storage handle: the Engine (connection pool + SQL
  execution entry point) together with its session factory.

Notes
-----
- A `Database` is constructed once at startup (see `identity_vault.main`) and
  handed to every request through `app.state`; nothing here opens a connection
  at import time.
- In-memory SQLite URLs get a `StaticPool` so every session shares the single
  in-memory database (used by the test-suite).
- All ORM models must inherit from `declarativeBase` to participate in schema
  creation and enable ORM features.
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

logger = logging.getLogger(__name__)

metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models.
All model classes should inherit from this to gain ORM features and automatic schema generation.
"""


class Database:
    """
    Storage handle wrapping a SQLAlchemy Engine and its session factory.

    Parameters
    ----------
    url : str | sqlalchemy.engine.URL
        Connection URL.
    echo : bool
        Log emitted SQL.
    """

    def __init__(self, url, echo: bool = False):
        self.url = make_url(url)
        engine_kwargs = {"echo": echo}
        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.url, **engine_kwargs)
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings) -> "Database":
        """Build the handle from application settings."""
        return cls(settings.database_url, echo=settings.SQL_ECHO)

    def session(self):
        """Open a new Session bound to this database."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create every table declared on the shared metadata."""
        # Entities register themselves on `metadata` when imported.
        import identity_vault.database.entities  # noqa: F401

        metadata.create_all(self.engine)

    def drop_all(self) -> None:
        """Drop every table declared on the shared metadata."""
        import identity_vault.database.entities  # noqa: F401

        metadata.drop_all(self.engine)

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
        logger.info("Database connections released for %s", self.url.render_as_string(hide_password=True))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
