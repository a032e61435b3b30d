"""
Database configuration and session management.
"""

import logging
from datetime import datetime, timezone
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp with microsecond precision, used for column defaults."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the engine and session factory for one application instance.

    The handle is built alongside the app and connected during startup;
    request handlers receive sessions from it through dependency injection.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def connect(self) -> Engine:
        """Create the engine and session factory (idempotent)."""
        if self.engine is not None:
            return self.engine

        kwargs = {}
        if self.is_sqlite:
            # Requests are served from a threadpool
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, echo=self.echo, future=True, **kwargs)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, future=True
        )
        logger.info("Database engine created dialect=%s", self.engine.dialect.name)
        return self.engine

    def init_database(self):
        """Initialize database schema"""
        engine = self.connect()
        with engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Session:
        """Open a new session bound to this database."""
        if self.SessionLocal is None:
            self.connect()
        return self.SessionLocal()

    def get_db_session(self) -> Generator[Session, None, None]:
        """Yield a session and close it afterwards (for FastAPI dependency injection)"""
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def dispose(self):
        """Release pooled connections; the engine stays usable."""
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database connections released")
