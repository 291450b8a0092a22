"""Database abstraction layer using SQLAlchemy 2.0.

This module provides the engine, connection pool and session management for
the SQLite store, plus the idempotent schema initializer. Every connection
handed out by the pool has foreign key enforcement switched on, which the
cascading deletes of the ownership hierarchy depend on.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Engine, create_engine, event, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from coincollector.core.config import Settings, get_settings
from coincollector.core.logging import get_logger
from coincollector.domain.exceptions import StoreUnavailableError

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    All models should inherit from this class to get proper ORM mapping
    and metadata management.
    """

    pass


def _configure_sqlite_connection(settings: Settings):
    """Build the ``connect`` listener that prepares every new DBAPI connection."""

    def on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute(f"PRAGMA busy_timeout={int(settings.db_sqlite_busy_timeout)}")
            if not settings.is_memory_database:
                cursor.execute(f"PRAGMA journal_mode={settings.db_sqlite_journal_mode}")
                cursor.execute(f"PRAGMA synchronous={settings.db_sqlite_synchronous}")
        finally:
            cursor.close()

    return on_connect


class DatabaseManager:
    """Database connection and session manager.

    This class manages the engine and session factory. It provides context
    managers for sessions and transactions and handles connection pooling.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the database manager.

        Args:
            settings: Optional settings instance. Defaults to the cached settings.
        """
        self.settings = settings or get_settings()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the database engine.

        Returns:
            Engine: SQLAlchemy engine instance.
        """
        if self._engine is None:
            if self.settings.is_memory_database:
                # One shared connection, otherwise every checkout sees an empty database
                pool_args: dict[str, Any] = {"poolclass": StaticPool}
            else:
                Path(self.settings.database_path).parent.mkdir(parents=True, exist_ok=True)
                pool_args = {
                    "pool_size": self.settings.db_pool_size,
                    "max_overflow": self.settings.db_max_overflow,
                    "pool_timeout": self.settings.db_pool_timeout,
                }

            self._engine = create_engine(
                self.settings.database_url,
                echo=self.settings.db_echo,
                connect_args={"check_same_thread": False},
                **pool_args,
            )
            event.listen(
                self._engine, "connect", _configure_sqlite_connection(self.settings)
            )

            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
                pool=type(self._engine.pool).__name__,
            )
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        """Get or create the session factory.

        Returns:
            sessionmaker: SQLAlchemy session factory.
        """
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.debug("Database session factory created")
        return self._session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a session that is rolled back on error and always closed.

        Yields:
            Session: SQLAlchemy session.

        Example:
            with db.session() as session:
                users = session.execute(select(UserModel)).scalars().all()
        """
        session = self.session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Provide a session wrapped in one transaction.

        The transaction commits when the block exits normally and rolls back
        when it raises. The connection goes back to the pool on every path.

        Yields:
            Session: SQLAlchemy session inside an open transaction.
        """
        with self.session() as session:
            with session.begin():
                yield session

    def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self.engine, checkfirst=True)

    def table_names(self) -> list[str]:
        return inspect(self.engine).get_table_names()

    def foreign_keys_enabled(self) -> bool:
        """Check the foreign key pragma on a pooled connection."""
        with self.engine.connect() as conn:
            return bool(conn.execute(text("PRAGMA foreign_keys")).scalar())

    def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
                logger.debug("Database connection check successful")
                return True
        except SQLAlchemyError as e:
            logger.error("Database connection check failed", error=str(e))
            return False

    def disconnect(self) -> None:
        """Close the database engine and all connections.

        Should be called on application shutdown.
        """
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")


# Global database manager instance
_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """Get the global database manager instance.

    Returns:
        DatabaseManager: Global database manager instance.
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def init_database(db: DatabaseManager | None = None) -> DatabaseManager:
    """Initialize the database schema.

    Creates the users, groups, collections and coins tables if they are
    missing. Running it against an initialized store changes nothing.

    Args:
        db: Database manager to initialize. Defaults to the global manager.

    Returns:
        DatabaseManager: The initialized manager.

    Raises:
        StoreUnavailableError: If the database cannot be reached or the
            tables cannot be created.
    """
    # Import all models to ensure they are registered with Base.metadata
    from coincollector.infrastructure.persistence.models import (  # noqa: F401
        CoinModel,
        CollectionGroupModel,
        CollectionModel,
        UserModel,
    )

    db = db or get_db_manager()

    if not db.check_connection():
        logger.error("Database connection failed")
        raise StoreUnavailableError("schema", None, "Failed to connect to database")

    try:
        existing = set(db.table_names())
        db.create_tables()
        created = sorted(set(db.table_names()) - existing)
    except SQLAlchemyError as e:
        logger.error("Schema creation failed", error=str(e))
        raise StoreUnavailableError("schema", None, "Failed to create tables") from e

    if created:
        logger.info("Database tables created", tables=created)
    else:
        logger.debug("Database schema already initialized")
    return db

