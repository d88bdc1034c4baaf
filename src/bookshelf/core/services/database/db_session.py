"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.bookshelf.core.errors import StorageUnavailableError
from src.bookshelf.runtime.config.config_data import DatabaseConfig
from src.bookshelf.runtime.context import get_config


class DbSessionService:
    """Owns the engine of one database and hands out sessions bound to it.

    An instance is created per application (or per test) and passed to
    whatever needs storage; nothing here is a module-level singleton.
    """

    def __init__(self, db_config: DatabaseConfig | None = None):
        db_config = db_config or get_config().database
        self._config = db_config

        try:
            url = make_url(db_config.url)
        except SQLAlchemyError as e:
            raise StorageUnavailableError(f"Invalid database URL: {e}") from e

        engine_kwargs = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }
        if db_config.is_memory:
            # Every connection must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True
            if db_config.is_sqlite:
                self._ensure_parent_dir(url.database)

        logger.info("Initializing database engine for {}", url.render_as_string())
        try:
            self._engine = create_engine(url, **engine_kwargs)
        except (SQLAlchemyError, ValueError) as e:
            raise StorageUnavailableError(f"Cannot open database: {e}") from e

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}
        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # sessions cross FastAPI's threadpool
                    "timeout": db_config.timeout,  # lock timeout
                }
            )
        return connect_args

    @staticmethod
    def _ensure_parent_dir(database: str | None) -> None:
        """Create the directory holding a file-backed SQLite database."""
        if not database:
            return
        try:
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot create database directory for {database}: {e}"
            ) from e

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
