"""Schema creation for the application database."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from src.bookshelf.core.errors import StorageUnavailableError
from src.bookshelf.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, db_service: DbSessionService):
        self._engine = db_service.engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        from src.bookshelf.entities.book import BookTable  # noqa: F401

        try:
            SQLModel.metadata.create_all(self._engine)
        except SQLAlchemyError as e:
            logger.error("Database initialization failed: {}", e)
            raise StorageUnavailableError(f"Cannot create database tables: {e}") from e
        logger.info("Database initialized with tables.")
