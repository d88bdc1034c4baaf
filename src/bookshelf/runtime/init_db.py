"""Database initialization script."""

from src.bookshelf.core.services import DbManageService, DbSessionService
from src.bookshelf.runtime.context import get_config


def init_db() -> DbSessionService:
    """Create the database and all tables described by the configuration."""
    db_service = DbSessionService(get_config().database)
    DbManageService(db_service).create_all()
    return db_service


if __name__ == "__main__":
    init_db().dispose()
