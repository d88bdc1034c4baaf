"""Book database table model."""

from src.bookshelf.entities._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    ``sqlite_autoincrement`` makes SQLite emit ``AUTOINCREMENT`` so ids of
    deleted rows are never handed out again.
    """

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    title: str
    author: str
    published_year: int | None = None
    genre: str | None = None
