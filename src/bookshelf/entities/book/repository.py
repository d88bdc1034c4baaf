"""Book repository: the CRUD operations over the ``books`` table."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import sqlalchemy as sa
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.bookshelf.core.errors import (
    BookNotFoundError,
    InvalidInputError,
    StorageError,
)
from src.bookshelf.entities.book.entity import (
    SQLITE_INT_MAX,
    SQLITE_INT_MIN,
    Book,
    BookCreate,
    BookFilters,
    BookUpdate,
)
from src.bookshelf.entities.book.query import build_list_statement
from src.bookshelf.entities.book.table import BookTable

T = TypeVar("T")

_REQUIRED_TEXT_FIELDS = ("title", "author")


def _storable(value: int) -> bool:
    return SQLITE_INT_MIN <= value <= SQLITE_INT_MAX


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class BookRepository:
    """Data-access layer for books.

    Holds nothing but the session it was given: every call reads the current
    state from storage. Existence check and mutation in ``update`` and
    ``delete`` share the session's transaction but take no lock, so concurrent
    callers on the same id can still interleave.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _storage(self, action: str) -> Iterator[None]:
        """Translate driver failures into ``StorageError`` after rolling back."""
        try:
            yield
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.bind(error_type=type(e).__name__).error("Failed to {}: {}", action, e)
            raise StorageError(f"Failed to {action}") from e

    def _run(self, action: str, operation: Callable[[], T]) -> T:
        with self._storage(action):
            return operation()

    def _get_row(self, book_id: int) -> BookTable:
        if not _storable(book_id):
            raise BookNotFoundError(book_id)
        row = self._session.get(BookTable, book_id, populate_existing=True)
        if row is None:
            raise BookNotFoundError(book_id)
        return row

    def _to_entity(self, row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    def list_all(self, filters: BookFilters | None = None) -> list[Book]:
        """All books matching ``filters``, most recently created first."""
        if filters is not None and filters.year is not None and not _storable(filters.year):
            return []
        statement = build_list_statement(filters)
        rows = self._run("fetch books", lambda: self._session.exec(statement).all())
        return [self._to_entity(row) for row in rows]

    def get(self, book_id: int) -> Book:
        """The book with ``book_id``; raises ``BookNotFoundError`` otherwise."""
        row = self._run("fetch book", lambda: self._get_row(book_id))
        return self._to_entity(row)

    def create(self, data: BookCreate) -> Book:
        """Insert a book and return it as stored."""
        if _is_blank(data.title) or _is_blank(data.author):
            raise InvalidInputError("Title and author are required")

        row = BookTable(
            title=data.title,
            author=data.author,
            published_year=data.published_year,
            genre=data.genre,
        )
        with self._storage("create book"):
            self._session.add(row)
            self._session.commit()
            # Re-read so id and timestamps are the database's values
            self._session.refresh(row)

        logger.info("Created book {}", row.id)
        return self._to_entity(row)

    def update(self, book_id: int, data: BookUpdate) -> Book:
        """Apply the fields present in ``data`` and return the stored result."""
        row = self._run("fetch book", lambda: self._get_row(book_id))

        changes = data.changes()
        if not changes:
            raise InvalidInputError("No fields to update")
        for name in _REQUIRED_TEXT_FIELDS:
            if name in changes and _is_blank(changes[name]):
                raise InvalidInputError(f"{name.capitalize()} cannot be empty")

        with self._storage("update book"):
            for name, value in changes.items():
                setattr(row, name, value)
            row.updated_at = sa.func.now()
            self._session.commit()
            self._session.refresh(row)

        logger.info("Updated book {} fields={}", book_id, sorted(changes))
        return self._to_entity(row)

    def delete(self, book_id: int) -> None:
        """Remove the book permanently."""
        row = self._run("fetch book", lambda: self._get_row(book_id))

        with self._storage("delete book"):
            self._session.delete(row)
            self._session.commit()

        logger.info("Deleted book {}", book_id)
