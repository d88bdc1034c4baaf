"""Statement builder for listing books."""

from sqlmodel import col, select
from sqlmodel.sql.expression import SelectOfScalar

from src.bookshelf.entities.book.entity import BookFilters
from src.bookshelf.entities.book.table import BookTable


def build_list_statement(filters: BookFilters | None = None) -> SelectOfScalar[BookTable]:
    """Build the SELECT for a filtered listing, newest first.

    Filter values only ever reach the database as bound parameters. Substring
    filters escape ``%`` and ``_`` so they match literally.
    """
    statement = select(BookTable)
    filters = filters or BookFilters()

    if filters.author:
        statement = statement.where(col(BookTable.author).contains(filters.author, autoescape=True))
    if filters.genre:
        statement = statement.where(col(BookTable.genre).contains(filters.genre, autoescape=True))
    if filters.year is not None:
        statement = statement.where(col(BookTable.published_year) == filters.year)

    # created_at has one-second resolution; id breaks ties in insertion order
    return statement.order_by(col(BookTable.created_at).desc(), col(BookTable.id).desc())
