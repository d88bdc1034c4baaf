"""Entity package: Book."""

from .entity import Book, BookCreate, BookFilters, BookUpdate
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "Book",
    "BookCreate",
    "BookFilters",
    "BookRepository",
    "BookTable",
    "BookUpdate",
]
