"""Error kinds raised by the book resource handler and storage layer.

The HTTP surface maps each kind to exactly one status code:
``InvalidInputError`` -> 400, ``BookNotFoundError`` -> 404,
``StorageError`` -> 500.
"""


class BookshelfError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(BookshelfError):
    """Input is missing required fields or carries nothing to apply."""

    status_code = 400


class BookNotFoundError(BookshelfError):
    """No book exists with the requested id."""

    status_code = 404

    def __init__(self, book_id: int) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class StorageError(BookshelfError):
    """A statement failed against the database for a reason other than existence."""

    status_code = 500


class StorageUnavailableError(StorageError):
    """The database could not be opened or its schema could not be created."""
