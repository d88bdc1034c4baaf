"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, Query, Response, status

from src.bookshelf.api.http.deps import get_book_repository
from src.bookshelf.api.http.schemas import ErrorResponse
from src.bookshelf.entities.book import (
    Book,
    BookCreate,
    BookFilters,
    BookRepository,
    BookUpdate,
)

router = APIRouter(prefix="/api/books", tags=["Books"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Validation error"}}
_STORAGE = {500: {"model": ErrorResponse, "description": "Storage error"}}


@router.get(
    "",
    response_model=list[Book],
    summary="Get all books",
    responses={**_INVALID, **_STORAGE},
)
def list_books(
    author: str | None = Query(default=None, description="Substring of the author"),
    genre: str | None = Query(default=None, description="Substring of the genre"),
    year: int | None = Query(default=None, description="Exact publication year"),
    repository: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List books, most recently created first."""
    return repository.list_all(BookFilters(author=author, genre=genre, year=year))


@router.get(
    "/{book_id}",
    response_model=Book,
    summary="Get book by id",
    responses={**_NOT_FOUND, **_STORAGE},
)
def get_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    return repository.get(book_id)


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    summary="Create new book",
    responses={**_INVALID, **_STORAGE},
)
def create_book(
    book: BookCreate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Create a book; ``title`` and ``author`` are required."""
    return repository.create(book)


@router.put(
    "/{book_id}",
    response_model=Book,
    summary="Update book",
    responses={**_INVALID, **_NOT_FOUND, **_STORAGE},
)
def update_book(
    book_id: int,
    book_update: BookUpdate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Change only the fields present in the body."""
    return repository.update(book_id, book_update)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete book",
    responses={**_NOT_FOUND, **_STORAGE},
)
def delete_book(
    book_id: int,
    repository: BookRepository = Depends(get_book_repository),
) -> Response:
    repository.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
