"""Entity: Book, and the input shapes accepted for it."""

from typing import Any

from pydantic import BaseModel, Field

from src.bookshelf.entities._base import Entity

# SQLite stores INTEGER as a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class Book(Entity):
    """A persisted book as returned to callers.

    Always built from a row re-read from storage, so ``id`` and both
    timestamps are the database's values.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    published_year: int | None = Field(default=None, description="Year of publication")
    genre: str | None = Field(default=None, description="Genre")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.published_year == other.published_year
            and self.genre == other.genre
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.published_year,
            self.genre,
        ))


class BookCreate(BaseModel):
    """Input for creating a book.

    ``title`` and ``author`` are typed optional so that a missing value reaches
    the repository and is reported as an invalid input rather than a parse
    failure.
    """

    title: str | None = Field(default=None, description="Title (required)")
    author: str | None = Field(default=None, description="Author (required)")
    published_year: int | None = Field(
        default=None, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, description="Year of publication"
    )
    genre: str | None = Field(default=None, description="Genre")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Pride and Prejudice",
                    "author": "Jane Austen",
                    "published_year": 1813,
                    "genre": "Romance",
                }
            ]
        }
    }


class BookUpdate(BaseModel):
    """Partial update of a book.

    A field is applied only when it was present in the input, which pydantic
    tracks in ``model_fields_set``. ``{"genre": null}`` clears the genre while
    ``{}`` leaves it alone.
    """

    title: str | None = Field(default=None, description="New title")
    author: str | None = Field(default=None, description="New author")
    published_year: int | None = Field(
        default=None,
        ge=SQLITE_INT_MIN,
        le=SQLITE_INT_MAX,
        description="New year, null clears it",
    )
    genre: str | None = Field(default=None, description="New genre, null clears it")

    model_config = {
        "json_schema_extra": {"examples": [{"genre": "Classic"}]}
    }

    def changes(self) -> dict[str, Any]:
        """Present fields with their values, ``None`` included."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }


class BookFilters(BaseModel):
    """Optional constraints for listing books, combined with AND."""

    author: str | None = Field(default=None, description="Substring of the author")
    genre: str | None = Field(default=None, description="Substring of the genre")
    year: int | None = Field(default=None, description="Exact publication year")
