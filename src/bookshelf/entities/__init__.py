"""Entities organised by business concept: entity, table and repository side by side."""

from .book import Book, BookRepository, BookTable

__all__ = ["Book", "BookRepository", "BookTable"]
