# (c) Nelen & Schuurmans

import logging
from typing import Optional

from bookshelf.domain import AuthorRepository
from bookshelf.domain import Book
from bookshelf.domain import BookRepository

__all__ = ["BookService"]

logger = logging.getLogger(__name__)


class BookService:
    def __init__(
        self,
        author_repository: Optional[AuthorRepository] = None,
        book_repository: Optional[BookRepository] = None,
    ):
        if author_repository is None:
            author_repository = AuthorRepository()
        if book_repository is None:
            book_repository = BookRepository()
        self.author_repository = author_repository
        self.book_repository = book_repository

    def get_book(self) -> Book:
        author = self.author_repository.get_author()
        logger.debug("fetching book by %r", author)
        return self.book_repository.get_book(author)
