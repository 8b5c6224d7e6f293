# (c) Nelen & Schuurmans

from typing import Optional

from clean_python.fastapi import get
from clean_python.fastapi import Resource
from clean_python.fastapi import v

from bookshelf.application import BookService
from bookshelf.domain import Book

__all__ = ["BookController"]


class BookController(Resource, version=v(1), name="books"):
    """The book that this service is about"""

    # Less stable versions (v1-beta, v1-alpha) are instantiated without
    # arguments by clean_python.fastapi.Service.
    def __init__(self, book_service: Optional[BookService] = None):
        if book_service is None:
            book_service = BookService()
        self.book_service = book_service

    @get("/book", response_model=Book)
    def get_book(self) -> Book:
        return self.book_service.get_book()
