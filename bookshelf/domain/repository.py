# (c) Nelen & Schuurmans

from clean_python import BadRequest

from .book import Author
from .book import Book

__all__ = ["AuthorRepository", "BookRepository"]

class AuthorRepository:
    """Supplies the author; a fixed in-memory value."""

    name = "F. Scott Fitzgerald"

    def get_author(self) -> Author:
        return Author(name=self.name)


class BookRepository:
    """Supplies the book written by a given author.

    The title does not depend on the author: there is only one book.
    """

    title = "The Great Gatsby"

    def get_book(self, author: Author) -> Book:
        if not isinstance(author, Author):
            raise BadRequest(f"expected an Author, got {author!r}")
        return Book.create(title=self.title, author=author)
