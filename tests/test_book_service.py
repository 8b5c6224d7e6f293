from unittest import mock

import pytest
from clean_python import BadRequest

from bookshelf import Author
from bookshelf import AuthorRepository
from bookshelf import Book
from bookshelf import BookRepository
from bookshelf import BookService


@pytest.fixture
def book_service():
    return BookService(
        author_repository=mock.Mock(AuthorRepository),
        book_repository=mock.Mock(BookRepository),
    )


def test_get_book(book_service):
    result = book_service.get_book()

    book_service.author_repository.get_author.assert_called_once_with()
    book_service.book_repository.get_book.assert_called_once_with(
        book_service.author_repository.get_author.return_value
    )
    assert result is book_service.book_repository.get_book.return_value


def test_get_book_author_first():
    manager = mock.Mock()
    service = BookService(manager.author_repository, manager.book_repository)

    service.get_book()

    assert [x[0] for x in manager.mock_calls] == [
        "author_repository.get_author",
        "book_repository.get_book",
    ]


def test_get_book_author_error_propagates(book_service):
    book_service.author_repository.get_author.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        book_service.get_book()

    assert not book_service.book_repository.get_book.called


def test_get_book_book_error_propagates(book_service):
    book_service.book_repository.get_book.side_effect = RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        book_service.get_book()


def test_get_book_real_repositories():
    service = BookService(AuthorRepository(), BookRepository())

    assert service.get_book() == Book(
        title="The Great Gatsby", author=Author(name="F. Scott Fitzgerald")
    )


def test_get_book_author_missing():
    author_repository = mock.Mock(AuthorRepository)
    author_repository.get_author.return_value = None
    service = BookService(author_repository, BookRepository())

    with pytest.raises(BadRequest):
        service.get_book()


def test_default_repositories():
    service = BookService()

    assert isinstance(service.author_repository, AuthorRepository)
    assert isinstance(service.book_repository, BookRepository)
