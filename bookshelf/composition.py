# (c) Nelen & Schuurmans

from clean_python.fastapi import Service
from starlette.types import ASGIApp

from .application import BookService
from .config import AppConfig
from .domain import AuthorRepository
from .domain import BookRepository
from .presentation import BookController

__all__ = ["create_book_controller", "create_app"]


def create_book_controller() -> BookController:
    return BookController(
        book_service=BookService(
            author_repository=AuthorRepository(),
            book_repository=BookRepository(),
        )
    )


def create_app(config: AppConfig | None = None) -> ASGIApp:
    if config is None:
        config = AppConfig()
    return Service(create_book_controller()).create_app(
        title=config.title,
        description=config.description,
        hostname=config.hostname,
    )
