# (c) Nelen & Schuurmans

from clean_python import ValueObject

__all__ = ["Author", "Book"]


class Author(ValueObject):
    name: str


class Book(ValueObject):
    title: str
    author: Author
