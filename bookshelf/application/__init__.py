from .book_service import *  # NOQA
