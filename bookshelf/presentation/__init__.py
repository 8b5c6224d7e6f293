from .book_controller import *  # NOQA
