# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .application.book_service import BookService  # NOQA
from .domain.book import *  # NOQA
from .domain.repository import *  # NOQA

# fmt: off
__version__ = '0.1.0.dev0'
# fmt: on
