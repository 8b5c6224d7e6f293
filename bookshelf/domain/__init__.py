from .book import *  # NOQA
from .repository import *  # NOQA
