from .entities import Book
from .exceptions import BookDecodeError, BooksError, StoreError

__all__ = ["Book", "BookDecodeError", "BooksError", "StoreError"]
