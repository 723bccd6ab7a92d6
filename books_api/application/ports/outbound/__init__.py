from .book_store import AttributeMap, BookStore

__all__ = ["AttributeMap", "BookStore"]
