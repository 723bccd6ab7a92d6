from .get_book import GetBookHandler

__all__ = ["GetBookHandler"]
