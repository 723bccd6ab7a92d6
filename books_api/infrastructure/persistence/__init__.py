from .book_codec import book_key, decode_book, encode_book
from .dynamodb_book_store import DynamoDbBookStore
from .retrying_book_store import RetryingBookStore, RetryPolicy
from .store_factory import create_book_store

__all__ = [
    "DynamoDbBookStore",
    "RetryPolicy",
    "RetryingBookStore",
    "book_key",
    "create_book_store",
    "decode_book",
    "encode_book",
]
