from types import SimpleNamespace
from uuid import UUID

import pytest

from books_api.application.ports.outbound import AttributeMap, BookStore
from books_api.domain.entities import Book
from books_api.domain.exceptions import StoreError

RUST_BOOK_ID = UUID("11111111-1111-1111-1111-111111111111")


class InMemoryBookStore(BookStore):
    """
    BookStore double keyed by the string value of the ``id`` attribute.

    Rejects empty key strings with a ValidationException, like DynamoDB.
    """

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, AttributeMap]] = {}
        self.get_calls = 0
        self.connected = False

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    async def get_item(self, table_name: str, key: AttributeMap) -> AttributeMap | None:
        self.get_calls += 1
        return self.tables.get(table_name, {}).get(_key_value(key))

    async def put_item(self, table_name: str, item: AttributeMap) -> None:
        self.tables.setdefault(table_name, {})[_key_value(item)] = item

    async def delete_item(self, table_name: str, key: AttributeMap) -> None:
        self.tables.get(table_name, {}).pop(_key_value(key), None)


@pytest.fixture
def store() -> InMemoryBookStore:
    return InMemoryBookStore()


@pytest.fixture
def rust_book() -> Book:
    return Book(id=RUST_BOOK_ID, title="rust")


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(aws_request_id="req-123")


@pytest.fixture
def make_event():
    """Factory for API Gateway proxy events for GET /books/{id}."""

    def _make(book_id: str | None) -> dict:
        if book_id is None:
            return {"httpMethod": "GET", "pathParameters": None}
        return {"httpMethod": "GET", "pathParameters": {"id": book_id}}

    return _make


def _key_value(attributes: AttributeMap) -> str:
    value = attributes["id"]["S"]
    if not value:
        raise StoreError(
            "One or more parameter values are not valid. "
            "The AttributeValue for a key attribute cannot contain an empty string value.",
            code="ValidationException",
        )
    return value
