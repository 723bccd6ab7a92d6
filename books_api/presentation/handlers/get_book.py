"""
Lookup handler for GET /books/{id}.

Flow:
1. Read the id from the path parameters; an empty id is a 404 without a store call
2. Fetch the item from the store (retries live in the store wrapper)
3. Decode it into a Book and shape the response

Store failures and malformed records become 500 responses that carry only
the request id; the cause is logged, never returned.
"""

from typing import Any

import structlog

from ...application.dtos import ErrorCode
from ...application.ports.outbound import BookStore
from ...domain.exceptions import BookDecodeError, StoreError
from ...infrastructure.logging import Timer
from ...infrastructure.persistence import book_key, decode_book
from .. import responses
from ..responses import HttpResponse

logger = structlog.get_logger()

DEFAULT_TABLE_NAME = "books"


class GetBookHandler:
    """
    Handles a single book lookup.

    The store is injected by the composition root and shared by all
    invocations.
    """

    def __init__(self, store: BookStore, table_name: str = DEFAULT_TABLE_NAME) -> None:
        self._store = store
        self._table_name = table_name

    async def handle(self, event: dict[str, Any], context: Any) -> HttpResponse:
        request_id = getattr(context, "aws_request_id", "") or ""

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            book_id = extract_book_id(event)
            logger.info("Get book by id", book_id=book_id)

            # DynamoDB rejects an empty key string, and no record can have one
            if not book_id:
                logger.info("Book not found", book_id=book_id)
                return responses.not_found(request_id)

            try:
                with Timer() as t:
                    item = await self._store.get_item(self._table_name, book_key(book_id))
            except StoreError as e:
                logger.error(
                    "DynamoDB get_item failed",
                    book_id=book_id,
                    error=str(e),
                    error_code=e.code,
                )
                return responses.internal_server(request_id)

            if item is None:
                logger.info("Book not found", book_id=book_id, duration_ms=t.duration_ms)
                return responses.not_found(request_id)

            try:
                book = decode_book(item)
            except BookDecodeError as e:
                logger.error(
                    "Stored record is not a valid book",
                    book_id=book_id,
                    error=str(e),
                    attribute=e.attribute,
                    attributes=sorted(item),
                )
                return responses.internal_server(
                    request_id, error_codes=[ErrorCode.RECORD_DECODE_FAILED.value]
                )

            logger.info("Fetched book", book_id=str(book.id), duration_ms=t.duration_ms)
            return responses.ok(book)


def extract_book_id(event: dict[str, Any]) -> str:
    """Read ``pathParameters.id``; API Gateway sends null when there are none."""
    path_parameters = event.get("pathParameters") or {}
    return path_parameters.get("id") or ""
