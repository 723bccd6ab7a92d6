"""Mapping between DynamoDB attribute maps and Book entities.

Wire layout of a book item:
    {"id": {"S": "<uuid>"}, "bookTitle": {"S": "<title>"}}
"""

from typing import Any
from uuid import UUID

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from ...application.ports.outbound import AttributeMap
from ...domain.entities import Book
from ...domain.exceptions import BookDecodeError

ID_ATTRIBUTE = "id"
TITLE_ATTRIBUTE = "bookTitle"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def book_key(book_id: str) -> AttributeMap:
    """Build the partition key for a lookup or delete.

    Any string is accepted; an id that is not a UUID simply matches nothing.
    """
    return {ID_ATTRIBUTE: _serializer.serialize(book_id)}


def encode_book(book: Book) -> AttributeMap:
    """Encode a book as a DynamoDB item, id in its canonical string form."""
    return {
        ID_ATTRIBUTE: _serializer.serialize(str(book.id)),
        TITLE_ATTRIBUTE: _serializer.serialize(book.title),
    }


def decode_book(attributes: AttributeMap) -> Book:
    """
    Decode a DynamoDB item into a Book.

    Raises:
        BookDecodeError: If the id is missing, not a string or not a canonical
            (lowercase, hyphenated) UUID, or if the title is present but not a
            string.
    """
    if ID_ATTRIBUTE not in attributes:
        raise BookDecodeError(f"missing attribute '{ID_ATTRIBUTE}'", attribute=ID_ATTRIBUTE)

    raw_id = _deserialize_string(attributes, ID_ATTRIBUTE)
    try:
        book_id = UUID(raw_id)
    except ValueError as e:
        raise BookDecodeError(
            f"attribute '{ID_ATTRIBUTE}' is not a valid UUID", attribute=ID_ATTRIBUTE
        ) from e
    # Braced, URN and unhyphenated forms would not round-trip to the stored key
    if str(book_id) != raw_id:
        raise BookDecodeError(
            f"attribute '{ID_ATTRIBUTE}' is not a canonical UUID", attribute=ID_ATTRIBUTE
        )

    title = ""
    if TITLE_ATTRIBUTE in attributes:
        title = _deserialize_string(attributes, TITLE_ATTRIBUTE)

    return Book(id=book_id, title=title)


def _deserialize_string(attributes: AttributeMap, name: str) -> str:
    value: Any = attributes[name]
    if not isinstance(value, dict):
        raise BookDecodeError(f"attribute '{name}' is not an attribute value", attribute=name)
    try:
        decoded = _deserializer.deserialize(value)
    except (TypeError, ValueError) as e:
        raise BookDecodeError(f"attribute '{name}' is malformed", attribute=name) from e
    if not isinstance(decoded, str):
        raise BookDecodeError(f"attribute '{name}' is not a string", attribute=name)
    return decoded
