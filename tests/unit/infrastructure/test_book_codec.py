from uuid import uuid4

import pytest

from books_api.domain.entities import Book
from books_api.domain.exceptions import BookDecodeError
from books_api.infrastructure.persistence import book_key, decode_book, encode_book


class TestEncodeBook:
    def test_encodes_id_as_string_attribute(self, rust_book):
        item = encode_book(rust_book)

        assert item["id"] == {"S": "11111111-1111-1111-1111-111111111111"}

    def test_encodes_title_under_renamed_key(self, rust_book):
        item = encode_book(rust_book)

        assert item["bookTitle"] == {"S": "rust"}
        assert "title" not in item


class TestBookKey:
    def test_builds_single_string_attribute(self):
        assert book_key("foo-bar") == {"id": {"S": "foo-bar"}}

    def test_accepts_empty_string(self):
        assert book_key("") == {"id": {"S": ""}}


class TestDecodeBook:
    def test_decodes_valid_item(self, rust_book):
        item = {
            "id": {"S": "11111111-1111-1111-1111-111111111111"},
            "bookTitle": {"S": "rust"},
        }

        assert decode_book(item) == rust_book

    def test_missing_title_defaults_to_empty(self):
        book_id = uuid4()

        book = decode_book({"id": {"S": str(book_id)}})

        assert book == Book(id=book_id, title="")

    def test_ignores_unknown_attributes(self, rust_book):
        item = encode_book(rust_book)
        item["pages"] = {"N": "300"}

        assert decode_book(item) == rust_book

    def test_round_trip_preserves_book(self):
        book = Book.create(title="Programming Rust, 2nd edition")

        assert decode_book(encode_book(book)) == book

    def test_missing_id_fails(self):
        with pytest.raises(BookDecodeError) as exc_info:
            decode_book({"bookTitle": {"S": "rust"}})

        assert exc_info.value.attribute == "id"

    def test_invalid_uuid_fails(self):
        with pytest.raises(BookDecodeError) as exc_info:
            decode_book({"id": {"S": "foo-bar"}, "bookTitle": {"S": "rust"}})

        assert exc_info.value.attribute == "id"

    @pytest.mark.parametrize(
        "raw_id",
        [
            "urn:uuid:11111111-1111-1111-1111-111111111111",
            "{11111111-1111-1111-1111-111111111111}",
            "11111111111111111111111111111111",
            "AAAAAAAA-1111-1111-1111-111111111111",
        ],
    )
    def test_non_canonical_uuid_fails(self, raw_id):
        with pytest.raises(BookDecodeError) as exc_info:
            decode_book({"id": {"S": raw_id}, "bookTitle": {"S": "rust"}})

        assert exc_info.value.attribute == "id"

    def test_numeric_id_fails(self):
        with pytest.raises(BookDecodeError):
            decode_book({"id": {"N": "42"}})

    def test_non_string_title_fails(self):
        with pytest.raises(BookDecodeError) as exc_info:
            decode_book({"id": {"S": str(uuid4())}, "bookTitle": {"N": "7"}})

        assert exc_info.value.attribute == "bookTitle"

    def test_unknown_attribute_type_fails(self):
        with pytest.raises(BookDecodeError):
            decode_book({"id": {"XYZ": "11111111-1111-1111-1111-111111111111"}})

    def test_plain_value_instead_of_attribute_fails(self):
        with pytest.raises(BookDecodeError):
            decode_book({"id": "11111111-1111-1111-1111-111111111111"})
