"""HTTP-shaped responses returned to the Lambda runtime (API Gateway proxy format)."""

from dataclasses import dataclass, field
from typing import Any

from ..application.dtos import BookResponseDTO, ErrorResponseDTO
from ..domain.entities import Book

JSON_HEADERS = {"Content-Type": "application/json"}

# Fixed diagnostic headers attached to every successful lookup
DIAGNOSTIC_HEADERS = {"x-foo-bar": "bar", "x-bar-baz": "baz"}


@dataclass
class HttpResponse:
    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    def to_proxy(self) -> dict[str, Any]:
        """Convert to the API Gateway proxy integration dict."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def ok(book: Book) -> HttpResponse:
    return HttpResponse(
        status_code=200,
        headers={**JSON_HEADERS, **DIAGNOSTIC_HEADERS},
        body=BookResponseDTO.from_entity(book).to_json(),
    )


def not_found(request_id: str) -> HttpResponse:
    return HttpResponse(
        status_code=404,
        headers=dict(JSON_HEADERS),
        body=ErrorResponseDTO.not_found(request_id).to_json(),
    )


def internal_server(request_id: str, error_codes: list[str] | None = None) -> HttpResponse:
    return HttpResponse(
        status_code=500,
        headers=dict(JSON_HEADERS),
        body=ErrorResponseDTO.internal_server(request_id, error_codes).to_json(),
    )
