from enum import Enum

from pydantic import BaseModel


class ErrorType(str, Enum):
    REQUEST_INVALID = "request_invalid"
    REQUEST_UNAUTHORIZED = "request_unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL_SERVER_ERROR = "internal_server_error"


class ErrorCode(str, Enum):
    RECORD_DECODE_FAILED = "record_decode_failed"


class ErrorResponseDTO(BaseModel):
    """
    DTO for an error response body.

    ``error_codes`` is left out of the JSON entirely when unset.
    """

    request_id: str
    error_type: ErrorType
    error_codes: list[str] | None = None

    @classmethod
    def not_found(cls, request_id: str) -> "ErrorResponseDTO":
        return cls(request_id=request_id, error_type=ErrorType.NOT_FOUND)

    @classmethod
    def internal_server(
        cls,
        request_id: str,
        error_codes: list[str] | None = None,
    ) -> "ErrorResponseDTO":
        return cls(
            request_id=request_id,
            error_type=ErrorType.INTERNAL_SERVER_ERROR,
            error_codes=error_codes,
        )

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
