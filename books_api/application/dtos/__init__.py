from .book_dto import BookResponseDTO
from .error_response import ErrorCode, ErrorResponseDTO, ErrorType

__all__ = ["BookResponseDTO", "ErrorCode", "ErrorResponseDTO", "ErrorType"]
