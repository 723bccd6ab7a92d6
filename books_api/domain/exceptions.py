"""Domain exceptions for the books service."""


class BooksError(Exception):
    """Base exception for all books service errors."""

    pass


class BookDecodeError(BooksError):
    """Raised when a stored record does not match the Book shape."""

    def __init__(self, message: str, attribute: str | None = None) -> None:
        super().__init__(message)
        self.attribute = attribute


class StoreError(BooksError):
    """
    Raised when a call to the backing store fails.

    Attributes:
        code: Store-side error code (e.g. "ThrottlingException"), if known
        retryable: Whether the failure is transient and worth retrying
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable
