from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Book:
    """Book record, keyed by its UUID."""

    id: UUID
    title: str = ""

    @classmethod
    def create(cls, title: str) -> "Book":
        """Factory method to create a book with a fresh identifier."""
        return cls(id=uuid4(), title=title)
