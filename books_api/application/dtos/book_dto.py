from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ...domain.entities import Book


class BookResponseDTO(BaseModel):
    """DTO for a book in a success response body."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str = Field(default="", alias="bookTitle")

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponseDTO":
        return cls(id=book.id, title=book.title)

    def to_json(self) -> str:
        """Serialize with wire field names (``bookTitle``)."""
        return self.model_dump_json(by_alias=True)
