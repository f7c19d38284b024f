from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional

from models import Book


class BookDTO(BaseModel):
    """Form/transfer shape of a book, kept apart from the ORM entity."""

    id: Optional[int] = None
    title: str = ""
    author: str = ""
    isbn: str = ""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("title", "author", "isbn", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        # nullable text columns
        return "" if value is None else value

    @classmethod
    def from_entity(cls, book: Book) -> "BookDTO":
        return cls.model_validate(book)

    def to_entity(self) -> Book:
        return Book(id=self.id, title=self.title, author=self.author, isbn=self.isbn)
