from pydantic import BaseModel, field_validator

from app.models.book import GenreName, LanguageName, PublishingFormat

# Book base schema
class BookBase(BaseModel):
    title: str
    language: LanguageName
    blurb: str | None = None
    genre: GenreName
    publishing_format: PublishingFormat
    isbn13: str | None = None
    isbn10: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty")
        return v

    @field_validator("isbn13", "isbn10", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

# Book create schema
class BookCreate(BookBase):
    author_ids: list[int]

    @field_validator("author_ids")
    @classmethod
    def at_least_one_author(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("a book needs at least one author")
        return list(dict.fromkeys(v))
