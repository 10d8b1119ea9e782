"""
GraphQL types for the catalog.

Resolvers return SQLAlchemy models directly; fields resolve by attribute
name against Author and Book.
"""

import strawberry

from app.models.book import GenreName, LanguageName, PublishingFormat
from app.schemas.author import AuthorCreate
from app.schemas.book import BookCreate

Language = strawberry.enum(LanguageName, name="Language")
Genre = strawberry.enum(GenreName, name="Genre")
Format = strawberry.enum(PublishingFormat, name="PublishingFormat")


@strawberry.type(name="Author")
class AuthorType:
    id: strawberry.ID
    full_name: str
    about: str | None
    books: list["BookType"]


@strawberry.type(name="Book")
class BookType:
    id: strawberry.ID
    title: str
    language: Language
    blurb: str | None
    genre: Genre
    publishing_format: Format
    isbn13: str | None
    isbn10: str | None
    authors: list[AuthorType]


@strawberry.input
class AuthorInput:
    full_name: str
    about: str | None = None

    def to_schema(self) -> AuthorCreate:
        return AuthorCreate(full_name=self.full_name, about=self.about)


@strawberry.input
class BookInput:
    title: str
    language: Language
    genre: Genre
    publishing_format: Format
    author_ids: list[strawberry.ID]
    blurb: str | None = None
    isbn13: str | None = None
    isbn10: str | None = None

    def to_schema(self) -> BookCreate:
        return BookCreate(
            title=self.title,
            language=self.language,
            blurb=self.blurb,
            genre=self.genre,
            publishing_format=self.publishing_format,
            isbn13=self.isbn13,
            isbn10=self.isbn10,
            author_ids=list(self.author_ids),
        )
