from __future__ import annotations
import enum
from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base
from app.models.author import Author, book_authors
from app.utils.isbn import ISBN10_MAX_LENGTH, ISBN13_MAX_LENGTH


class LanguageName(enum.Enum):
    ALBANIAN = "ALBANIAN"
    ARABIC = "ARABIC"
    CHINESE = "CHINESE"
    DUTCH = "DUTCH"
    ENGLISH = "ENGLISH"
    FRENCH = "FRENCH"
    GERMAN = "GERMAN"
    GREEK = "GREEK"
    HINDI = "HINDI"
    ITALIAN = "ITALIAN"
    JAPANESE = "JAPANESE"
    KOREAN = "KOREAN"
    POLISH = "POLISH"
    PORTUGUESE = "PORTUGUESE"
    RUSSIAN = "RUSSIAN"
    SPANISH = "SPANISH"
    TURKISH = "TURKISH"
    URDU = "URDU"


class GenreName(enum.Enum):
    ADVENTURE = "ADVENTURE"
    BIOGRAPHY = "BIOGRAPHY"
    CLASSIC = "CLASSIC"
    CRIME = "CRIME"
    FANTASY = "FANTASY"
    HISTORY = "HISTORY"
    HORROR = "HORROR"
    MYSTERY = "MYSTERY"
    POETRY = "POETRY"
    ROMANCE = "ROMANCE"
    SATIRE = "SATIRE"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    SELF_HELP = "SELF_HELP"
    THRILLER = "THRILLER"


class PublishingFormat(enum.Enum):
    AUDIOBOOK = "AUDIOBOOK"
    EBOOK = "EBOOK"
    HARDCOVER = "HARDCOVER"
    PAPERBACK = "PAPERBACK"


#Book
class Book(Base):
    __tablename__: str = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[LanguageName] = mapped_column(
        Enum(LanguageName, name="language_name"), nullable=False
    )
    blurb: Mapped[str | None] = mapped_column(Text, nullable=True)
    genre: Mapped[GenreName] = mapped_column(Enum(GenreName, name="genre_name"), nullable=False)
    publishing_format: Mapped[PublishingFormat] = mapped_column(
        Enum(PublishingFormat, name="publishing_format"), nullable=False
    )
    isbn13: Mapped[str | None] = mapped_column(String(ISBN13_MAX_LENGTH), unique=True, nullable=True)
    isbn10: Mapped[str | None] = mapped_column(String(ISBN10_MAX_LENGTH), unique=True, nullable=True)

    authors: Mapped[list[Author]] = relationship(
        secondary=book_authors,
        back_populates="books",
        order_by=Author.id,
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r}>"
