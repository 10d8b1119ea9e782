from starlette.requests import Request
from starlette.status import HTTP_404_NOT_FOUND

from app.core.errors import ResponseStatusError
from app.core.logging import get_logger
from app.models.author import Author
from app.models.book import Book
from app.schemas.author import AuthorCreate
from app.schemas.book import BookCreate
from app.services.author_service import AuthorService
from app.services.book_service import AUTHOR_NOT_FOUND_ERROR_MESSAGE, BookService

NOT_FOUND_ERROR_MESSAGE = "Could not find the book with that ID"

# Range of the Integer primary key columns
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def parse_id(raw: object) -> int | None:
    """
    GraphQL IDs arrive as strings; anything non-integer, or outside the
    id column's range, counts as absent.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(raw)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
    if not MIN_ID <= value <= MAX_ID:
        return None
    return value


class BookMutation:
    def __init__(self, book_service: BookService, request: Request | None = None):
        self.book_service: BookService = book_service
        self.logger = get_logger(__name__, request)

    def _find_or_raise(self, raw_id: object) -> tuple[int, Book]:
        book_id = parse_id(raw_id)
        if book_id is None:
            self.logger.info("Book id missing or malformed: %r", raw_id)
            raise ResponseStatusError(HTTP_404_NOT_FOUND, NOT_FOUND_ERROR_MESSAGE)

        book = self.book_service.find_by_id(book_id)
        if book is None:
            self.logger.info("Book %s not found", book_id)
            raise ResponseStatusError(HTTP_404_NOT_FOUND, NOT_FOUND_ERROR_MESSAGE)
        return book_id, book

    def add_book(self, data: BookCreate) -> Book:
        book = self.book_service.create_book(data)
        self.logger.info("Created book %s", book.id)
        return book

    def delete_book(self, raw_id: object) -> Book:
        """Delete the book and return the instance fetched before deletion."""
        book_id, book = self._find_or_raise(raw_id)
        self.book_service.delete_book(book_id)
        self.logger.info("Deleted book %s", book_id)
        return book

    def add_isbn13(self, raw_id: object, isbn13: str) -> Book:
        _, book = self._find_or_raise(raw_id)
        book.isbn13 = isbn13
        return self.book_service.save(book)

    def add_isbn10(self, raw_id: object, isbn10: str) -> Book:
        _, book = self._find_or_raise(raw_id)
        book.isbn10 = isbn10
        return self.book_service.save(book)


class AuthorMutation:
    NOT_FOUND_ERROR_MESSAGE = AUTHOR_NOT_FOUND_ERROR_MESSAGE

    def __init__(self, author_service: AuthorService, request: Request | None = None):
        self.author_service: AuthorService = author_service
        self.logger = get_logger(__name__, request)

    def add_author(self, data: AuthorCreate) -> Author:
        author = self.author_service.create_author(data)
        self.logger.info("Created author %s", author.id)
        return author

    def delete_author(self, raw_id: object) -> Author:
        author_id = parse_id(raw_id)
        author = self.author_service.find_by_id(author_id) if author_id is not None else None
        if author is None:
            self.logger.info("Author %r not found", raw_id)
            raise ResponseStatusError(HTTP_404_NOT_FOUND, self.NOT_FOUND_ERROR_MESSAGE)

        self.author_service.delete_author(author)
        self.logger.info("Deleted author %s and their sole-authored books", author_id)
        return author
