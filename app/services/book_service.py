from __future__ import annotations
from sqlalchemy.exc import IntegrityError
from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from app.core.errors import InvalidISBN10Error, InvalidISBN13Error, ResponseStatusError
from app.models.book import Book
from app.repos.author_repo import AuthorRepository
from app.repos.book_repo import BookRepository
from app.schemas.book import BookCreate
from app.utils.isbn import is_valid_isbn10, is_valid_isbn13

AUTHOR_NOT_FOUND_ERROR_MESSAGE = "Could not find the author with that ID"
DUPLICATE_ISBN_ERROR_MESSAGE = "A book with that ISBN already exists"


class BookService:
    def __init__(self, book_repository: BookRepository, author_repository: AuthorRepository):
        self.book_repository: BookRepository = book_repository
        self.author_repository: AuthorRepository = author_repository

    def find_by_id(self, book_id: int) -> Book | None:
        if book_id is None:
            raise ValueError("book id is required")
        return self.book_repository.find_by_id(book_id)

    def find_all(self, limit: int = 20, offset: int = 0) -> list[Book]:
        return self.book_repository.find_all_books(limit=limit, offset=offset)

    def find_by_isbn13(self, isbn13: str) -> Book | None:
        return self.book_repository.find_by_isbn13(isbn13)

    def save(self, book: Book) -> Book:
        if book is None:
            raise ValueError("book is required")
        # Rejected values must not stay pending on the session
        if book.isbn13 is not None and not is_valid_isbn13(book.isbn13):
            self.book_repository.rollback()
            raise InvalidISBN13Error(book.isbn13)
        if book.isbn10 is not None and not is_valid_isbn10(book.isbn10):
            self.book_repository.rollback()
            raise InvalidISBN10Error(book.isbn10)
        try:
            return self.book_repository.save(book)
        except IntegrityError as e:
            self.book_repository.rollback()
            raise ResponseStatusError(HTTP_409_CONFLICT, DUPLICATE_ISBN_ERROR_MESSAGE) from e

    def create_book(self, data: BookCreate) -> Book:
        authors = self.author_repository.find_all_by_ids(data.author_ids)
        if len(authors) != len(data.author_ids):
            raise ResponseStatusError(HTTP_404_NOT_FOUND, AUTHOR_NOT_FOUND_ERROR_MESSAGE)

        book = Book(**data.model_dump(exclude={"author_ids"}))
        book.authors = authors
        return self.save(book)

    def delete_book(self, book_id: int) -> None:
        if book_id is None:
            raise ValueError("book id is required")
        self.book_repository.delete_book(book_id)
