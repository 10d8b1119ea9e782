from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.author import book_authors
from app.models.book import Book
from app.utils.pagination import clamp_pagination


class BookRepository:
    def __init__(self, db: Session):
        self.db: Session = db

    # Insert or update a book
    def save(self, book: Book) -> Book:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    # Get a book by ID
    def find_by_id(self, book_id: int) -> Book | None:
        return self.db.get(Book, book_id)

    # Get a book by ISBN-13
    def find_by_isbn13(self, isbn13: str) -> Book | None:
        stmt = select(Book).where(Book.isbn13 == isbn13)
        return self.db.scalars(stmt).first()

    # List books
    def find_all_books(self, limit: int = 20, offset: int = 0) -> list[Book]:
        limit, offset = clamp_pagination(limit, offset)
        stmt = select(Book).order_by(Book.id).limit(limit).offset(offset)
        return list(self.db.scalars(stmt).all())

    # Books whose only author is `author_id`
    def get_all_books_author_wrote_alone(self, author_id: int) -> list[Book]:
        sole_authored = (
            select(book_authors.c.book_id)
            .group_by(book_authors.c.book_id)
            .having(func.count(book_authors.c.author_id) == 1)
        )
        stmt = (
            select(Book)
            .join(book_authors, book_authors.c.book_id == Book.id)
            .where(book_authors.c.author_id == author_id)
            .where(Book.id.in_(sole_authored))
            .order_by(Book.id)
        )
        return list(self.db.scalars(stmt).all())

    def delete_all(self, books: list[Book]) -> None:
        """Flush deletes without committing (caller decides when to commit)."""
        for book in books:
            self.db.delete(book)
        self.db.flush()

    # Delete a book by ID
    def delete_book(self, book_id: int) -> None:
        book = self.find_by_id(book_id)
        if book is None:
            return
        self.db.delete(book)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
