from sqlalchemy.exc import SQLAlchemyError

from app.models.author import Author
from app.repos.author_repo import AuthorRepository
from app.repos.book_repo import BookRepository
from app.schemas.author import AuthorCreate


class AuthorService:
    def __init__(self, author_repository: AuthorRepository, book_repository: BookRepository):
        self.author_repository: AuthorRepository = author_repository
        self.book_repository: BookRepository = book_repository

    def save(self, author: Author) -> Author:
        if author is None:
            raise ValueError("author is required")
        return self.author_repository.save(author)

    def create_author(self, data: AuthorCreate) -> Author:
        return self.save(Author(full_name=data.full_name, about=data.about))

    def find_by_id(self, author_id: int) -> Author | None:
        if author_id is None:
            raise ValueError("author id is required")
        return self.author_repository.find_by_id(author_id)

    def find_all(self) -> list[Author]:
        return self.author_repository.find_all_authors()

    def delete_author(self, author: Author) -> None:
        """
        Delete the author along with every book they wrote alone.
        Co-authored books are kept. Both steps share one transaction.
        """
        if author is None:
            raise ValueError("author is required")

        books_with_one_author = self.book_repository.get_all_books_author_wrote_alone(author.id)
        try:
            self.book_repository.delete_all(books_with_one_author)
            self.author_repository.delete(author)
        except SQLAlchemyError:
            self.author_repository.rollback()
            raise
