from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from app.db.session import get_db
from app.repos import AuthorRepository, BookRepository
from app.services.author_service import AuthorService
from app.services.book_service import BookService


class GraphQLContext(BaseContext):
    """Per-request services sharing one session."""

    def __init__(self, db: Session):
        super().__init__()
        author_repository = AuthorRepository(db)
        book_repository = BookRepository(db)
        self.author_service: AuthorService = AuthorService(author_repository, book_repository)
        self.book_service: BookService = BookService(book_repository, author_repository)


def get_context(db: Annotated[Session, Depends(get_db)]) -> GraphQLContext:
    return GraphQLContext(db)
