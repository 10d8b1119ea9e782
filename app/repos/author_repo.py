from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.author import Author


class AuthorRepository:
    def __init__(self, db: Session):
        self.db: Session = db

    # Insert or update an author
    def save(self, author: Author) -> Author:
        self.db.add(author)
        self.db.commit()
        self.db.refresh(author)
        return author

    # Get an author by ID
    def find_by_id(self, author_id: int) -> Author | None:
        return self.db.get(Author, author_id)

    # Get several authors by ID
    def find_all_by_ids(self, author_ids: list[int]) -> list[Author]:
        stmt = select(Author).where(Author.id.in_(author_ids)).order_by(Author.id)
        return list(self.db.scalars(stmt).all())

    # List authors
    def find_all_authors(self) -> list[Author]:
        stmt = select(Author).order_by(Author.id)
        return list(self.db.scalars(stmt).all())

    def delete(self, author: Author) -> None:
        """Delete and commit; also commits anything already flushed."""
        # Reload the collection so only surviving books lose their association row
        self.db.expire(author, ["books"])
        self.db.delete(author)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
