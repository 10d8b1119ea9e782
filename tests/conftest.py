# Point settings at in-memory SQLite before anything builds the engine
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREATE_SCHEMA"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.session import engine, SessionLocal
from app.models.base import Base
from app.models.author import Author
from app.models.book import Book, GenreName, LanguageName, PublishingFormat


@pytest.fixture(autouse=True)
def setup_test_database():
    """Create all tables before each test and drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_client():
    """Create a test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def graphql(test_client):
    """POST a query to the GraphQL endpoint and return the decoded body."""

    def _execute(query: str, variables: dict[str, object] | None = None, headers: dict[str, str] | None = None):
        response = test_client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers or {},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _execute


def _make_book(title: str, *authors: Author, **fields: object) -> Book:
    book = Book(
        title=title,
        language=LanguageName.ALBANIAN,
        blurb="Blurb",
        genre=GenreName.ADVENTURE,
        publishing_format=PublishingFormat.PAPERBACK,
        **fields,
    )
    book.authors = list(authors)
    return book


@pytest.fixture
def make_book():
    """Factory for unsaved books with the given authors."""
    return _make_book


@pytest.fixture
def sample_author_model(db_session):
    """Create a sample author model for repository tests."""
    author = Author(full_name="Test Author", about="Writes tests")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def co_author_model(db_session):
    author = Author(full_name="Co Author")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book_model(db_session, sample_author_model, make_book):
    """Create a sample book model written by sample_author_model alone."""
    book = make_book("Test Book", sample_author_model)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
