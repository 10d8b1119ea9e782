import pytest
from unittest.mock import Mock
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from app.core.errors import InvalidISBN10Error, InvalidISBN13Error, ResponseStatusError
from app.models.author import Author
from app.models.book import Book, GenreName, LanguageName, PublishingFormat
from app.repos import AuthorRepository, BookRepository
from app.schemas.author import AuthorCreate
from app.schemas.book import BookCreate
from app.services.author_service import AuthorService
from app.services.book_service import AUTHOR_NOT_FOUND_ERROR_MESSAGE, BookService


class TestAuthorServiceUnit:
    """AuthorService against mocked repositories."""

    def setup_method(self):
        self.repos = Mock()
        self.author_repository = self.repos.author_repository
        self.book_repository = self.repos.book_repository
        self.service = AuthorService(self.author_repository, self.book_repository)

    def test_save_delegates(self):
        author = Author(full_name="A")
        self.author_repository.save.return_value = author

        assert self.service.save(author) is author
        self.author_repository.save.assert_called_once_with(author)

    def test_save_requires_author(self):
        with pytest.raises(ValueError):
            self.service.save(None)
        self.author_repository.save.assert_not_called()

    def test_find_by_id_requires_id(self):
        with pytest.raises(ValueError):
            self.service.find_by_id(None)

    def test_find_all_delegates(self):
        self.author_repository.find_all_authors.return_value = []
        assert self.service.find_all() == []
        self.author_repository.find_all_authors.assert_called_once_with()

    def test_delete_author_deletes_sole_authored_books_first(self):
        author = Author(id=7, full_name="A")
        books = [Book(id=1, title="x"), Book(id=2, title="y")]
        self.book_repository.get_all_books_author_wrote_alone.return_value = books

        self.service.delete_author(author)

        calls = [c for c in self.repos.mock_calls if not c[0].endswith("rollback")]
        assert [c[0] for c in calls] == [
            "book_repository.get_all_books_author_wrote_alone",
            "book_repository.delete_all",
            "author_repository.delete",
        ]
        self.book_repository.get_all_books_author_wrote_alone.assert_called_once_with(7)
        self.book_repository.delete_all.assert_called_once_with(books)
        self.author_repository.delete.assert_called_once_with(author)

    def test_delete_author_requires_author(self):
        with pytest.raises(ValueError):
            self.service.delete_author(None)
        self.book_repository.delete_all.assert_not_called()

    def test_delete_author_rolls_back_on_database_error(self):
        author = Author(id=7, full_name="A")
        self.book_repository.get_all_books_author_wrote_alone.return_value = []
        self.author_repository.delete.side_effect = OperationalError("DELETE", {}, Exception("boom"))

        with pytest.raises(OperationalError):
            self.service.delete_author(author)

        self.author_repository.rollback.assert_called_once_with()


def _book_create(author_ids: list[int], **overrides: object) -> BookCreate:
    fields: dict[str, object] = {
        "title": "Created Book",
        "language": LanguageName.ENGLISH,
        "genre": GenreName.FANTASY,
        "publishing_format": PublishingFormat.HARDCOVER,
        "author_ids": author_ids,
    }
    fields.update(overrides)
    return BookCreate(**fields)


class TestBookServiceUnit:
    """BookService validation against mocked repositories."""

    def setup_method(self):
        self.book_repository = Mock()
        self.author_repository = Mock()
        self.service = BookService(self.book_repository, self.author_repository)

    def test_save_rejects_invalid_isbn13(self):
        book = Book(title="x", isbn13="978-1-56619-909-5")

        with pytest.raises(InvalidISBN13Error):
            self.service.save(book)
        self.book_repository.save.assert_not_called()
        self.book_repository.rollback.assert_called_once_with()

    def test_save_rejects_invalid_isbn10(self):
        book = Book(title="x", isbn10="0-306-40615-3")

        with pytest.raises(InvalidISBN10Error):
            self.service.save(book)
        self.book_repository.save.assert_not_called()
        self.book_repository.rollback.assert_called_once_with()

    def test_save_rejects_isbn13_longer_than_column(self):
        book = Book(title="x", isbn13="9-7-8-1-5-6-6-1-9-9-0-9-4")

        with pytest.raises(InvalidISBN13Error):
            self.service.save(book)
        self.book_repository.save.assert_not_called()

    def test_save_keeps_literal_isbn(self):
        book = Book(title="x", isbn13="978-1-56619-909-4")
        self.book_repository.save.return_value = book

        saved = self.service.save(book)

        assert saved.isbn13 == "978-1-56619-909-4"

    def test_delete_book_requires_id(self):
        with pytest.raises(ValueError):
            self.service.delete_book(None)

    def test_create_book_with_unknown_author(self):
        self.author_repository.find_all_by_ids.return_value = []

        with pytest.raises(ResponseStatusError) as exc_info:
            self.service.create_book(_book_create([99]))

        assert exc_info.value.status_code == HTTP_404_NOT_FOUND
        assert exc_info.value.reason == AUTHOR_NOT_FOUND_ERROR_MESSAGE
        self.book_repository.save.assert_not_called()


class TestAuthorServiceIntegration:
    """Cascading delete against the database."""

    def _services(self, db_session):
        author_repository = AuthorRepository(db_session)
        book_repository = BookRepository(db_session)
        return (
            AuthorService(author_repository, book_repository),
            BookService(book_repository, author_repository),
        )

    def test_create_author(self, db_session):
        author_service, _ = self._services(db_session)

        author = author_service.create_author(AuthorCreate(full_name="  Ursula Le Guin  "))

        assert author.id is not None
        assert author.full_name == "Ursula Le Guin"
        assert author_service.find_by_id(author.id) is author

    def test_delete_author_keeps_co_authored_books(
        self, db_session, sample_author_model, co_author_model, make_book
    ):
        solo = make_book("Solo", sample_author_model)
        shared = make_book("Shared", sample_author_model, co_author_model)
        other = make_book("Other", co_author_model)
        db_session.add_all([solo, shared, other])
        db_session.commit()
        author_service, _ = self._services(db_session)

        author_service.delete_author(sample_author_model)

        db_session.expire_all()
        titles = set(db_session.scalars(select(Book.title)).all())
        assert titles == {"Shared", "Other"}
        assert [a.id for a in db_session.scalars(select(Author)).all()] == [co_author_model.id]

        shared_book = db_session.scalars(select(Book).where(Book.title == "Shared")).one()
        assert [a.full_name for a in shared_book.authors] == ["Co Author"]

    def test_delete_author_without_books(self, db_session, co_author_model):
        author_service, _ = self._services(db_session)

        author_service.delete_author(co_author_model)

        db_session.expire_all()
        assert db_session.scalars(select(Author)).all() == []

    def test_create_book(self, db_session, sample_author_model, co_author_model):
        _, book_service = self._services(db_session)

        book = book_service.create_book(
            _book_create([sample_author_model.id, co_author_model.id], isbn13="9780306406157")
        )

        assert book.id is not None
        assert [a.id for a in book.authors] == [sample_author_model.id, co_author_model.id]
        assert book_service.find_by_isbn13("9780306406157") is book

    def test_save_duplicate_isbn13_is_conflict(self, db_session, sample_author_model):
        _, book_service = self._services(db_session)
        book_service.create_book(_book_create([sample_author_model.id], isbn13="9780306406157"))

        with pytest.raises(ResponseStatusError) as exc_info:
            book_service.create_book(
                _book_create([sample_author_model.id], title="Again", isbn13="9780306406157")
            )

        assert exc_info.value.status_code == HTTP_409_CONFLICT
        db_session.expire_all()
        assert len(book_service.find_all()) == 1

    def test_delete_book(self, db_session, sample_book_model, sample_author_model):
        _, book_service = self._services(db_session)

        book_service.delete_book(sample_book_model.id)

        db_session.expire_all()
        assert db_session.scalars(select(Book)).all() == []
        assert db_session.scalars(select(Author)).one().id == sample_author_model.id

    def test_invalid_isbn_is_not_left_on_session(self, db_session, sample_book_model):
        _, book_service = self._services(db_session)
        book = book_service.find_by_id(sample_book_model.id)
        book.isbn13 = "12345"

        with pytest.raises(InvalidISBN13Error):
            book_service.save(book)

        assert book.isbn13 is None
        assert not db_session.dirty
        db_session.commit()
        db_session.expire_all()
        assert db_session.get(Book, sample_book_model.id).isbn13 is None
