from typing import cast
from graphql import GraphQLError
import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info
from typing_extensions import override

from app.api.graphql.context import GraphQLContext, get_context
from app.api.graphql.mutations import AuthorMutation, BookMutation, parse_id
from app.api.graphql.types import AuthorInput, AuthorType, BookInput, BookType
from app.core.config import settings
from app.core.errors import ResponseStatusError
from app.core.logging import get_logger
from app.models.author import Author
from app.models.book import Book


def _context(info: Info) -> GraphQLContext:
    return cast(GraphQLContext, info.context)


@strawberry.type
class Query:
    @strawberry.field
    def find_all_authors(self, info: Info) -> list[AuthorType]:
        return cast(list[AuthorType], _context(info).author_service.find_all())

    @strawberry.field
    def find_author_by_id(self, info: Info, id: strawberry.ID) -> AuthorType | None:
        author_id = parse_id(id)
        if author_id is None:
            return None
        return cast(AuthorType | None, _context(info).author_service.find_by_id(author_id))

    @strawberry.field
    def find_all_books(self, info: Info, limit: int = 20, offset: int = 0) -> list[BookType]:
        return cast(list[BookType], _context(info).book_service.find_all(limit=limit, offset=offset))

    @strawberry.field
    def find_book_by_id(self, info: Info, id: strawberry.ID) -> BookType | None:
        book_id = parse_id(id)
        if book_id is None:
            return None
        return cast(BookType | None, _context(info).book_service.find_by_id(book_id))

    @strawberry.field
    def find_book_by_isbn13(self, info: Info, isbn13: str) -> BookType | None:
        return cast(BookType | None, _context(info).book_service.find_by_isbn13(isbn13))


def _book_mutation(info: Info) -> BookMutation:
    ctx = _context(info)
    return BookMutation(ctx.book_service, ctx.request)


def _author_mutation(info: Info) -> AuthorMutation:
    ctx = _context(info)
    return AuthorMutation(ctx.author_service, ctx.request)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def add_author(self, info: Info, author: AuthorInput) -> AuthorType:
        created: Author = _author_mutation(info).add_author(author.to_schema())
        return cast(AuthorType, created)

    @strawberry.mutation
    def delete_author(self, info: Info, id: strawberry.ID | None = None) -> AuthorType:
        return cast(AuthorType, _author_mutation(info).delete_author(id))

    @strawberry.mutation
    def add_book(self, info: Info, book: BookInput) -> BookType:
        created: Book = _book_mutation(info).add_book(book.to_schema())
        return cast(BookType, created)

    @strawberry.mutation
    def delete_book(self, info: Info, id: strawberry.ID | None = None) -> BookType:
        return cast(BookType, _book_mutation(info).delete_book(id))

    @strawberry.mutation
    def add_isbn13(self, info: Info, id: strawberry.ID, isbn13: str) -> BookType:
        return cast(BookType, _book_mutation(info).add_isbn13(id, isbn13))

    @strawberry.mutation
    def add_isbn10(self, info: Info, id: strawberry.ID, isbn10: str) -> BookType:
        return cast(BookType, _book_mutation(info).add_isbn10(id, isbn10))


class CatalogSchema(strawberry.Schema):
    """Logs client-facing errors as warnings instead of tracebacks."""

    @override
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        logger = get_logger(__name__)
        unexpected: list[GraphQLError] = []
        for error in errors:
            if isinstance(error.original_error, ResponseStatusError):
                logger.warning("GraphQL error: %s", error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = CatalogSchema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHIQL else None,
    )
