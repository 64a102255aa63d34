"""
Root GraphQL mutation definitions
"""

from typing import Any, TypeVar

import strawberry
from pydantic import BaseModel, ValidationError

from app.core.errors import LibraryValidationError, validation_message
from app.core.logging import get_logger
from app.graphql.context import GraphQLContext
from app.graphql.types import Author, Book
from app.schemas.author import AuthorCreate
from app.schemas.book import BookCreate
from app.services.author_service import AuthorService
from app.services.book_service import BookService

InputT = TypeVar("InputT", bound=BaseModel)


def _validated(model: type[InputT], **values: Any) -> InputT:
    try:
        return model(**values)
    except ValidationError as exc:
        raise LibraryValidationError(validation_message(exc)) from exc


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def add_book(
        self,
        info: strawberry.Info[GraphQLContext, None],
        title: str,
        author_ids: list[strawberry.ID],
    ) -> Book | None:
        """Create a book linked to existing authors."""
        logger = get_logger(__name__, info.context.request)
        data = _validated(
            BookCreate,
            title=title,
            author_ids=BookService.parse_author_ids(author_ids),
        )
        book = await info.context.run(BookService.create_book, data)
        logger.info("Book %s created with authors %s", book.id, data.author_ids)
        return Book.from_model(book, authors=book.authors)

    @strawberry.mutation
    async def add_author(
        self,
        info: strawberry.Info[GraphQLContext, None],
        name: str,
        rating: float,
    ) -> Author | None:
        """Create an author."""
        logger = get_logger(__name__, info.context.request)
        data = _validated(AuthorCreate, name=name, rating=rating)
        author = await info.context.run(AuthorService.create_author, data)
        logger.info("Author %s created", author.id)
        return Author.from_model(author, books=[])
