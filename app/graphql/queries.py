"""
Root GraphQL query definitions
"""

import strawberry

from app.graphql.context import GraphQLContext
from app.graphql.types import Author, Book
from app.services.author_service import AuthorService
from app.services.book_service import BookService


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def books(self, info: strawberry.Info[GraphQLContext, None]) -> list[Book | None] | None:
        """All books with their authors."""
        books = await info.context.run(BookService.list_books)
        return [Book.from_model(book, authors=book.authors) for book in books]

    @strawberry.field
    async def authors(self, info: strawberry.Info[GraphQLContext, None]) -> list[Author | None] | None:
        """All authors with their books."""
        authors = await info.context.run(AuthorService.list_authors)
        return [Author.from_model(author, books=author.books) for author in authors]
