"""
Book and Author GraphQL types
"""

import strawberry

from app import models
from app.graphql.context import GraphQLContext
from app.services.author_service import AuthorService
from app.services.book_service import BookService


@strawberry.type
class Author:
    """An author and the books they wrote."""

    id: strawberry.ID
    name: str
    rating: float
    loaded_books: strawberry.Private[list[models.Book] | None] = None

    @strawberry.field
    async def books(self, info: strawberry.Info[GraphQLContext, None]) -> list["Book"]:
        """Books linked to this author, loaded through the join rows when not already known."""
        rows = self.loaded_books
        if rows is None:
            rows = await info.context.run(AuthorService.list_books, int(self.id))
        return [Book.from_model(book) for book in rows]

    @classmethod
    def from_model(
        cls, author: models.Author, books: list[models.Book] | None = None
    ) -> "Author":
        return cls(
            id=strawberry.ID(str(author.id)),
            name=author.name,
            rating=author.rating,
            loaded_books=books,
        )


@strawberry.type
class Book:
    """A book and its authors."""

    id: strawberry.ID
    title: str
    loaded_authors: strawberry.Private[list[models.Author] | None] = None

    @strawberry.field
    async def authors(self, info: strawberry.Info[GraphQLContext, None]) -> list[Author]:
        """Authors linked to this book, loaded through the join rows when not already known."""
        rows = self.loaded_authors
        if rows is None:
            rows = await info.context.run(BookService.list_authors, int(self.id))
        return [Author.from_model(author) for author in rows]

    @classmethod
    def from_model(
        cls, book: models.Book, authors: list[models.Author] | None = None
    ) -> "Book":
        return cls(
            id=strawberry.ID(str(book.id)),
            title=book.title,
            loaded_authors=authors,
        )
