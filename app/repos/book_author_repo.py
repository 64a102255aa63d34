from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from app.models.author import Author
from app.models.book import Book, BookAuthor


class BookAuthorRepository:
    """Read access to the book/author join rows."""

    @staticmethod
    # Authors linked to a book, in join order
    def list_authors_for_book(db: Session, book_id: int) -> list[Author]:
        stmt = (
            select(BookAuthor)
            .where(BookAuthor.book_id == book_id)
            .options(joinedload(BookAuthor.author))
            .order_by(BookAuthor.author_id)
        )
        return [link.author for link in db.scalars(stmt).all()]

    @staticmethod
    # Books linked to an author, in join order
    def list_books_for_author(db: Session, author_id: int) -> list[Book]:
        stmt = (
            select(BookAuthor)
            .where(BookAuthor.author_id == author_id)
            .options(joinedload(BookAuthor.book))
            .order_by(BookAuthor.book_id)
        )
        return [link.book for link in db.scalars(stmt).all()]
