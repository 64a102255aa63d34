from __future__ import annotations
from collections.abc import Sequence
from sqlalchemy.orm import Session
from app.core.errors import LibraryValidationError
from app.core.logging import get_logger
from app.schemas.book import BookCreate
from app.repos.author_repo import AuthorRepository
from app.repos.book_repo import BookRepository
from app.repos.book_author_repo import BookAuthorRepository
from app.models.author import Author
from app.models.book import Book

MISSING_AUTHORS_MESSAGE = "One or more author IDs do not exist"

logger = get_logger(__name__)


class BookService:
    @staticmethod
    def parse_author_ids(raw_ids: Sequence[str]) -> list[int]:
        """
        Convert opaque GraphQL IDs to author primary keys.
        Only plain ASCII digit strings can name an author.
        """
        author_ids: list[int] = []
        for raw in raw_ids:
            if not (isinstance(raw, str) and raw.isascii() and raw.isdigit()):
                logger.info("Rejected non-numeric author id %r", raw)
                raise LibraryValidationError(MISSING_AUTHORS_MESSAGE)
            author_ids.append(int(raw))
        return author_ids

    @staticmethod
    # Create book
    def create_book(db: Session, data: BookCreate) -> Book:
        existing = AuthorRepository.list_by_ids(db, data.author_ids)

        if len(existing) != len(data.author_ids):
            missing = sorted(set(data.author_ids) - {author.id for author in existing})
            logger.info("Rejected book with unknown authors %s", missing)
            raise LibraryValidationError(MISSING_AUTHORS_MESSAGE)

        return BookRepository.create(db, data)

    @staticmethod
    # List books
    def list_books(db: Session) -> list[Book]:
        return BookRepository.list(db)

    @staticmethod
    # Authors of a book
    def list_authors(db: Session, book_id: int) -> list[Author]:
        return BookAuthorRepository.list_authors_for_book(db, book_id)
