from sqlalchemy.orm import Session
from app.models.author import Author
from app.models.book import Book
from app.schemas.author import AuthorCreate
from app.repos.author_repo import AuthorRepository
from app.repos.book_author_repo import BookAuthorRepository


class AuthorService:
    @staticmethod
    # Create author
    def create_author(db: Session, data: AuthorCreate) -> Author:
        return AuthorRepository.create(db, data)

    @staticmethod
    # List authors
    def list_authors(db: Session) -> list[Author]:
        return AuthorRepository.list(db)

    @staticmethod
    # Books written by an author
    def list_books(db: Session, author_id: int) -> list[Book]:
        return BookAuthorRepository.list_books_for_author(db, author_id)
