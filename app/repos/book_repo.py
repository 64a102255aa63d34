from __future__ import annotations
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select
from app.models.book import Book, BookAuthor
from app.schemas.book import BookCreate

class BookRepository:
    @staticmethod
    # Create a book together with its author links
    def create(db: Session, data: BookCreate) -> Book:
        book = Book(
            title=data.title,
            author_links=[BookAuthor(author_id=author_id) for author_id in data.author_ids],
        )
        db.add(book)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        created = BookRepository.get(db, book.id)
        if created is None:
            raise RuntimeError(f"Book {book.id} vanished after commit")
        return created

    @staticmethod
    # List books with their authors
    def list(db: Session) -> list[Book]:
        stmt = select(Book).options(selectinload(Book.authors)).order_by(Book.id)
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get a book by ID with its authors
    def get(db: Session, book_id: int) -> Book | None:
        stmt = (
            select(Book)
            .where(Book.id == book_id)
            .options(selectinload(Book.authors))
            .execution_options(populate_existing=True)
        )
        return db.scalars(stmt).first()
