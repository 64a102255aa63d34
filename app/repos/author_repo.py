from __future__ import annotations
from collections.abc import Collection
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.models.author import Author
from app.schemas.author import AuthorCreate


class AuthorRepository:

    @staticmethod
    # Create a new author
    def create(db: Session, data: AuthorCreate) -> Author:
        author = Author(name=data.name, rating=data.rating)
        db.add(author)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(author)
        return author

    @staticmethod
    # List authors with their books
    def list(db: Session) -> list[Author]:
        stmt = select(Author).options(selectinload(Author.books)).order_by(Author.id)
        return list(db.scalars(stmt).all())

    @staticmethod
    # Get authors whose id is in the given set
    def list_by_ids(db: Session, author_ids: Collection[int]) -> list[Author]:
        if not author_ids:
            return []
        stmt = select(Author).where(Author.id.in_(author_ids)).order_by(Author.id)
        return list(db.scalars(stmt).all())
