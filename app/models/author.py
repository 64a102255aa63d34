from __future__ import annotations
from typing import TYPE_CHECKING
from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.models.base import Base

if TYPE_CHECKING:
    from app.models.book import Book, BookAuthor

#Author
class Author(Base):
    __tablename__: str = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)

    book_links: Mapped[list[BookAuthor]] = relationship(back_populates="author")
    books: Mapped[list[Book]] = relationship(
        secondary="book_authors",
        order_by="Book.id",
        viewonly=True,
    )
