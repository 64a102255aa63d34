from .author_repo import AuthorRepository
from .book_repo import BookRepository
from .book_author_repo import BookAuthorRepository

__all__ = ["AuthorRepository", "BookRepository", "BookAuthorRepository"]
