from .author import Author
from .book import Book, BookAuthor

__all__ = ["Author", "Book", "BookAuthor"]
