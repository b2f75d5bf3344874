"""
Books Services Package.
"""
from modules.books.services.book_service import BookService
from modules.books.services.saved_books_service import SavedBooksService

__all__ = ["BookService", "SavedBooksService"]
