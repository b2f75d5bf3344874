"""
Books Module - Listings, rental flag and saved books.

Structure:
- services/: BookService (listing CRUD), SavedBooksService (bookmarks)
- http_handlers/: FastAPI routes for /api/books
"""
from modules.books.services.book_service import BookService
from modules.books.services.saved_books_service import SavedBooksService
from modules.books.http_handlers.books import router as books_router

__all__ = ["BookService", "SavedBooksService", "books_router"]
