"""
Books HTTP Handler - Listing, rental flag and saved-book routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from modules.auth.dependencies import get_current_user_id
from modules.books.services.book_service import BookService
from modules.books.services.saved_books_service import SavedBooksService
from shared.models.base import MessageResponse
from shared.models.books_model import BookCreate, BookUpdate, BookResponse, BookFilter


router = APIRouter(prefix="/api/books", tags=["Books"])


# --- Dependency Injection ---

def get_book_service() -> BookService:
    """Dependency: Get book service instance."""
    return BookService()


def get_saved_books_service() -> SavedBooksService:
    """Dependency: Get saved books service instance."""
    return SavedBooksService()


# --- Routes ---

@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    data: BookCreate,
    book_service: BookService = Depends(get_book_service),
):
    """List a new book. New listings are never rented."""
    return book_service.create_book(data)


@router.get("", response_model=list[BookResponse])
async def list_books(
    q: Optional[str] = Query(default=None, description="Search title, author or location"),
    location: Optional[str] = None,
    genre: Optional[str] = None,
    book_service: BookService = Depends(get_book_service),
):
    """All books, unpaginated. Filters are optional."""
    return book_service.list_books(BookFilter(q=q, location=location, genre=genre))


# Declared before /{user_id} so "saved-books" is not taken for an owner id.
@router.get("/saved-books", response_model=list[BookResponse])
async def list_saved_books(
    user_id: str = Depends(get_current_user_id),
    saved_books_service: SavedBooksService = Depends(get_saved_books_service),
):
    """Books saved by the authenticated caller."""
    return saved_books_service.list_saved(user_id)


@router.get("/{user_id}", response_model=list[BookResponse])
async def list_books_by_owner(
    user_id: str,
    book_service: BookService = Depends(get_book_service),
):
    """Books listed by an owner. Empty list when there are none."""
    return book_service.list_books_by_owner(user_id)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str,
    data: BookUpdate,
    book_service: BookService = Depends(get_book_service),
):
    """Replace the provided fields of a book."""
    return book_service.update_book(book_id, data)


@router.delete("/{book_id}", response_model=MessageResponse)
async def delete_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
):
    """Delete a book."""
    book_service.delete_book(book_id)
    return MessageResponse(message="Book deleted")


@router.patch("/{book_id}/toggle", response_model=BookResponse)
async def toggle_rented(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
):
    """Flip the rental flag."""
    return book_service.toggle_rented(book_id)


@router.post("/{book_id}/save", response_model=MessageResponse)
async def save_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    saved_books_service: SavedBooksService = Depends(get_saved_books_service),
):
    """Bookmark a book for the caller. Saving twice is a no-op."""
    saved_books_service.save_book(user_id, book_id)
    return MessageResponse(message="Book saved successfully")


@router.delete("/{book_id}/save", response_model=MessageResponse)
async def unsave_book(
    book_id: str,
    user_id: str = Depends(get_current_user_id),
    saved_books_service: SavedBooksService = Depends(get_saved_books_service),
):
    """Remove a bookmark for the caller."""
    saved_books_service.unsave_book(user_id, book_id)
    return MessageResponse(message="Book removed from saved books")
