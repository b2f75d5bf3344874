"""
Models package - Pydantic models for data validation.
"""
from shared.models.base import CamelModel, MessageResponse, utc_now
from shared.models.users_model import (
    UsersModel,
    UserRole,
    UserCreate,
    UserUpdate,
    UserResponse,
    LoginRequest,
    TokenResponse,
)
from shared.models.books_model import (
    BooksModel,
    BookCreate,
    BookUpdate,
    BookResponse,
    BookFilter,
    contact_type_of,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "utc_now",
    "UsersModel",
    "UserRole",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
    "BooksModel",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookFilter",
    "contact_type_of",
]
