"""
Users Model - Pydantic models for user data.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from enum import Enum
from typing import Optional

from shared.models.base import CamelModel, utc_now


class UserRole(str, Enum):
    OWNER = "owner"
    SEEKER = "seeker"


def _normalize_email(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


class UsersModel(BaseModel):
    """
    User model for MongoDB persistence.

    - user_id: ObjectId hex string (document _id)
    - password_hash: salted PBKDF2 hash, never serialized
    - saved_books: book ids bookmarked by this user, no duplicates
    """
    user_id: str
    name: str
    email: EmailStr
    password_hash: Optional[str] = Field(default=None, exclude=True, repr=False)
    mobile: str = ""
    role: UserRole = UserRole.SEEKER
    saved_books: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)

    @classmethod
    def from_document(cls, doc: dict) -> "UsersModel":
        """Create model from MongoDB document."""
        created_at = doc.get("created_at") or utc_now()
        return cls(
            user_id=str(doc["_id"]),
            name=doc.get("name", ""),
            email=doc["email"],
            password_hash=doc.get("password_hash"),
            mobile=doc.get("mobile", ""),
            role=doc.get("role", UserRole.SEEKER),
            saved_books=[str(book_id) for book_id in doc.get("saved_books", [])],
            created_at=created_at,
            updated_at=doc.get("updated_at") or created_at,
        )

    def to_response(self) -> "UserResponse":
        return UserResponse(
            id=self.user_id,
            name=self.name,
            email=self.email,
            mobile=self.mobile,
            role=self.role,
            saved_books=self.saved_books,
            created_at=self.created_at,
        )


class UserCreate(CamelModel):
    """Registration request body."""
    name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=6)
    mobile: str = Field(min_length=10)
    role: UserRole

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


class UserUpdate(CamelModel):
    """Profile patch: only name and mobile are editable."""
    name: Optional[str] = Field(default=None, min_length=2)
    mobile: Optional[str] = Field(default=None, min_length=10)

    def to_update(self) -> dict:
        """Fields to $set; unset and null fields are left alone."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserResponse(CamelModel):
    """Public profile fields."""
    id: str
    name: str
    email: str
    mobile: str
    role: UserRole
    saved_books: list[str] = Field(default_factory=list)
    created_at: datetime


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


class TokenResponse(CamelModel):
    """Login response: bearer token plus the caller's profile."""
    token: str
    token_type: str = "bearer"
    user: UserResponse
