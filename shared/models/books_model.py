"""
Books Model - Pydantic models for book listings.
"""
from pydantic import BaseModel, Field, computed_field, field_validator
from datetime import datetime
from typing import Literal, Optional

from bson import ObjectId

from shared.models.base import CamelModel, utc_now


ContactType = Literal["email", "phone"]


def contact_type_of(contact: str) -> ContactType:
    """A contact string is an email when it contains '@', otherwise a phone number."""
    return "email" if "@" in contact else "phone"


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class BookCreate(CamelModel):
    """
    Request body for listing a new book.

    ``isRented`` may be sent by clients but is ignored: new listings are
    always available.
    """
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    genre: Optional[str] = None
    location: str = Field(min_length=1)
    contact: str = Field(min_length=1)
    owner_id: str = Field(min_length=1)
    owner_name: str = ""
    cover_url: Optional[str] = None

    @field_validator('genre', 'cover_url', mode='before')
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)

    def to_book(self) -> "BooksModel":
        """Convert to full book model with generated fields."""
        now = utc_now()
        return BooksModel(
            book_id=str(ObjectId()),
            title=self.title,
            author=self.author,
            genre=self.genre,
            location=self.location,
            contact=self.contact,
            owner_id=self.owner_id,
            owner_name=self.owner_name,
            is_rented=False,
            cover_url=self.cover_url,
            created_at=now,
            updated_at=now,
        )


class BookUpdate(CamelModel):
    """Patch body: only the provided fields are replaced."""
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1)
    genre: Optional[str] = None
    location: Optional[str] = Field(default=None, min_length=1)
    contact: Optional[str] = Field(default=None, min_length=1)
    owner_name: Optional[str] = None
    is_rented: Optional[bool] = None
    cover_url: Optional[str] = None

    @field_validator('genre', 'cover_url', mode='before')
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)

    @field_validator('title', 'author', 'location', 'contact', 'owner_name', 'is_rented')
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    def to_update(self) -> dict:
        """Document fields to $set. Explicit nulls clear genre/cover_url."""
        return self.model_dump(exclude_unset=True)


class BooksModel(BaseModel):
    """Book model for MongoDB persistence."""
    book_id: str = Field(description="ObjectId hex string (document _id)")
    title: str
    author: str
    genre: Optional[str] = None
    location: str
    contact: str
    owner_id: str
    owner_name: str = ""
    is_rented: bool = False
    cover_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @property
    def contact_type(self) -> ContactType:
        return contact_type_of(self.contact)

    def to_document(self) -> dict:
        """Convert to MongoDB document format."""
        return {
            "_id": ObjectId(self.book_id),
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "location": self.location,
            "contact": self.contact,
            "owner_id": self.owner_id,
            "owner_name": self.owner_name,
            "is_rented": self.is_rented,
            "cover_url": self.cover_url,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "BooksModel":
        """Create model from MongoDB document."""
        created_at = doc.get("created_at") or utc_now()
        return cls(
            book_id=str(doc["_id"]),
            title=doc.get("title", ""),
            author=doc.get("author", ""),
            genre=doc.get("genre"),
            location=doc.get("location", ""),
            contact=doc.get("contact", ""),
            owner_id=str(doc.get("owner_id", "")),
            owner_name=doc.get("owner_name", ""),
            is_rented=bool(doc.get("is_rented", False)),
            cover_url=doc.get("cover_url"),
            created_at=created_at,
            updated_at=doc.get("updated_at") or created_at,
        )

    def to_response(self) -> "BookResponse":
        return BookResponse(
            id=self.book_id,
            title=self.title,
            author=self.author,
            genre=self.genre,
            location=self.location,
            contact=self.contact,
            owner_id=self.owner_id,
            owner_name=self.owner_name,
            is_rented=self.is_rented,
            cover_url=self.cover_url,
            created_at=self.created_at,
        )


class BookResponse(CamelModel):
    """Response model for book endpoints."""
    id: str
    title: str
    author: str
    genre: Optional[str] = None
    location: str
    contact: str
    owner_id: str
    owner_name: str
    is_rented: bool
    cover_url: Optional[str] = None
    created_at: datetime

    @computed_field(alias="contactType")
    @property
    def contact_type(self) -> ContactType:
        return contact_type_of(self.contact)


class BookFilter(BaseModel):
    """Browse filters for listing books; all optional."""
    q: Optional[str] = None
    location: Optional[str] = None
    genre: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.q or self.location or self.genre)
