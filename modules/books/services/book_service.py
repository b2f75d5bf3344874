"""
Book Service - Listing CRUD and the rental flag.

Uses BooksModel for data validation and persistence. No optimistic
concurrency: two simultaneous toggles on one book are last-write-wins.
"""
import re
from typing import Optional

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from shared.persistance.mongo_db import mongo_pool
from shared.persistance.object_id import parse_object_id
from shared.errors import NotFound
from shared.models.base import utc_now
from shared.models.books_model import (
    BooksModel,
    BookCreate,
    BookUpdate,
    BookResponse,
    BookFilter,
)
from shared.services.logger import get_logger
from config.settings import settings


logger = get_logger(__name__)


class BookService:
    """Service for book listings owned by users."""

    def __init__(self, collection: Optional[Collection] = None):
        """
        Args:
            collection: MongoDB collection (injected for testing, otherwise uses pool)
        """
        self._collection = collection

    @property
    def collection(self) -> Collection:
        """Get books collection (lazy-loaded from pool if not injected)."""
        if self._collection is None:
            self._collection = mongo_pool.get_collection(
                settings.BOOKS_COLLECTION,
                settings.MONGO_DB
            )
        return self._collection

    def create_book(self, data: BookCreate) -> BookResponse:
        """
        Persist a new listing. The rental flag always starts false.

        Args:
            data: Book creation data

        Returns:
            BookResponse with the store-assigned id
        """
        book = data.to_book()
        self.collection.insert_one(book.to_document())
        logger.info(f"Book created: {book.book_id} '{book.title}' by owner {book.owner_id}")
        return book.to_response()

    def list_books(self, filters: Optional[BookFilter] = None) -> list[BookResponse]:
        """
        List every book, newest first, optionally narrowed by browse filters.

        Args:
            filters: q matches title/author/location case-insensitively;
                location and genre match exactly
        """
        query = self._build_query(filters)
        docs = self.collection.find(query).sort("created_at", DESCENDING)
        return [BooksModel.from_document(doc).to_response() for doc in docs]

    def list_books_by_owner(self, owner_id: str) -> list[BookResponse]:
        """List books listed by owner_id. Empty list when there are none."""
        docs = self.collection.find({"owner_id": owner_id}).sort("created_at", DESCENDING)
        return [BooksModel.from_document(doc).to_response() for doc in docs]

    def get_book(self, book_id: str) -> BookResponse:
        """
        Raises:
            InvalidIdentifier: book_id is malformed
            NotFound: no such book
        """
        oid = parse_object_id(book_id, "book ID")
        doc = self.collection.find_one({"_id": oid})
        if not doc:
            raise NotFound("Book not found")
        return BooksModel.from_document(doc).to_response()

    def update_book(self, book_id: str, data: BookUpdate) -> BookResponse:
        """
        Replace the provided fields of a book.

        Raises:
            InvalidIdentifier: book_id is malformed
            NotFound: no such book
        """
        oid = parse_object_id(book_id, "book ID")
        changes = data.to_update()
        if not changes:
            return self.get_book(book_id)

        changes["updated_at"] = utc_now()
        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            logger.warning(f"Book not found for update: {book_id}")
            raise NotFound("Book not found")

        logger.info(f"Book updated: {book_id}")
        return BooksModel.from_document(doc).to_response()

    def delete_book(self, book_id: str) -> None:
        """
        Remove a book. Saved-book references to it are left dangling.

        Raises:
            InvalidIdentifier: book_id is malformed
            NotFound: no such book
        """
        oid = parse_object_id(book_id, "book ID")
        result = self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            logger.warning(f"Book not found for delete: {book_id}")
            raise NotFound("Book not found")
        logger.info(f"Book deleted: {book_id}")

    def toggle_rented(self, book_id: str) -> BookResponse:
        """
        Flip the rental flag.

        Raises:
            InvalidIdentifier: book_id is malformed
            NotFound: no such book
        """
        oid = parse_object_id(book_id, "book ID")
        doc = self.collection.find_one({"_id": oid})
        if not doc:
            logger.warning(f"Book not found for toggle: {book_id}")
            raise NotFound("Book not found")

        is_rented = not bool(doc.get("is_rented", False))
        updated = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": {"is_rented": is_rented, "updated_at": utc_now()}},
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            # deleted between the read and the write
            raise NotFound("Book not found")

        logger.info(f"Book {book_id} is_rented -> {is_rented}")
        return BooksModel.from_document(updated).to_response()

    @staticmethod
    def _build_query(filters: Optional[BookFilter]) -> dict:
        if filters is None or filters.is_empty():
            return {}

        query: dict = {}
        if filters.q:
            pattern = {"$regex": re.escape(filters.q.strip()), "$options": "i"}
            query["$or"] = [
                {"title": pattern},
                {"author": pattern},
                {"location": pattern},
            ]
        if filters.location:
            query["location"] = filters.location
        if filters.genre:
            query["genre"] = filters.genre
        return query
