"""
Saved Books Service - Bookmark relation between users and books.
"""
from typing import Optional

from pymongo.collection import Collection

from shared.persistance.mongo_db import mongo_pool
from shared.persistance.object_id import parse_object_id
from shared.errors import NotFound
from shared.models.base import utc_now
from shared.models.books_model import BooksModel, BookResponse
from shared.services.logger import get_logger
from config.settings import settings


logger = get_logger(__name__)


class SavedBooksService:
    """
    Service for a user's saved books.

    - saved_books is a set: saving twice stores the id once ($addToSet)
    - saving does not check that the book exists
    - listing joins by set membership, so ids of deleted books drop out
    """

    def __init__(
        self,
        users_collection: Optional[Collection] = None,
        books_collection: Optional[Collection] = None,
    ):
        self._users_collection = users_collection
        self._books_collection = books_collection

    @property
    def users_collection(self) -> Collection:
        if self._users_collection is None:
            self._users_collection = mongo_pool.get_collection(
                settings.USERS_COLLECTION,
                settings.MONGO_DB
            )
        return self._users_collection

    @property
    def books_collection(self) -> Collection:
        if self._books_collection is None:
            self._books_collection = mongo_pool.get_collection(
                settings.BOOKS_COLLECTION,
                settings.MONGO_DB
            )
        return self._books_collection

    def save_book(self, user_id: str, book_id: str) -> None:
        """
        Add book_id to the user's saved set; no-op if already present.

        Raises:
            InvalidIdentifier: user_id or book_id is malformed
            NotFound: no such user
        """
        user_oid = parse_object_id(user_id, "user ID")
        book_oid = parse_object_id(book_id, "book ID")

        result = self.users_collection.update_one(
            {"_id": user_oid},
            {
                "$addToSet": {"saved_books": book_oid},
                "$set": {"updated_at": utc_now()},
            },
        )
        if result.matched_count == 0:
            logger.warning(f"Save failed - user not found: {user_id}")
            raise NotFound("User not found")

        logger.info(f"User {user_id} saved book {book_id}")

    def unsave_book(self, user_id: str, book_id: str) -> None:
        """
        Remove book_id from the user's saved set; no-op if absent.

        Raises:
            InvalidIdentifier: user_id or book_id is malformed
            NotFound: no such user
        """
        user_oid = parse_object_id(user_id, "user ID")
        book_oid = parse_object_id(book_id, "book ID")

        result = self.users_collection.update_one(
            {"_id": user_oid},
            {
                "$pull": {"saved_books": book_oid},
                "$set": {"updated_at": utc_now()},
            },
        )
        if result.matched_count == 0:
            logger.warning(f"Unsave failed - user not found: {user_id}")
            raise NotFound("User not found")

        logger.info(f"User {user_id} unsaved book {book_id}")

    def list_saved(self, user_id: str) -> list[BookResponse]:
        """
        Resolve the user's saved ids to book records.

        Raises:
            InvalidIdentifier: user_id is malformed (checked before any store call)
            NotFound: no such user
        """
        user_oid = parse_object_id(user_id, "user ID")

        user = self.users_collection.find_one({"_id": user_oid}, {"saved_books": 1})
        if not user:
            logger.warning(f"Saved books requested for unknown user: {user_id}")
            raise NotFound("User not found")

        saved_ids = user.get("saved_books") or []
        if not saved_ids:
            return []

        docs = self.books_collection.find({"_id": {"$in": list(saved_ids)}})
        return [BooksModel.from_document(doc).to_response() for doc in docs]
