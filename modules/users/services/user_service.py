"""
User Service - Public profile reads and name/mobile updates.
"""
from typing import Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection

from shared.persistance.mongo_db import mongo_pool
from shared.persistance.object_id import parse_object_id
from shared.errors import NotFound
from shared.models.base import utc_now
from shared.models.users_model import UsersModel, UserUpdate, UserResponse
from shared.services.logger import get_logger
from config.settings import settings


logger = get_logger(__name__)


class UserService:
    """
    Service for user profiles.

    There is no password change, email change or account deletion.
    """

    def __init__(self, collection: Optional[Collection] = None):
        """
        Args:
            collection: MongoDB collection (injected for testing, otherwise uses pool)
        """
        self._collection = collection

    @property
    def collection(self) -> Collection:
        """Get users collection (lazy-loaded from pool if not injected)."""
        if self._collection is None:
            self._collection = mongo_pool.get_collection(
                settings.USERS_COLLECTION,
                settings.MONGO_DB
            )
        return self._collection

    def get_user(self, user_id: str) -> UserResponse:
        """
        Get a user's public profile.

        Raises:
            InvalidIdentifier: user_id is malformed
            NotFound: no such user
        """
        oid = parse_object_id(user_id, "user ID")
        doc = self.collection.find_one({"_id": oid})
        if not doc:
            logger.warning(f"User not found: {user_id}")
            raise NotFound("User not found")
        return UsersModel.from_document(doc).to_response()

    def update_user(self, user_id: str, data: UserUpdate) -> UserResponse:
        """
        Merge name/mobile into the profile. An empty patch returns the
        current profile unchanged.

        Raises:
            InvalidIdentifier: user_id is malformed
            NotFound: no such user
        """
        changes = data.to_update()
        if not changes:
            return self.get_user(user_id)

        oid = parse_object_id(user_id, "user ID")
        changes["updated_at"] = utc_now()

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            logger.warning(f"User not found for update: {user_id}")
            raise NotFound("User not found")

        logger.info(f"User profile updated: {user_id} ({', '.join(sorted(k for k in changes if k != 'updated_at'))})")
        return UsersModel.from_document(doc).to_response()
