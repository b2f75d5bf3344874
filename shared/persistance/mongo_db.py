"""
MongoDB Connection Pool - Singleton pattern for connection reuse.
"""
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from typing import Optional

from config.settings import settings
from shared.services.logger import get_logger


logger = get_logger(__name__)


class MongoDBPool:
    """Singleton MongoDB connection pool."""

    _instance: Optional["MongoDBPool"] = None
    _client: Optional[MongoClient] = None

    def __new__(cls) -> "MongoDBPool":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def connect(self, uri: Optional[str] = None) -> MongoClient:
        """
        Initialize or return existing MongoDB client.
        Uses connection pooling by default (maxPoolSize=100).
        """
        if self._client is None:
            self._client = MongoClient(
                uri or settings.MONGO_URI,
                maxPoolSize=100,
                minPoolSize=10,
                maxIdleTimeMS=30000,
                connectTimeoutMS=5000,
                serverSelectionTimeoutMS=5000,
                tz_aware=True,
            )
            # Test connection
            self._client.admin.command("ping")
            logger.info("MongoDB client connected")
        return self._client

    def get_database(self, db_name: Optional[str] = None) -> Database:
        """Get database instance (defaults to settings.MONGO_DB)."""
        if self._client is None:
            self.connect()
        return self._client[db_name or settings.MONGO_DB]

    def get_collection(self, collection_name: str, db_name: Optional[str] = None) -> Collection:
        """Get collection from database."""
        db = self.get_database(db_name)
        return db[collection_name]

    def ensure_indexes(self, db_name: Optional[str] = None) -> None:
        """Create the indexes the stores rely on. Safe to call repeatedly."""
        db = self.get_database(db_name)
        db[settings.USERS_COLLECTION].create_index(
            [("email", ASCENDING)], unique=True, name="email_unique"
        )
        db[settings.BOOKS_COLLECTION].create_index(
            [("owner_id", ASCENDING)], name="owner_id"
        )
        logger.info("MongoDB indexes ensured")

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None

    @property
    def client(self) -> Optional[MongoClient]:
        """Get raw client (connects if needed)."""
        if self._client is None:
            self.connect()
        return self._client


# Global singleton instance
mongo_pool = MongoDBPool()
