"""
Auth Service - Registration, login and password hashing.
"""
from typing import Optional
import hashlib
import hmac
import secrets

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from shared.persistance.mongo_db import mongo_pool
from shared.errors import EmailAlreadyRegistered, InvalidCredentials
from shared.models.base import utc_now
from shared.models.users_model import (
    UsersModel,
    UserCreate,
    UserResponse,
    LoginRequest,
    TokenResponse,
)
from shared.services.logger import get_logger
from modules.auth.services.token_service import TokenService
from config.settings import settings


logger = get_logger(__name__)

HASH_SCHEME = "pbkdf2_sha256"


def hash_password(password: str, iterations: Optional[int] = None, salt: Optional[str] = None) -> str:
    """
    Hash password with a random salt.

    Format: ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``
    """
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{HASH_SCHEME}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Constant-time check of password against a stored hash."""
    if not stored:
        return False
    try:
        scheme, iterations, salt, expected = stored.split("$", 3)
        rounds = int(iterations)
    except ValueError:
        return False
    if scheme != HASH_SCHEME:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), rounds)
    return hmac.compare_digest(digest.hex(), expected)


class AuthService:
    """Registers users and exchanges credentials for bearer tokens."""

    def __init__(
        self,
        collection: Optional[Collection] = None,
        token_service: Optional[TokenService] = None,
    ):
        self._collection = collection
        self.token_service = token_service or TokenService()

    @property
    def collection(self) -> Collection:
        """Get users collection."""
        if self._collection is None:
            self._collection = mongo_pool.get_collection(settings.USERS_COLLECTION, settings.MONGO_DB)
        return self._collection

    def register(self, data: UserCreate) -> UserResponse:
        """
        Register a new user.

        Raises:
            EmailAlreadyRegistered: email is taken
        """
        logger.info(f"Registering new {data.role.value}: {data.email}")

        if self.collection.find_one({"email": data.email}):
            logger.warning(f"Email already exists: {data.email}")
            raise EmailAlreadyRegistered()

        now = utc_now()
        user_doc = {
            "name": data.name,
            "email": data.email,
            "password_hash": hash_password(data.password),
            "mobile": data.mobile,
            "role": data.role.value,
            "saved_books": [],
            "created_at": now,
            "updated_at": now,
        }

        try:
            result = self.collection.insert_one(user_doc)
        except DuplicateKeyError as exc:
            # lost a race with a concurrent registration
            logger.warning(f"Email already exists: {data.email}")
            raise EmailAlreadyRegistered() from exc

        user_doc["_id"] = result.inserted_id
        logger.info(f"User registered: {result.inserted_id}")

        return UsersModel.from_document(user_doc).to_response()

    def login(self, data: LoginRequest) -> TokenResponse:
        """
        Check credentials and issue a token.

        Raises:
            InvalidCredentials: unknown email or wrong password
        """
        logger.info(f"Login attempt for: {data.email}")
        doc = self.collection.find_one({"email": data.email})

        if not doc:
            logger.warning(f"Login failed - user not found: {data.email}")
            raise InvalidCredentials()

        if not verify_password(data.password, doc.get("password_hash")):
            logger.warning(f"Login failed - wrong password: {data.email}")
            raise InvalidCredentials()

        user = UsersModel.from_document(doc)
        token = self.token_service.issue(user.user_id, user.role.value)
        logger.info(f"Login successful: {data.email}")

        return TokenResponse(token=token, user=user.to_response())
