import os
import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "test_db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

from bson import ObjectId

from shared.models.users_model import UsersModel, UserRole
from shared.models.books_model import BooksModel, BookCreate
from modules.auth.services.token_service import TokenService


TEST_JWT_SECRET = "test-secret"


@pytest.fixture
def mock_mongo_collection() -> MagicMock:
    collection = MagicMock()
    collection.find_one = MagicMock(return_value=None)
    collection.insert_one = MagicMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.find = MagicMock(return_value=MockCursor([]))
    collection.find_one_and_update = MagicMock(return_value=None)
    collection.update_one = MagicMock(return_value=MagicMock(matched_count=0, modified_count=0))
    collection.delete_one = MagicMock(return_value=MagicMock(deleted_count=0))
    return collection


@pytest.fixture
def mock_mongo_client() -> MagicMock:
    client = MagicMock()
    client.admin.command = MagicMock(return_value={"ok": 1})
    return client


@pytest.fixture
def user_oid() -> ObjectId:
    return ObjectId("64b7f0c2a1b2c3d4e5f60718")


@pytest.fixture
def book_oid() -> ObjectId:
    return ObjectId("64b7f0c2a1b2c3d4e5f60999")


@pytest.fixture
def sample_user_doc(user_oid: ObjectId) -> dict:
    now = datetime.now(timezone.utc)
    return {
        "_id": user_oid,
        "name": "Alice Reader",
        "email": "alice@example.com",
        "password_hash": "pbkdf2_sha256$1000$salt$deadbeef",
        "mobile": "5125550100",
        "role": "owner",
        "saved_books": [],
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_user(sample_user_doc: dict) -> UsersModel:
    return UsersModel.from_document(sample_user_doc)


@pytest.fixture
def sample_book_create() -> BookCreate:
    return BookCreate(
        title="Dune",
        author="Herbert",
        location="Austin",
        contact="a@b.com",
        owner_id="u1",
        owner_name="Alice",
    )


@pytest.fixture
def sample_book_doc(book_oid: ObjectId) -> dict:
    now = datetime.now(timezone.utc)
    return {
        "_id": book_oid,
        "title": "Dune",
        "author": "Herbert",
        "genre": "Science Fiction",
        "location": "Austin",
        "contact": "a@b.com",
        "owner_id": "u1",
        "owner_name": "Alice",
        "is_rented": False,
        "cover_url": None,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_book(sample_book_doc: dict) -> BooksModel:
    return BooksModel.from_document(sample_book_doc)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET, algorithm="HS256", expires_minutes=60)


@pytest.fixture
def auth_token(token_service: TokenService, user_oid: ObjectId) -> str:
    return token_service.issue(str(user_oid), UserRole.OWNER.value)


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    return {"Authorization": f"Bearer {auth_token}"}


class MockCursor:
    def __init__(self, data: list):
        self._data = data
        self._sorted = False

    def sort(self, field: str, direction: int):
        self._sorted = True
        return self

    def __iter__(self):
        return iter(self._data)


def create_mock_find(data: list):
    def mock_find(*args, **kwargs):
        return MockCursor(data)
    return mock_find
