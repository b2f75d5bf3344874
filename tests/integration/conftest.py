import os
import pytest
from typing import Generator
from pymongo import MongoClient

os.environ.setdefault("JWT_SECRET", "test-secret")


@pytest.fixture(scope="session")
def mongodb_container() -> Generator:
    from testcontainers.mongodb import MongoDbContainer

    container = MongoDbContainer("mongo:7.0")
    try:
        container.start()
    except Exception as exc:
        pytest.skip(f"MongoDB container unavailable: {exc}")
    yield container
    container.stop()


@pytest.fixture(scope="session")
def mongodb_uri(mongodb_container) -> str:
    return mongodb_container.get_connection_url()


@pytest.fixture(scope="session")
def mongodb_client(mongodb_uri: str) -> Generator[MongoClient, None, None]:
    client = MongoClient(mongodb_uri, tz_aware=True)
    yield client
    client.close()


@pytest.fixture
def test_database(mongodb_client: MongoClient):
    from shared.persistance.mongo_db import MongoDBPool

    db_name = "test_bookworm_hub"
    db = mongodb_client[db_name]

    # same indexes the app creates on startup
    pool = MongoDBPool()
    pool._client = mongodb_client
    pool.ensure_indexes(db_name)

    yield db

    pool._client = None
    mongodb_client.drop_database(db_name)


@pytest.fixture
def users_collection(test_database):
    return test_database["users"]


@pytest.fixture
def books_collection(test_database):
    return test_database["books"]
