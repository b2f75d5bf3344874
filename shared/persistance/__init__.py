"""
Persistance package - Database connections and identifier helpers.
"""
from shared.persistance.mongo_db import mongo_pool
from shared.persistance.object_id import is_valid_object_id, parse_object_id

__all__ = [
    "mongo_pool",
    "is_valid_object_id",
    "parse_object_id",
]
