"""
ObjectId helpers - Parse and render store-assigned identifiers.
"""
from bson import ObjectId
from bson.errors import InvalidId

from shared.errors import InvalidIdentifier


def is_valid_object_id(value) -> bool:
    """True when value is an ObjectId or a 24-hex string."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def parse_object_id(value, label: str = "id") -> ObjectId:
    """
    Convert a wire identifier into an ObjectId.

    Raises:
        InvalidIdentifier: value is not a well-formed identifier
    """
    if isinstance(value, ObjectId):
        return value
    if not is_valid_object_id(value):
        raise InvalidIdentifier(f"Invalid {label}")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifier(f"Invalid {label}") from exc
