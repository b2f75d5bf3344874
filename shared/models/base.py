"""
Model base - Common pydantic configuration and helpers.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Wire model: snake_case in Python, camelCase in JSON.

    Accepts either spelling on input; FastAPI serializes by alias on output.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""
    message: str
