"""
Application Errors - Domain error taxonomy shared by all modules.

Services raise these; ``shared.exception_handlers`` turns them into
``{"message": ...}`` JSON responses with the matching status code.
"""
from typing import Optional


class AppError(Exception):
    """Base class for every error the API reports to clients."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed input or schema mismatch."""

    status_code = 400
    default_message = "Invalid request"


class InvalidIdentifier(ValidationError):
    """An identifier is not a well-formed ObjectId."""

    default_message = "Invalid identifier"


class EmailAlreadyRegistered(ValidationError):
    default_message = "Email is already registered"


class Unauthenticated(AppError):
    """Missing or malformed bearer credentials."""

    status_code = 401
    default_message = "No token provided"


class InvalidToken(Unauthenticated):
    default_message = "Invalid token"


class InvalidCredentials(Unauthenticated):
    default_message = "Invalid email or password"


class Forbidden(AppError):
    status_code = 403
    default_message = "Not allowed"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class InternalError(AppError):
    """Store or unexpected failure."""
