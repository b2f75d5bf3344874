"""
Auth Module - Registration, login and bearer token verification.

Structure:
- services/: Token signing/verification, password hashing, registration
- http_handlers/: FastAPI routes for /api/auth
- dependencies.py: get_current_user_id for protected routes
"""
from modules.auth.services.auth_service import AuthService
from modules.auth.services.token_service import TokenService
from modules.auth.dependencies import get_current_user_id
from modules.auth.http_handlers.auth import router as auth_router

__all__ = [
    "AuthService",
    "TokenService",
    "get_current_user_id",
    "auth_router",
]
