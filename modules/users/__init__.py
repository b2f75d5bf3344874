"""
Users Module - Public profiles and profile updates.
"""
from modules.users.services.user_service import UserService
from modules.users.http_handlers.users import router as users_router

__all__ = ["UserService", "users_router"]
