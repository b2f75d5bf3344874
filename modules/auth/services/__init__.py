"""
Auth Services Package.
"""
from modules.auth.services.auth_service import AuthService, hash_password, verify_password
from modules.auth.services.token_service import TokenService

__all__ = ["AuthService", "TokenService", "hash_password", "verify_password"]
