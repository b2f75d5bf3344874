"""
Auth Dependencies - Bearer credential verification for protected routes.
"""
from typing import Optional

from fastapi import Depends, Header

from modules.auth.services.token_service import TokenService
from shared.errors import Unauthenticated


BEARER_PREFIX = "Bearer "


def get_token_service() -> TokenService:
    """Dependency: Get token service instance."""
    return TokenService()


def parse_bearer(authorization: Optional[str]) -> str:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        Unauthenticated: header missing or not a bearer credential
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthenticated("No token provided")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token or " " in token:
        raise Unauthenticated("Malformed authorization header")
    return token


async def get_current_user_id(
    authorization: Optional[str] = Header(default=None),
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """Dependency: the verified caller's user id."""
    token = parse_bearer(authorization)
    return token_service.verify(token)
