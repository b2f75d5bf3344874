"""
Token Service - Issue and verify JWT bearer tokens.
"""
from datetime import timedelta
from typing import Optional

import jwt

from config.settings import settings
from shared.errors import InvalidToken
from shared.models.base import utc_now
from shared.services.logger import get_logger


logger = get_logger(__name__)


class TokenService:
    """
    Signs tokens for logged-in users and verifies incoming bearer tokens.

    Tokens carry the user id in both ``id`` and ``sub``; verification only
    checks signature, expiry and the presence of ``id``. No refresh, no
    revocation, no scopes.
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_minutes: Optional[int] = None,
    ):
        self.secret = secret or settings.JWT_SECRET
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expires_minutes = expires_minutes if expires_minutes is not None else settings.JWT_EXPIRES_MINUTES

    def issue(self, user_id: str, role: Optional[str] = None) -> str:
        """Create a signed token for user_id."""
        now = utc_now()
        payload = {
            "id": user_id,
            "sub": user_id,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
        }
        if role:
            payload["role"] = role
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return the subject user id.

        Raises:
            InvalidToken: bad signature, expired, or no ``id`` claim
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            logger.warning("Token rejected: expired")
            raise InvalidToken("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.warning(f"Token rejected: {exc}")
            raise InvalidToken() from exc

        user_id = payload.get("id") or payload.get("sub")
        if not user_id or not isinstance(user_id, str):
            logger.warning("Token rejected: missing id claim")
            raise InvalidToken()
        return user_id
