"""
Bearer token helpers.

Tokens are HS256 JWTs carrying the user id in ``sub`` plus ``iat``/``exp``.
They are stateless: nothing is persisted, so logout is left to the client.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from blogapi.core.config import Settings
from blogapi.domain.errors import InvalidToken

JWT_ALGORITHM = "HS256"


class TokenManager:
    """Issues and verifies signed, expiring session tokens."""

    def __init__(self, secret: str, ttl_seconds: int):
        if not (secret or "").strip():
            raise ValueError("A non-empty signing secret is required")
        self._secret = secret
        self.ttl_seconds = max(60, int(ttl_seconds))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenManager":
        return cls(settings.require_secret(), settings.token_ttl_seconds)

    def issue_token(self, user_id: str, *, now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(issued.timestamp()),
            "exp": int((issued + timedelta(seconds=self.ttl_seconds)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: str | None) -> str:
        """Return the user id carried by ``token`` or raise InvalidToken."""
        if not token:
            raise InvalidToken()
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token expired") from None
        except jwt.PyJWTError:
            raise InvalidToken() from None
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken()
        return user_id
