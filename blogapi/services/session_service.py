"""Session helpers (bearer token extraction and validation)."""
from __future__ import annotations

from fastapi import Request

from blogapi.core.tokens import TokenManager
from blogapi.domain.errors import InvalidToken

AUTH_HEADER_NAME = "authorization"
AUTH_SCHEME = "bearer"


def bearer_token(request: Request) -> str | None:
    """Return the token from ``Authorization: Bearer <token>``, if present."""
    header = (request.headers.get(AUTH_HEADER_NAME) or "").strip()
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != AUTH_SCHEME:
        return None
    return token.strip() or None


def current_user_id(request: Request) -> str:
    """FastAPI dependency: the authenticated caller id, or InvalidToken (401)."""
    token = bearer_token(request)
    if not token:
        raise InvalidToken("No token")
    tokens: TokenManager = request.app.state.tokens
    return tokens.verify_token(token)
