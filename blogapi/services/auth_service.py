"""
Authentication and identity related use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from blogapi.core.security import hash_password, password_needs_rehash, verify_password
from blogapi.core.tokens import TokenManager
from blogapi.domain.errors import DuplicateUser, InvalidCredentials, NotFound, ValidationError
from blogapi.domain.ids import new_id, utc_now
from blogapi.domain.models import Document, User
from blogapi.repositories.json_storage import Store

logger = structlog.get_logger()


@dataclass
class AuthResult:
    token: str
    user: dict

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user}


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _login_taken(doc: Document, value: str, exclude_id: str = "") -> bool:
    """True when ``value`` already resolves to another user at login (email or username)."""
    return any(u.id != exclude_id and value in (u.email, u.username) for u in doc.users)


class AuthService:
    """Handles registration, login, public profiles and profile edits."""

    def __init__(self, store: Store, tokens: TokenManager) -> None:
        self.store = store
        self.tokens = tokens

    # -------------------------------------- registration --------------------------------------
    def register(self, username: Optional[str], email: Optional[str], password: Optional[str]) -> AuthResult:
        username_value = _clean(username)
        email_value = _clean(email)
        if not username_value or not email_value or not password:
            raise ValidationError("Missing fields")
        password_hash = hash_password(password)
        with self.store.transaction() as doc:
            if _login_taken(doc, email_value) or _login_taken(doc, username_value):
                raise DuplicateUser("User already exists")
            user = User(
                id=new_id({u.id for u in doc.users}),
                username=username_value,
                email=email_value,
                password_hash=password_hash,
                created_at=utc_now(),
            )
            doc.users.append(user)
        logger.info("user.registered", user_id=user.id)
        return AuthResult(token=self.tokens.issue_token(user.id), user=user.to_public())

    # -------------------------------------- login --------------------------------------
    def login(self, email_or_username: Optional[str], password: Optional[str]) -> AuthResult:
        login_value = _clean(email_or_username)
        if not login_value or not password:
            raise ValidationError("Missing fields")
        with self.store.transaction() as doc:
            user = doc.find_user_by_login(login_value)
            if not user or not verify_password(password, user.password_hash):
                logger.info("auth.login_failed")
                raise InvalidCredentials("Invalid credentials")
            if password_needs_rehash(user.password_hash):
                user.password_hash = hash_password(password)
        logger.info("auth.login", user_id=user.id)
        return AuthResult(token=self.tokens.issue_token(user.id), user=user.to_public())

    # -------------------------------------- profile --------------------------------------
    def get_user(self, user_id: str) -> dict:
        with self.store.snapshot() as doc:
            user = doc.find_user(user_id)
        if not user:
            raise NotFound("User not found")
        return user.to_public()

    def update_profile(
        self,
        caller_id: str,
        *,
        username: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> dict:
        """Partial update: only the provided fields change; a blank username is ignored."""
        new_username = _clean(username)
        with self.store.transaction() as doc:
            user = doc.find_user(caller_id)
            if not user:
                raise NotFound("User not found")
            if new_username and new_username != user.username:
                if _login_taken(doc, new_username, exclude_id=user.id):
                    raise DuplicateUser("Username already taken")
                user.username = new_username
            if bio is not None:
                user.bio = bio
            if avatar_url is not None:
                user.avatar_url = avatar_url
        logger.info("user.updated", user_id=user.id)
        return user.to_public()
