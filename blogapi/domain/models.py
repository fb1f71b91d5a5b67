"""
Typed records for the three tables kept in the JSON document.

Field names are snake_case in Python; ``to_dict``/``from_dict`` translate to
the camelCase keys used on disk and on the wire. The password credential is
only written by ``User.to_record`` (storage); ``User.to_public`` drops it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

UNKNOWN_AUTHOR = "unknown"


def _str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


@dataclass
class User:
    id: str
    username: str
    email: str
    password_hash: str
    bio: str = ""
    avatar_url: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=_str(data, "id"),
            username=_str(data, "username"),
            email=_str(data, "email"),
            password_hash=_str(data, "password"),
            bio=_str(data, "bio"),
            avatar_url=_str(data, "avatarUrl"),
            created_at=_str(data, "createdAt"),
        )

    def to_public(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "bio": self.bio,
            "avatarUrl": self.avatar_url,
            "createdAt": self.created_at,
        }

    def to_record(self) -> dict:
        record = self.to_public()
        record["password"] = self.password_hash
        return record


@dataclass
class Post:
    id: str
    author_id: str
    title: str
    content: str
    likes: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        raw_likes = data.get("likes") or []
        if not isinstance(raw_likes, list):
            raise TypeError("likes must be a list")
        likes: list[str] = []
        for uid in raw_likes:
            if isinstance(uid, str) and uid not in likes:
                likes.append(uid)
        return cls(
            id=_str(data, "id"),
            author_id=_str(data, "authorId"),
            title=_str(data, "title"),
            content=_str(data, "content"),
            likes=likes,
            created_at=_str(data, "createdAt"),
            updated_at=_str(data, "updatedAt"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "authorId": self.author_id,
            "title": self.title,
            "content": self.content,
            "likes": list(self.likes),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass
class Comment:
    id: str
    post_id: str
    author_id: str
    text: str
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Comment":
        return cls(
            id=_str(data, "id"),
            post_id=_str(data, "postId"),
            author_id=_str(data, "authorId"),
            text=_str(data, "text"),
            created_at=_str(data, "createdAt"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "postId": self.post_id,
            "authorId": self.author_id,
            "text": self.text,
            "createdAt": self.created_at,
        }


@dataclass
class Document:
    """Whole database: three ordered tables. Posts are kept newest first."""

    users: list[User] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        if not isinstance(data, Mapping):
            raise TypeError("document root must be an object")
        tables = {}
        for key in ("users", "posts", "comments"):
            rows = data.get(key) or []
            if not isinstance(rows, list):
                raise TypeError(f"{key} must be a list")
            tables[key] = rows
        return cls(
            users=[User.from_dict(row) for row in tables["users"]],
            posts=[Post.from_dict(row) for row in tables["posts"]],
            comments=[Comment.from_dict(row) for row in tables["comments"]],
        )

    def to_dict(self) -> dict:
        return {
            "users": [u.to_record() for u in self.users],
            "posts": [p.to_dict() for p in self.posts],
            "comments": [c.to_dict() for c in self.comments],
        }

    # -------------------------- lookups --------------------------
    def find_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_login(self, email_or_username: str) -> Optional[User]:
        return next(
            (u for u in self.users if u.email == email_or_username or u.username == email_or_username),
            None,
        )

    def find_post(self, post_id: str) -> Optional[Post]:
        return next((p for p in self.posts if p.id == post_id), None)

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        return next((c for c in self.comments if c.id == comment_id), None)

    def comments_for(self, post_id: str) -> list[Comment]:
        return [c for c in self.comments if c.post_id == post_id]

    def author_summary(self, user_id: str) -> dict:
        """Minimal projection of a user embedded in post/comment payloads."""
        user = self.find_user(user_id)
        if not user:
            return {"id": user_id, "username": UNKNOWN_AUTHOR, "avatarUrl": ""}
        return {"id": user.id, "username": user.username, "avatarUrl": user.avatar_url}
