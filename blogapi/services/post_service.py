"""Post lifecycle: create, read, edit, delete (with comment cascade) and likes."""

from __future__ import annotations

from typing import Optional

import structlog

from blogapi.domain.errors import Forbidden, NotFound, ValidationError
from blogapi.domain.ids import new_id, utc_now
from blogapi.domain.models import Document, Post
from blogapi.repositories.json_storage import Store

logger = structlog.get_logger()


def _owned_post(doc: Document, post_id: str, caller_id: str) -> Post:
    post = doc.find_post(post_id)
    if not post:
        raise NotFound("Post not found")
    if post.author_id != caller_id:
        raise Forbidden("Not authorized")
    return post


class PostService:
    def __init__(self, store: Store) -> None:
        self.store = store

    def create_post(self, caller_id: str, title: Optional[str], content: Optional[str]) -> dict:
        if not title or not content:
            raise ValidationError("Missing fields")
        with self.store.transaction() as doc:
            if not doc.find_user(caller_id):
                raise NotFound("User not found")
            now = utc_now()
            post = Post(
                id=new_id({p.id for p in doc.posts}),
                author_id=caller_id,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            doc.posts.insert(0, post)
        logger.info("post.created", post_id=post.id, author_id=caller_id)
        return post.to_dict()

    def list_posts(self) -> list[dict]:
        with self.store.snapshot() as doc:
            return [{**p.to_dict(), "author": doc.author_summary(p.author_id)} for p in doc.posts]

    def get_post(self, post_id: str) -> dict:
        """Post with its author and every comment on it, oldest comment first."""
        with self.store.snapshot() as doc:
            post = doc.find_post(post_id)
            if not post:
                raise NotFound("Post not found")
            comments = [
                {**c.to_dict(), "author": doc.author_summary(c.author_id)}
                for c in doc.comments_for(post.id)
            ]
            return {**post.to_dict(), "author": doc.author_summary(post.author_id), "comments": comments}

    def update_post(
        self,
        caller_id: str,
        post_id: str,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> dict:
        with self.store.transaction() as doc:
            post = _owned_post(doc, post_id, caller_id)
            if title:
                post.title = title
            if content:
                post.content = content
            post.updated_at = utc_now()
        logger.info("post.updated", post_id=post.id)
        return post.to_dict()

    def delete_post(self, caller_id: str, post_id: str) -> int:
        """Remove the post and its comments; returns how many comments went with it."""
        with self.store.transaction() as doc:
            post = _owned_post(doc, post_id, caller_id)
            doc.posts = [p for p in doc.posts if p.id != post.id]
            before = len(doc.comments)
            doc.comments = [c for c in doc.comments if c.post_id != post.id]
            removed = before - len(doc.comments)
        logger.info("post.deleted", post_id=post_id, comments_removed=removed)
        return removed

    def toggle_like(self, caller_id: str, post_id: str) -> dict:
        with self.store.transaction() as doc:
            post = doc.find_post(post_id)
            if not post:
                raise NotFound("Post not found")
            liked = caller_id not in post.likes
            if liked:
                post.likes.append(caller_id)
            else:
                post.likes.remove(caller_id)
        return {"likesCount": len(post.likes), "liked": liked}
