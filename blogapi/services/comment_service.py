"""Comment use cases."""

from __future__ import annotations

from typing import Optional

import structlog

from blogapi.domain.errors import Forbidden, NotFound, ValidationError
from blogapi.domain.ids import new_id, utc_now
from blogapi.domain.models import Comment
from blogapi.repositories.json_storage import Store

logger = structlog.get_logger()


class CommentService:
    def __init__(self, store: Store) -> None:
        self.store = store

    def add_comment(self, caller_id: str, post_id: str, text: Optional[str]) -> dict:
        if not text:
            raise ValidationError("Comment is empty")
        with self.store.transaction() as doc:
            post = doc.find_post(post_id)
            if not post:
                raise NotFound("Post not found")
            comment = Comment(
                id=new_id({c.id for c in doc.comments}),
                post_id=post.id,
                author_id=caller_id,
                text=text,
                created_at=utc_now(),
            )
            doc.comments.append(comment)
            author = doc.author_summary(caller_id)
        logger.info("comment.created", comment_id=comment.id, post_id=post.id)
        return {**comment.to_dict(), "author": author}

    def delete_comment(self, caller_id: str, comment_id: str) -> None:
        with self.store.transaction() as doc:
            comment = doc.find_comment(comment_id)
            if not comment:
                raise NotFound("Comment not found")
            if comment.author_id != caller_id:
                raise Forbidden("Not authorized")
            doc.comments = [c for c in doc.comments if c.id != comment.id]
        logger.info("comment.deleted", comment_id=comment_id)
