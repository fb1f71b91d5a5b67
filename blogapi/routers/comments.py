from __future__ import annotations

from fastapi import APIRouter, Depends

from blogapi.routers.posts import _get_comment_service
from blogapi.services.comment_service import CommentService
from blogapi.services.session_service import current_user_id

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.delete("/{comment_id}")
def delete_comment(
    comment_id: str,
    caller_id: str = Depends(current_user_id),
    svc: CommentService = Depends(_get_comment_service),
):
    svc.delete_comment(caller_id, comment_id)
    return {"message": "Comment deleted"}
