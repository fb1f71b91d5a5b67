from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from blogapi.schemas import CommentBody, PostBody
from blogapi.services.comment_service import CommentService
from blogapi.services.post_service import PostService
from blogapi.services.session_service import current_user_id

router = APIRouter(prefix="/api", tags=["posts"])


def _get_post_service(request: Request) -> PostService:
    svc = getattr(getattr(request.app, "state", None), "post_service", None)
    if not svc:
        raise RuntimeError("PostService not configured")
    return svc


def _get_comment_service(request: Request) -> CommentService:
    svc = getattr(getattr(request.app, "state", None), "comment_service", None)
    if not svc:
        raise RuntimeError("CommentService not configured")
    return svc


@router.post("/posts", status_code=201)
def create_post(
    payload: Optional[PostBody] = None,
    caller_id: str = Depends(current_user_id),
    svc: PostService = Depends(_get_post_service),
):
    body = payload or PostBody()
    return svc.create_post(caller_id, body.title, body.content)


@router.get("/posts")
def list_posts(svc: PostService = Depends(_get_post_service)):
    return svc.list_posts()


@router.get("/posts/{post_id}")
def get_post(post_id: str, svc: PostService = Depends(_get_post_service)):
    return svc.get_post(post_id)


@router.put("/posts/{post_id}")
def update_post(
    post_id: str,
    payload: Optional[PostBody] = None,
    caller_id: str = Depends(current_user_id),
    svc: PostService = Depends(_get_post_service),
):
    body = payload or PostBody()
    return svc.update_post(caller_id, post_id, title=body.title, content=body.content)


@router.delete("/posts/{post_id}")
def delete_post(
    post_id: str,
    caller_id: str = Depends(current_user_id),
    svc: PostService = Depends(_get_post_service),
):
    svc.delete_post(caller_id, post_id)
    return {"message": "Deleted"}


@router.post("/posts/{post_id}/like")
def toggle_like(
    post_id: str,
    caller_id: str = Depends(current_user_id),
    svc: PostService = Depends(_get_post_service),
):
    return svc.toggle_like(caller_id, post_id)


@router.post("/posts/{post_id}/comments", status_code=201)
def add_comment(
    post_id: str,
    payload: Optional[CommentBody] = None,
    caller_id: str = Depends(current_user_id),
    svc: CommentService = Depends(_get_comment_service),
):
    body = payload or CommentBody()
    return svc.add_comment(caller_id, post_id, body.text)
