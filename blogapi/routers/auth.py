from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from blogapi.schemas import LoginBody, ProfileUpdateBody, RegisterBody
from blogapi.services.auth_service import AuthService
from blogapi.services.session_service import current_user_id

router = APIRouter(prefix="/api", tags=["auth"])


def _get_auth_service(request: Request) -> AuthService:
    svc = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService not configured")
    return svc


@router.post("/auth/register")
def register(payload: Optional[RegisterBody] = None, svc: AuthService = Depends(_get_auth_service)):
    body = payload or RegisterBody()
    return svc.register(body.username, body.email, body.password).to_dict()


@router.post("/auth/login")
def login(payload: Optional[LoginBody] = None, svc: AuthService = Depends(_get_auth_service)):
    body = payload or LoginBody()
    return svc.login(body.email_or_username, body.password).to_dict()


@router.get("/users/{user_id}")
def get_user(user_id: str, svc: AuthService = Depends(_get_auth_service)):
    return svc.get_user(user_id)


@router.put("/users")
def update_profile(
    payload: Optional[ProfileUpdateBody] = None,
    caller_id: str = Depends(current_user_id),
    svc: AuthService = Depends(_get_auth_service),
):
    body = payload or ProfileUpdateBody()
    return svc.update_profile(caller_id, username=body.username, bio=body.bio, avatar_url=body.avatar_url)
