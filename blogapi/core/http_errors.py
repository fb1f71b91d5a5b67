"""Map domain errors to HTTP responses."""

from __future__ import annotations

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from blogapi.domain.errors import (
    AuthenticationError,
    BlogError,
    DuplicateUser,
    Forbidden,
    NotFound,
    ValidationError,
)

logger = structlog.get_logger()

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: tuple[tuple[type[BlogError], int], ...] = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (Forbidden, 403),
    (NotFound, 404),
    (DuplicateUser, 409),
)


def status_for(exc: BlogError) -> int:
    for kind, status in STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return status
    return 400


def register_exception_handlers(app: FastAPI) -> None:
    """Register JSON error handlers: body is always ``{"message", "code"}``."""

    @app.exception_handler(BlogError)
    async def _blog_error_handler(request: Request, exc: BlogError) -> Response:
        status = status_for(exc)
        headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
        return JSONResponse(status_code=status, content={"message": exc.message, "code": exc.code}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body", "code": ValidationError.code, "errors": jsonable_errors(exc)},
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> Response:
        return JSONResponse(
            status_code=int(exc.status_code),
            content={"message": exc.detail, "code": f"http.{exc.status_code}"},
            headers=dict(exc.headers or {}),
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.error("request.unhandled_error", path=request.url.path, method=request.method, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal Server Error", "code": "internal.unhandled"})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Location and message of each validation problem (input values are left out)."""
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
