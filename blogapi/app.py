from __future__ import annotations

from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogapi.core.config import Settings, get_settings
from blogapi.core.http_errors import register_exception_handlers
from blogapi.core.log_config import configure_logging
from blogapi.core.tokens import TokenManager
from blogapi.repositories.json_storage import JsonFileStore, Store
from blogapi.routers import auth as auth_router
from blogapi.routers import comments as comments_router
from blogapi.routers import posts as posts_router
from blogapi.services.auth_service import AuthService
from blogapi.services.comment_service import CommentService
from blogapi.services.post_service import PostService

logger = structlog.get_logger()


def create_app(store: Optional[Store] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API. Fails fast when no token signing secret is configured."""
    settings = settings or get_settings()
    tokens = TokenManager.from_settings(settings)
    configure_logging(settings.log_level, settings.log_format)
    store = store or JsonFileStore(settings.data_file)

    app = FastAPI(title="Blog API")
    app.state.settings = settings
    app.state.store = store
    app.state.tokens = tokens
    app.state.auth_service = AuthService(store, tokens)
    app.state.post_service = PostService(store)
    app.state.comment_service = CommentService(store)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth_router.router)
    app.include_router(posts_router.router)
    app.include_router(comments_router.router)

    logger.info("app.configured", env=settings.app_env, store=type(store).__name__)
    return app
