from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the blogapi package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blogapi.core import config as core_config  # noqa: E402
from blogapi.core.config import Settings  # noqa: E402
from blogapi.core.tokens import TokenManager  # noqa: E402
from blogapi.repositories.json_storage import JsonFileStore, MemoryStore  # noqa: E402
from blogapi.services.auth_service import AuthService  # noqa: E402
from blogapi.services.comment_service import CommentService  # noqa: E402
from blogapi.services.post_service import PostService  # noqa: E402

TEST_SECRET = "test-signing-secret-0123456789abcdef"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        host="127.0.0.1",
        port=4000,
        data_file=str(tmp_path / "db.json"),
        jwt_secret=TEST_SECRET,
        token_ttl_seconds=7 * 24 * 60 * 60,
        cors_origins=("*",),
        log_level="WARNING",
        log_format="console",
    )


@pytest.fixture()
def clean_settings_cache():
    """Reset the cached Settings so env changes made by a test are picked up."""
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def tokens(settings) -> TokenManager:
    return TokenManager.from_settings(settings)


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def file_store(tmp_path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "db.json")


@pytest.fixture()
def auth(store, tokens) -> AuthService:
    return AuthService(store, tokens)


@pytest.fixture()
def posts(store) -> PostService:
    return PostService(store)


@pytest.fixture()
def comments(store) -> CommentService:
    return CommentService(store)


@pytest.fixture()
def alice(auth):
    return auth.register("alice", "a@x.com", "pw1")


@pytest.fixture()
def bob(auth):
    return auth.register("bob", "b@x.com", "pw2")
