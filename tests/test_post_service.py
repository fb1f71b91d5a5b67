"""
Post and comment use cases over an in-memory store.
"""
from __future__ import annotations

import pytest

from blogapi.domain.errors import Forbidden, NotFound, ValidationError


def _uid(result) -> str:
    return result.user["id"]


def test_create_post_is_listed_newest_first_with_author(posts, alice, bob):
    first = posts.create_post(_uid(alice), "First", "one")
    second = posts.create_post(_uid(bob), "Second", "two")
    listed = posts.list_posts()
    assert [p["id"] for p in listed] == [second["id"], first["id"]]
    assert listed[0]["author"] == {"id": _uid(bob), "username": "bob", "avatarUrl": ""}
    assert listed[1]["likes"] == []
    assert first["createdAt"] == first["updatedAt"]


@pytest.mark.parametrize("title,content", [("", "body"), ("Title", ""), (None, None)])
def test_create_post_requires_title_and_content(posts, alice, title, content):
    with pytest.raises(ValidationError):
        posts.create_post(_uid(alice), title, content)
    assert posts.list_posts() == []


def test_create_post_for_unknown_author(posts):
    with pytest.raises(NotFound):
        posts.create_post("ghost", "Title", "body")


def test_get_post_includes_comments_in_insertion_order(posts, comments, alice, bob):
    post = posts.create_post(_uid(alice), "Hello", "World")
    c1 = comments.add_comment(_uid(bob), post["id"], "Hi")
    c2 = comments.add_comment(_uid(alice), post["id"], "Thanks")
    other = posts.create_post(_uid(bob), "Other", "post")
    comments.add_comment(_uid(bob), other["id"], "elsewhere")

    detail = posts.get_post(post["id"])
    assert detail["author"]["username"] == "alice"
    assert [c["id"] for c in detail["comments"]] == [c1["id"], c2["id"]]
    assert detail["comments"][0]["author"]["username"] == "bob"

    with pytest.raises(NotFound):
        posts.get_post("missing")


def test_update_post_is_partial_and_refreshes_updated_at(posts, alice, monkeypatch):
    from blogapi.services import post_service

    post = posts.create_post(_uid(alice), "Hello", "World")
    monkeypatch.setattr(post_service, "utc_now", lambda: "2099-01-01T00:00:00.000Z")
    updated = posts.update_post(_uid(alice), post["id"], content="Everyone")
    assert updated["title"] == "Hello"
    assert updated["content"] == "Everyone"
    assert updated["updatedAt"] == "2099-01-01T00:00:00.000Z"
    assert updated["createdAt"] == post["createdAt"]


def test_only_author_can_update_or_delete_post(posts, alice, bob):
    post = posts.create_post(_uid(alice), "Hello", "World")
    with pytest.raises(Forbidden):
        posts.update_post(_uid(bob), post["id"], title="Hacked")
    with pytest.raises(Forbidden):
        posts.delete_post(_uid(bob), post["id"])
    assert posts.get_post(post["id"])["title"] == "Hello"


def test_update_or_delete_missing_post(posts, alice):
    with pytest.raises(NotFound):
        posts.update_post(_uid(alice), "missing", title="x")
    with pytest.raises(NotFound):
        posts.delete_post(_uid(alice), "missing")


def test_delete_post_cascades_only_its_comments(posts, comments, store, alice, bob):
    doomed = posts.create_post(_uid(alice), "Doomed", "post")
    kept = posts.create_post(_uid(alice), "Kept", "post")
    comments.add_comment(_uid(bob), doomed["id"], "a")
    comments.add_comment(_uid(alice), doomed["id"], "b")
    survivor = comments.add_comment(_uid(bob), kept["id"], "c")

    assert posts.delete_post(_uid(alice), doomed["id"]) == 2
    doc = store.load()
    assert [p.id for p in doc.posts] == [kept["id"]]
    assert [c.id for c in doc.comments] == [survivor["id"]]


def test_toggle_like_twice_restores_likes(posts, alice, bob, store):
    post = posts.create_post(_uid(alice), "Hello", "World")
    posts.toggle_like(_uid(bob), post["id"])
    before = list(store.load().find_post(post["id"]).likes)

    assert posts.toggle_like(_uid(alice), post["id"]) == {"likesCount": 2, "liked": True}
    assert posts.toggle_like(_uid(alice), post["id"]) == {"likesCount": 1, "liked": False}
    assert store.load().find_post(post["id"]).likes == before

    with pytest.raises(NotFound):
        posts.toggle_like(_uid(alice), "missing")


def test_like_scenario(posts, alice):
    post = posts.create_post(_uid(alice), "P", "content")
    assert posts.toggle_like(_uid(alice), post["id"]) == {"likesCount": 1, "liked": True}
    assert posts.toggle_like(_uid(alice), post["id"]) == {"likesCount": 0, "liked": False}


def test_add_comment_validation(posts, comments, alice):
    post = posts.create_post(_uid(alice), "Hello", "World")
    with pytest.raises(ValidationError):
        comments.add_comment(_uid(alice), post["id"], "")
    with pytest.raises(NotFound):
        comments.add_comment(_uid(alice), "missing", "Hi")


def test_only_comment_author_can_delete(posts, comments, alice, bob):
    post = posts.create_post(_uid(alice), "Hello", "World")
    comment = comments.add_comment(_uid(bob), post["id"], "Hi")
    with pytest.raises(Forbidden):
        comments.delete_comment(_uid(alice), comment["id"])
    comments.delete_comment(_uid(bob), comment["id"])
    assert posts.get_post(post["id"])["comments"] == []
    with pytest.raises(NotFound):
        comments.delete_comment(_uid(bob), comment["id"])


def test_delete_post_scenario(posts, comments, alice, bob):
    post = posts.create_post(_uid(alice), "Hello", "Body")
    comment = comments.add_comment(_uid(bob), post["id"], "Hi")
    assert comment["author"]["username"] == "bob"

    posts.delete_post(_uid(alice), post["id"])

    assert post["id"] not in [p["id"] for p in posts.list_posts()]
    with pytest.raises(NotFound):
        comments.delete_comment(_uid(bob), comment["id"])


def test_author_summary_for_vanished_user(posts, store, alice):
    post = posts.create_post(_uid(alice), "Hello", "World")
    with store.transaction() as doc:
        doc.users.clear()
    assert posts.get_post(post["id"])["author"] == {"id": _uid(alice), "username": "unknown", "avatarUrl": ""}
