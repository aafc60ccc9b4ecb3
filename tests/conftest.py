from typing import Any

import pytest

from core.config import RedditConfig
from core.models import JsonArray, JsonObject


def listing(children: list[Any]) -> dict[str, Any]:
    """Wrap children in Reddit's {"kind": "Listing", "data": {...}} envelope."""
    return {"kind": "Listing", "data": {"children": children, "after": None}}


def post_child(title: str, author: str, score: float, post_id: str, **extra: Any) -> dict[str, Any]:
    return {
        "kind": "t3",
        "data": {"title": title, "author": author, "score": score, "id": post_id, **extra},
    }


def comment_child(author: str, body: str, score: float) -> dict[str, Any]:
    return {
        "kind": "t1",
        "data": {"author": author, "body": body, "score": score, "replies": ""},
    }


MORE_CHILD = {"kind": "more", "data": {"count": 42, "children": ["abc", "def"]}}


@pytest.fixture
def config() -> RedditConfig:
    return RedditConfig(base_url="https://reddit.test", user_agent="test-agent/0.1", timeout=2.0)


@pytest.fixture
def search_response() -> JsonObject:
    return JsonObject(fields=listing([
        post_child("A", "alice", 5, "x1"),
        post_child("B", "bob", 10.0, "x2"),
    ]))


@pytest.fixture
def post_response() -> JsonObject:
    return JsonObject(fields=listing([
        post_child(
            "Show r/python: my MCP server",
            "alice",
            128,
            "abc123",
            upvote_ratio=0.87,
            num_comments=34,
            created_utc=1700000000.0,
            selftext="It talks to Reddit.\nSecond line.",
            url="https://github.com/alice/reddit-mcp",
        ),
    ]))


@pytest.fixture
def comments_response() -> JsonArray:
    return JsonArray(items=[
        listing([post_child("Post", "op", 1, "abc123")]),
        listing([
            comment_child("alice", "Great post", 12),
            MORE_CHILD,
            comment_child("bob", "line1\nline2", 3.9),
        ]),
    ])
