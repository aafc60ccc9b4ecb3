from unittest.mock import patch

import pytest

from core.config import RedditConfig
from core.errors import FetchError, ValidationError
from core.models import JsonArray, JsonObject
from core.reddit import get_comments, get_post_details, search_posts
from tests.conftest import listing, post_child


def test_search_posts_example(config: RedditConfig, search_response: JsonObject) -> None:
    with patch("core.reddit.fetch", return_value=search_response) as fetch:
        text = search_posts({"query": "cats", "limit": 2}, config)

    fetch.assert_called_once_with(
        "/search.json", {"q": "cats", "limit": "2", "sort": "relevance"}, config,
    )
    assert text.startswith(
        "Found 2 results:\n\n1. Title: A\n   Author: u/alice\n   Score: 5\n   Post ID: x1\n\n2. "
    )


def test_search_posts_within_subreddit(config: RedditConfig) -> None:
    with patch("core.reddit.fetch", return_value=JsonObject(fields=listing([]))) as fetch:
        text = search_posts({"query": "gil", "subreddit": "python", "sort": "new", "limit": 3}, config)

    path, params, _ = fetch.call_args.args
    assert path == "/r/python/search.json"
    assert params == {"q": "gil", "limit": "3", "sort": "new", "restrict_sr": "1"}
    assert text == "No results found for this query."


def test_search_posts_validation_happens_before_fetch(config: RedditConfig) -> None:
    with patch("core.reddit.fetch") as fetch:
        with pytest.raises(ValidationError):
            search_posts({"query": ""}, config)

    fetch.assert_not_called()


def test_post_lookup_is_identical_with_or_without_prefix(config: RedditConfig, post_response: JsonObject) -> None:
    with patch("core.reddit.fetch", return_value=post_response) as fetch:
        bare = get_post_details({"post_id": "abc123"}, config)
        prefixed = get_post_details({"post_id": "t3_abc123"}, config)

    first, second = fetch.call_args_list
    assert first == second
    assert first.args[:2] == ("/api/info.json", {"id": "t3_abc123"})
    assert bare == prefixed


def test_get_comments_request(config: RedditConfig, comments_response: JsonArray) -> None:
    with patch("core.reddit.fetch", return_value=comments_response) as fetch:
        text = get_comments({"post_id": "t3_abc123", "limit": 50, "sort": "new"}, config)

    fetch.assert_called_once_with("/comments/abc123.json", {"limit": "50", "sort": "new"}, config)
    assert text.startswith("Found 2 comments:")


def test_get_comments_quotes_post_id(config: RedditConfig, comments_response: JsonArray) -> None:
    with patch("core.reddit.fetch", return_value=comments_response) as fetch:
        get_comments({"post_id": "../api/me"}, config)

    assert fetch.call_args.args[0] == "/comments/..%2Fapi%2Fme.json"


def test_fetch_errors_propagate(config: RedditConfig) -> None:
    with patch("core.reddit.fetch", side_effect=FetchError("API returned error status: 500", status_code=500)):
        with pytest.raises(FetchError):
            get_post_details({"post_id": "abc"}, config)
