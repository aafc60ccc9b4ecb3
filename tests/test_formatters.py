import pytest

from core.client import decode_body
from core.errors import FormatError
from core.formatters import (
    NO_COMMENTS,
    NO_SEARCH_RESULTS,
    format_comments,
    format_post_details,
    format_search_results,
    format_timestamp,
    is_self_link,
)
from core.models import JsonArray, JsonObject
from tests.conftest import MORE_CHILD, comment_child, listing, post_child


# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------
def test_search_renders_numbered_blocks(search_response: JsonObject) -> None:
    text = format_search_results(search_response)

    assert text == (
        "Found 2 results:\n\n"
        "1. Title: A\n"
        "   Author: u/alice\n"
        "   Score: 5\n"
        "   Post ID: x1\n\n"
        "2. Title: B\n"
        "   Author: u/bob\n"
        "   Score: 10\n"
        "   Post ID: x2\n\n"
    )


def test_search_header_matches_block_count() -> None:
    children = [post_child(f"T{i}", "u", i, f"id{i}") for i in range(7)]
    text = format_search_results(JsonObject(fields=listing(children)))

    assert text.startswith("Found 7 results:")
    assert text.count("   Post ID: ") == 7


def test_search_empty_children_uses_fallback_message() -> None:
    text = format_search_results(JsonObject(fields=listing([])))

    assert text == NO_SEARCH_RESULTS
    assert "Found 0" not in text


def test_search_skips_malformed_entries_and_renumbers() -> None:
    children = [
        {"kind": "t3", "data": "not a mapping"},
        post_child("Good", "alice", 1, "g1"),
        {"kind": "t3", "data": {"title": "No author", "score": 1, "id": "n1"}},
        post_child("Also good", "bob", 2.7, "g2"),
    ]

    text = format_search_results(JsonObject(fields=listing(children)))

    assert text.startswith("Found 2 results:\n\n1. Title: Good\n")
    assert "2. Title: Also good\n   Author: u/bob\n   Score: 2\n" in text
    assert "No author" not in text


def test_search_all_entries_malformed_uses_fallback_message() -> None:
    text = format_search_results(JsonObject(fields=listing([{"kind": "t3"}, "junk"])))
    assert text == NO_SEARCH_RESULTS


@pytest.mark.parametrize("fields", [
    {},
    {"data": []},
    {"data": {"after": None}},
    {"data": {"children": {"not": "a list"}}},
])
def test_search_missing_children_is_format_error(fields: dict) -> None:
    with pytest.raises(FormatError, match="unexpected response format"):
        format_search_results(JsonObject(fields=fields))


def test_search_rejects_array_root() -> None:
    with pytest.raises(FormatError, match="unexpected response format"):
        format_search_results(JsonArray(items=[]))


# -----------------------------------------------------------------------------
# Post detail
# -----------------------------------------------------------------------------
def test_post_details_full_render(post_response: JsonObject) -> None:
    text = format_post_details(post_response)

    assert text == (
        "Title: Show r/python: my MCP server\n\n"
        "Author: u/alice\n"
        "Score: 128 (87% upvoted)\n"
        "Comments: 34\n"
        "Created: 2023-11-14 22:13:20 UTC\n\n"
        "Content:\nIt talks to Reddit.\nSecond line.\n\n"
        "URL: https://github.com/alice/reddit-mcp\n\n"
    )


@pytest.mark.parametrize("url", [
    "https://www.reddit.com/r/python/comments/abc123/show_rpython/",
    "https://old.reddit.com/r/python/comments/abc123/",
    "https://reddit.com/r/python/",
    "/r/python/comments/abc123/",
])
def test_post_details_omits_self_links(url: str) -> None:
    child = post_child("T", "a", 1, "p", upvote_ratio=1.0, num_comments=0, created_utc=0, url=url)

    text = format_post_details(JsonObject(fields=listing([child])))

    assert "URL:" not in text


def test_post_details_omits_empty_optional_fields() -> None:
    child = post_child("T", "a", 1, "p", upvote_ratio=0.5, num_comments=0, created_utc=0, selftext="", url="")

    text = format_post_details(JsonObject(fields=listing([child])))

    assert "Content:" not in text
    assert "URL:" not in text
    assert text.endswith("Created: 1970-01-01 00:00:00 UTC\n\n")


def test_post_details_empty_children_is_not_found() -> None:
    with pytest.raises(FormatError, match="post not found"):
        format_post_details(JsonObject(fields=listing([])))


def test_post_details_missing_required_field_reports_path() -> None:
    child = post_child("T", "a", 1, "p", num_comments=0, created_utc=0)

    with pytest.raises(FormatError) as excinfo:
        format_post_details(JsonObject(fields=listing([child])))

    assert excinfo.value.path == "data.children[0].data.upvote_ratio"


def test_post_details_malformed_first_child() -> None:
    with pytest.raises(FormatError, match="unexpected post data format"):
        format_post_details(JsonObject(fields=listing([{"kind": "t3", "data": None}])))


def test_post_details_rejects_bool_score() -> None:
    child = post_child("T", "a", True, "p", upvote_ratio=0.5, num_comments=0, created_utc=0)

    with pytest.raises(FormatError, match="expected a number"):
        format_post_details(JsonObject(fields=listing([child])))


# -----------------------------------------------------------------------------
# Comments
# -----------------------------------------------------------------------------
def test_comments_skip_more_and_reindent_body(comments_response: JsonArray) -> None:
    text = format_comments(comments_response)

    assert text == (
        "Found 2 comments:\n\n"
        "1. u/alice (12 points):\n"
        "   Great post\n\n"
        "2. u/bob (3 points):\n"
        "   line1\n"
        "   line2\n\n"
    )


def test_comments_count_excludes_more_and_malformed_entries() -> None:
    items = [
        listing([]),
        listing([
            MORE_CHILD,
            {"kind": "t1", "data": []},
            {"data": {"author": "nokind", "body": "x", "score": 1}},
            comment_child("carol", "hi", 1),
            "junk",
        ]),
    ]

    text = format_comments(JsonArray(items=items))

    assert text.startswith("Found 1 comments:\n\n1. u/carol (1 points):\n")
    assert "nokind" not in text


def test_comments_only_more_entries() -> None:
    text = format_comments(JsonArray(items=[listing([]), listing([MORE_CHILD])]))
    assert text == NO_COMMENTS


@pytest.mark.parametrize("result", [
    JsonArray(items=[]),
    JsonArray(items=[listing([comment_child("a", "b", 1)])]),
    JsonObject(fields=listing([comment_child("a", "b", 1)])),
    JsonObject(fields={}),
])
def test_comments_root_must_be_two_element_array(result) -> None:
    with pytest.raises(FormatError, match="unexpected response format"):
        format_comments(result)


def test_comments_second_slot_without_children() -> None:
    with pytest.raises(FormatError) as excinfo:
        format_comments(JsonArray(items=[listing([]), {"kind": "Listing", "data": {}}]))

    assert excinfo.value.path == "[1].data.children"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def test_format_timestamp_is_utc() -> None:
    assert format_timestamp(0) == "1970-01-01 00:00:00 UTC"
    assert format_timestamp(1700000000) == "2023-11-14 22:13:20 UTC"


def test_is_self_link_is_host_based() -> None:
    assert is_self_link("https://www.reddit.com/r/x/")
    assert not is_self_link("https://notreddit.com/page")
    assert not is_self_link("https://example.com/?ref=reddit.com")


def test_search_skips_entry_with_overflowing_score() -> None:
    result = decode_body(
        b'{"data": {"children": ['
        b'{"kind": "t3", "data": {"title": "A", "author": "a", "score": 1e999, "id": "x1"}},'
        b'{"kind": "t3", "data": {"title": "B", "author": "b", "score": 3, "id": "x2"}}'
        b']}}'
    )

    text = format_search_results(result)

    assert text.startswith("Found 1 results:\n\n1. Title: B\n")


def test_post_details_keeps_unparseable_url() -> None:
    child = post_child("T", "a", 1, "p", upvote_ratio=0.5, num_comments=0, created_utc=0, url="http://[oops")

    text = format_post_details(JsonObject(fields=listing([child])))

    assert text.endswith("URL: http://[oops\n\n")
    assert not is_self_link("http://[oops")
