# =============================================================================
# core/formatters.py  -  Reddit JSON → Readable Text
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Three pure functions, one per tool, that turn a FetchResult into the text
#   the caller sees.  Each is single-pass: decode, render, return.
#
#     format_search_results  ← JsonObject  data.children[*].data
#     format_post_details    ← JsonObject  data.children[0].data
#     format_comments        ← JsonArray   [1].data.children[*].data
#
# TOLERANCE POLICY:
#   The container path (data.children) MUST be there; if it isn't, the call
#   fails with FormatError.  Individual list entries that are malformed
#   (wrong type, missing a required field) are SKIPPED and logged at DEBUG,
#   because one odd entry should not hide the other twenty-four.
#
# NUMBERING:
#   Entries are numbered consecutively over what is actually rendered, and
#   the "Found N ..." header counts the same set.  Skipped entries never leave
#   gaps in the numbering.
# =============================================================================

import logging
import urllib.parse
from datetime import datetime, timezone
from typing import Any

from core.decode import (
    join_path,
    optional_str,
    require_int,
    require_list,
    require_mapping,
    require_number,
    require_str,
)
from core.errors import FormatError
from core.models import Comment, FetchResult, JsonArray, JsonObject, PostDetail, PostSummary

logger = logging.getLogger(__name__)

NO_SEARCH_RESULTS = "No results found for this query."
NO_COMMENTS = "No comments found for this post."
UNEXPECTED_FORMAT = "unexpected response format"

_INDENT = "   "


# =============================================================================
# Shared helpers
# =============================================================================
def format_timestamp(epoch_seconds: int) -> str:
    """Render epoch seconds as "YYYY-MM-DD HH:MM:SS UTC".

    Always UTC so the output is identical on every machine.
    """
    try:
        moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise FormatError(f"invalid created_utc timestamp: {epoch_seconds}") from e
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def is_self_link(url: str, source_host: str = "reddit.com") -> bool:
    """True when `url` points back at the source site (or is a relative permalink)."""
    try:
        host = (urllib.parse.urlsplit(url).hostname or "").lower()
    except ValueError:
        # Unparseable link (e.g. "http://[oops"); show it rather than fail.
        return False
    if not host:
        return True
    source_host = source_host.lower()
    return host == source_host or host.endswith("." + source_host)


def indent_body(body: str) -> str:
    """Hang every continuation line of a comment under a 3-space indent."""
    return body.replace("\n", "\n" + _INDENT)


# =============================================================================
# Entity decoders
# =============================================================================
def decode_post_summary(child: Any, base: str) -> PostSummary:
    data = require_mapping(child, "data", base=base)
    data_path = join_path(base, "data")
    return PostSummary(
        title=require_str(data, "title", data_path),
        author=require_str(data, "author", data_path),
        score=require_int(data, "score", data_path),
        id=require_str(data, "id", data_path),
    )


def decode_post_detail(data: dict[str, Any], base: str) -> PostDetail:
    return PostDetail(
        title=require_str(data, "title", base),
        author=require_str(data, "author", base),
        score=require_int(data, "score", base),
        upvote_ratio=require_number(data, "upvote_ratio", base),
        num_comments=require_int(data, "num_comments", base),
        created_utc=require_int(data, "created_utc", base),
        selftext=optional_str(data, "selftext"),
        url=optional_str(data, "url"),
    )


def decode_comment(child: Any, base: str) -> Comment | None:
    """Decode one listing entry, or return None for "more" markers."""
    if not isinstance(child, dict):
        raise FormatError(f"expected an object at {base}", path=base)
    kind = child.get("kind")
    if not isinstance(kind, str) or kind == "more":
        return None

    data = require_mapping(child, "data", base=base)
    data_path = join_path(base, "data")
    return Comment(
        author=require_str(data, "author", data_path),
        body=require_str(data, "body", data_path),
        score=require_int(data, "score", data_path),
    )


# =============================================================================
# Search
# =============================================================================
def format_search_results(result: FetchResult) -> str:
    """Render a search listing as numbered Title/Author/Score/Post ID blocks.

    Raises:
        FormatError: If the root is not an object with data.children.
    """
    if not isinstance(result, JsonObject):
        raise FormatError(UNEXPECTED_FORMAT)
    children = require_list(result.fields, "data", "children", message=UNEXPECTED_FORMAT)

    if not children:
        return NO_SEARCH_RESULTS

    posts: list[PostSummary] = []
    for index, child in enumerate(children):
        try:
            posts.append(decode_post_summary(child, f"data.children[{index}]"))
        except FormatError as e:
            logger.debug("Skipping search result: %s", e)

    if not posts:
        return NO_SEARCH_RESULTS

    parts = [f"Found {len(posts)} results:\n\n"]
    for number, post in enumerate(posts, start=1):
        parts.append(f"{number}. Title: {post.title}\n")
        parts.append(f"{_INDENT}Author: u/{post.author}\n")
        parts.append(f"{_INDENT}Score: {post.score}\n")
        parts.append(f"{_INDENT}Post ID: {post.id}\n\n")
    return "".join(parts)


# =============================================================================
# Post detail
# =============================================================================
def format_post_details(result: FetchResult, source_host: str = "reddit.com") -> str:
    """Render a single post from an /api/info.json listing.

    Args:
        result: The fetched listing.
        source_host: Host whose links are treated as self-links and omitted.

    Raises:
        FormatError: If the listing is malformed, empty ("post not found"),
            or the post lacks a required field.
    """
    if not isinstance(result, JsonObject):
        raise FormatError(UNEXPECTED_FORMAT)
    listing = require_mapping(result.fields, "data", message=UNEXPECTED_FORMAT)

    children = listing.get("children")
    if not isinstance(children, list) or not children:
        raise FormatError("post not found", path="data.children")

    base = "data.children[0].data"
    data = require_mapping(children, 0, "data", base="data.children", message="unexpected post data format")
    post = decode_post_detail(data, base)

    parts = [
        f"Title: {post.title}\n\n",
        f"Author: u/{post.author}\n",
        f"Score: {post.score} ({post.upvote_ratio * 100:.0f}% upvoted)\n",
        f"Comments: {post.num_comments}\n",
        f"Created: {format_timestamp(post.created_utc)}\n\n",
    ]

    if post.selftext:
        parts.append(f"Content:\n{post.selftext}\n\n")

    if post.url and not is_self_link(post.url, source_host):
        parts.append(f"URL: {post.url}\n\n")

    return "".join(parts)


# =============================================================================
# Comments
# =============================================================================
def format_comments(result: FetchResult) -> str:
    """Render the top-level comments of a /comments/<id>.json response.

    Only direct replies are shown; nested reply trees and "more" markers are
    ignored.

    Raises:
        FormatError: If the root is not an array of at least two listings, or
            the second listing has no data.children.
    """
    if not isinstance(result, JsonArray) or len(result.items) < 2:
        raise FormatError(UNEXPECTED_FORMAT)
    children = require_list(result.items, 1, "data", "children")

    comments: list[Comment] = []
    for index, child in enumerate(children):
        try:
            comment = decode_comment(child, f"[1].data.children[{index}]")
        except FormatError as e:
            logger.debug("Skipping comment: %s", e)
            continue
        if comment is not None:
            comments.append(comment)

    if not comments:
        return NO_COMMENTS

    parts = [f"Found {len(comments)} comments:\n\n"]
    for number, comment in enumerate(comments, start=1):
        parts.append(f"{number}. u/{comment.author} ({comment.score} points):\n")
        parts.append(f"{_INDENT}{indent_body(comment.body)}\n\n")
    return "".join(parts)
