# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# Every value here lives for exactly one tool call.  Nothing is cached or
# shared between calls.
#
# THREE GROUPS:
#   1. Normalized tool arguments  (SearchArgs, CommentsArgs)
#   2. The fetch result           (JsonArray | JsonObject tagged union)
#   3. Decoded Reddit entities    (PostSummary, PostDetail, Comment)
#
# WHY A TAGGED UNION FOR THE FETCH RESULT?
#   The comments endpoint returns a top-level JSON array; every other endpoint
#   returns an object.  Tagging the root once, at the fetch boundary, lets each
#   formatter check "did I get the shape I expect?" with one isinstance()
#   instead of re-parsing or guessing.
# =============================================================================

import urllib.parse
from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# Normalized arguments
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchArgs:
    """Arguments for reddit_search after extraction and defaults."""

    query: str
    sort: str
    limit: int
    subreddit: Optional[str] = None    # Bare name, no "r/" prefix

    def endpoint(self) -> str:
        if self.subreddit:
            return f"/r/{urllib.parse.quote(self.subreddit, safe='')}/search.json"
        return "/search.json"

    def query_params(self) -> dict[str, str]:
        params = {"q": self.query, "limit": str(self.limit), "sort": self.sort}
        if self.subreddit:
            # Without restrict_sr Reddit searches all of Reddit from /r/<name>.
            params["restrict_sr"] = "1"
        return params


@dataclass(frozen=True)
class CommentsArgs:
    """Arguments for reddit_comments after extraction and defaults."""

    post_id: str                       # Bare id, no "t3_" prefix
    sort: str
    limit: int

    def query_params(self) -> dict[str, str]:
        return {"limit": str(self.limit), "sort": self.sort}


# -----------------------------------------------------------------------------
# Fetch result: JsonArray | JsonObject
# -----------------------------------------------------------------------------
@dataclass
class JsonArray:
    """A response whose JSON root is an array (the comments endpoint)."""

    items: list[Any] = field(default_factory=list)


@dataclass
class JsonObject:
    """A response whose JSON root is an object (every other endpoint)."""

    fields: dict[str, Any] = field(default_factory=dict)


FetchResult = Union[JsonArray, JsonObject]


# -----------------------------------------------------------------------------
# Decoded entities
# -----------------------------------------------------------------------------
@dataclass
class PostSummary:
    """One search hit."""

    title: str
    author: str
    score: int
    id: str


@dataclass
class PostDetail:
    """Everything the post-detail tool renders."""

    title: str
    author: str
    score: int
    upvote_ratio: float                # 0.0-1.0, rendered as a percentage
    num_comments: int
    created_utc: int                   # Epoch seconds
    selftext: Optional[str] = None     # Only for text posts
    url: Optional[str] = None          # Link target (may be a self-link)


@dataclass
class Comment:
    """One top-level comment."""

    author: str
    body: str
    score: int
