# =============================================================================
# core/reddit.py  -  The Three Operations (extract → fetch → format)
# =============================================================================
#
# Each function here is one complete tool call minus the MCP wiring:
#
#   search_posts      → GET /search.json or /r/<sub>/search.json
#   get_post_details  → GET /api/info.json?id=t3_<id>
#   get_comments      → GET /comments/<id>.json
#
# They return the final text or raise a RedditToolError subclass.  The
# tools/ layer decides how those errors look to the caller.
# =============================================================================

import urllib.parse
from typing import Any, Mapping

from core.arguments import (
    canonical_fullname,
    extract_comments_args,
    extract_post_id,
    extract_search_args,
)
from core.client import fetch
from core.config import RedditConfig
from core.formatters import format_comments, format_post_details, format_search_results


def search_posts(arguments: Mapping[str, Any], config: RedditConfig) -> str:
    """Search Reddit posts and render the hits.

    Args:
        arguments: Raw tool arguments: query (required), subreddit, sort, limit.
        config: Runtime configuration.

    Returns:
        "Found N results: ..." text, or the no-results message.
    """
    args = extract_search_args(arguments, config)
    result = fetch(args.endpoint(), args.query_params(), config)
    return format_search_results(result)


def get_post_details(arguments: Mapping[str, Any], config: RedditConfig) -> str:
    """Look up one post by id (with or without the "t3_" prefix)."""
    post_id = extract_post_id(arguments)
    result = fetch("/api/info.json", {"id": canonical_fullname(post_id)}, config)
    return format_post_details(result, config.source_host)


def get_comments(arguments: Mapping[str, Any], config: RedditConfig) -> str:
    """Fetch and render the top-level comments of a post."""
    args = extract_comments_args(arguments, config)
    path = f"/comments/{urllib.parse.quote(args.post_id, safe='')}.json"
    result = fetch(path, args.query_params(), config)
    return format_comments(result)
