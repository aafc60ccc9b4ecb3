# =============================================================================
# core/arguments.py  -  Argument Extraction & Normalization
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the untyped argument mapping of a tool call into a typed, normalized
#   value (SearchArgs, CommentsArgs, or a bare post id), or raises
#   ValidationError naming the offending parameter.
#
# RULES:
#   - Required strings must be present and non-blank.
#   - Optional strings that are absent or blank fall back to their default.
#   - Enumerated strings must be one of the allowed values.
#   - Numbers are truncated to int, then CLAMPED into [min, max].  The bounds
#     are advertised in the MCP schema; every clamp is logged at WARNING.
#   - Post ids may carry the "t3_" type prefix.  One leading occurrence is
#     stripped; canonical_fullname() puts it back for /api/info.json lookups.
# =============================================================================

import logging
import math
from typing import Any, Mapping

from core.config import COMMENT_SORTS, SEARCH_SORTS, RedditConfig
from core.errors import ValidationError
from core.models import CommentsArgs, SearchArgs

logger = logging.getLogger(__name__)

POST_PREFIX = "t3_"


# =============================================================================
# Field helpers
# =============================================================================
def required_str(arguments: Mapping[str, Any], name: str, message: str | None = None) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message or f"{name} is required", parameter=name)
    return value.strip()


def optional_str(arguments: Mapping[str, Any], name: str, default: str | None = None) -> str | None:
    value = arguments.get(name)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string", parameter=name)
    return value.strip() or default


def enum_str(arguments: Mapping[str, Any], name: str, allowed: tuple[str, ...], default: str) -> str:
    value = optional_str(arguments, name, default)
    if value not in allowed:
        raise ValidationError(
            f"{name} must be one of: {', '.join(allowed)} (got {value!r})",
            parameter=name,
        )
    return value


def bounded_int(
    arguments: Mapping[str, Any],
    name: str,
    default: int,
    minimum: int,
    maximum: int,
) -> int:
    """Read a numeric argument, truncate it to int and clamp it into range."""
    value = arguments.get(name)
    if value is None:
        return default

    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a number", parameter=name)
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            raise ValidationError(f"{name} must be a number", parameter=name) from None
    if not isinstance(value, (int, float)) or (isinstance(value, float) and not math.isfinite(value)):
        raise ValidationError(f"{name} must be a number", parameter=name)

    number = int(value)
    clamped = max(minimum, min(maximum, number))
    if clamped != number:
        logger.warning("%s=%d outside [%d, %d], clamped to %d", name, number, minimum, maximum, clamped)
    return clamped


# =============================================================================
# Identifier helpers
# =============================================================================
def strip_post_prefix(post_id: str) -> str:
    """Remove one leading "t3_" from a post id, if present."""
    if post_id.startswith(POST_PREFIX):
        return post_id[len(POST_PREFIX):]
    return post_id


def canonical_fullname(post_id: str) -> str:
    """Return the "t3_<id>" fullname Reddit's /api/info.json expects."""
    return POST_PREFIX + strip_post_prefix(post_id)


def normalize_subreddit(subreddit: str) -> str:
    """Accept "python", "r/python" or "/r/python/" and return "python"."""
    name = subreddit.strip().strip("/")
    if name.lower().startswith("r/"):
        name = name[2:]
    return name.strip("/")


# =============================================================================
# Per-tool extractors
# =============================================================================
def extract_search_args(arguments: Mapping[str, Any], config: RedditConfig) -> SearchArgs:
    """Validate and normalize reddit_search arguments.

    Args:
        arguments: Raw tool arguments (query, subreddit, sort, limit).
        config: Supplies the default sort/limit and the limit bounds.

    Returns:
        A SearchArgs ready for the fetcher.

    Raises:
        ValidationError: If query is missing/blank, sort is not allowed, or
            limit is not a number.
    """
    query = required_str(arguments, "query", "search query is required")

    subreddit = optional_str(arguments, "subreddit")
    if subreddit is not None:
        subreddit = normalize_subreddit(subreddit) or None

    return SearchArgs(
        query=query,
        subreddit=subreddit,
        sort=enum_str(arguments, "sort", SEARCH_SORTS, config.search_default_sort),
        limit=bounded_int(
            arguments, "limit",
            default=config.search_default_limit,
            minimum=config.search_limit_min,
            maximum=config.search_limit_max,
        ),
    )


def extract_post_id(arguments: Mapping[str, Any]) -> str:
    """Return the bare post id (no "t3_" prefix) from a tool call."""
    post_id = strip_post_prefix(required_str(arguments, "post_id"))
    if not post_id:
        raise ValidationError("post_id is required", parameter="post_id")
    return post_id


def extract_comments_args(arguments: Mapping[str, Any], config: RedditConfig) -> CommentsArgs:
    """Validate and normalize reddit_comments arguments."""
    return CommentsArgs(
        post_id=extract_post_id(arguments),
        sort=enum_str(arguments, "sort", COMMENT_SORTS, config.comments_default_sort),
        limit=bounded_int(
            arguments, "limit",
            default=config.comments_default_limit,
            minimum=config.comments_limit_min,
            maximum=config.comments_limit_max,
        ),
    )
