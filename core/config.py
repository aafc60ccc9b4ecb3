# =============================================================================
# core/config.py  -  Runtime Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects every fixed value the tools depend on (API host, User-Agent,
#   timeout, tool defaults and bounds) into ONE immutable RedditConfig that
#   is built once at startup and handed to the operations in core/reddit.py.
#
# WHERE VALUES COME FROM:
#   Environment variables, optionally loaded from a .env file by the entry
#   point (tools/mcp_server.py or main.py) via python-dotenv.
#
#     REDDIT_BASE_URL     → base_url     (default https://www.reddit.com)
#     REDDIT_USER_AGENT   → user_agent   (default mcp-reddit-tool/1.0)
#     REDDIT_TIMEOUT      → timeout      (default 10 seconds)
#
#   Everything else (tool defaults, limit bounds) is fixed in code because it
#   is part of the tool contract that the MCP schema advertises.
# =============================================================================

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.reddit.com"
DEFAULT_USER_AGENT = "mcp-reddit-tool/1.0"
DEFAULT_TIMEOUT = 10.0

SEARCH_SORTS = ("relevance", "hot", "new", "top")
COMMENT_SORTS = ("top", "new", "controversial", "old", "qa")


@dataclass(frozen=True)
class RedditConfig:
    """Immutable settings shared by every tool call."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT       # Seconds per request
    source_host: str = "reddit.com"        # URLs on this host are self-links

    # --- reddit_search ---
    search_default_sort: str = "relevance"
    search_default_limit: int = 10
    search_limit_min: int = 1
    search_limit_max: int = 25

    # --- reddit_comments ---
    comments_default_sort: str = "top"
    comments_default_limit: int = 25
    comments_limit_min: int = 1
    comments_limit_max: int = 100


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid REDDIT_TIMEOUT=%r, using %.0fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("Ignoring non-positive REDDIT_TIMEOUT=%r, using %.0fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def load_config(environ: dict[str, str] | None = None) -> RedditConfig:
    """Build a RedditConfig from environment variables.

    Args:
        environ: Mapping to read from.  Defaults to os.environ; tests pass a
                 plain dict so they never depend on the real environment.

    Returns:
        A frozen RedditConfig.
    """
    env = os.environ if environ is None else environ

    base_url = (env.get("REDDIT_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
    user_agent = env.get("REDDIT_USER_AGENT") or DEFAULT_USER_AGENT

    return RedditConfig(
        base_url=base_url,
        user_agent=user_agent,
        timeout=_read_timeout(env.get("REDDIT_TIMEOUT")),
    )
