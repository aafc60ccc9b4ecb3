# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all Reddit tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the three MCP tools the agent (or any MCP host) can call.  Each
#   tool is a thin wrapper around a core/reddit.py operation: it logs the
#   call, runs the operation, and turns core errors into MCP error results.
#
# HOW IT WORKS (the flow):
#   1. The host calls a tool by name via MCP (e.g., "reddit_search")
#   2. FastMCP validates the arguments against the schema built from the
#      function signature below and routes the call here
#   3. The function hands the arguments to core/ (extract → fetch → format)
#   4. Success → the formatted text goes back as the tool result
#      Failure → ToolError, which FastMCP sends as an error result
#
# ERROR RESULTS:
#   Callers tell success from failure by the result's isError flag, never by
#   parsing text.  The error text itself is one of:
#     - the validation message verbatim   ("search query is required")
#     - "Reddit API error: <detail>"      (transport / non-200 / bad JSON)
#     - "Failed to format ...: <detail>"  (unexpected response shape)
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server   (or the reddit-mcp script)
#     b) Spawned by the ADK agent over stdio (agent/reddit_agent.py)
# =============================================================================

import logging
import os
import sys
from typing import Annotated, Any, Callable, Literal, Mapping

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.config import RedditConfig, load_config
from core.errors import FetchError, FormatError, ValidationError
from core.reddit import get_comments, get_post_details, search_posts

# .env must be loaded before the config is read.
load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its host over STDOUT.
# Anything we printed to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - YELLOW for intermediate status
#     - GREEN for successful responses
#     - RED for error results
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"


def _read_log_level(raw: str | None) -> int:
    """Map REDDIT_TOOL_LOG_LEVEL to a logging level, falling back to INFO."""
    level = logging.getLevelName((raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=_read_log_level(os.environ.get("REDDIT_TOOL_LOG_LEVEL")),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a short summary of the response in GREEN, then return it."""
    first_line = text.splitlines()[0] if text else ""
    logging.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {first_line}{_RESET}")
    return text


def _log_error(tool_name: str, message: str) -> None:
    logging.warning(f"{_RED}  ✗ {tool_name} error: {message}{_RESET}")


# =============================================================================
# Server instance and configuration
# =============================================================================
# CONFIG is built once at startup and never mutated (RedditConfig is frozen).
CONFIG: RedditConfig = load_config()

mcp = FastMCP(
    "reddit-api-tool",
    instructions=(
        "Read-only access to public Reddit content: search posts, "
        "look up a post by id, and read its top-level comments."
    ),
)


def _run_tool(
    tool_name: str,
    operation: Callable[[Mapping[str, Any], RedditConfig], str],
    format_failure: str,
    **arguments: Any,
) -> str:
    """Run one core operation and map its errors onto MCP error results.

    Args:
        tool_name: Name used in log lines.
        operation: One of the core/reddit.py functions.
        format_failure: Prefix for FormatError messages,
                        e.g. "Failed to format results".
        **arguments: The tool arguments exactly as received.

    Returns:
        The formatted text on success.

    Raises:
        ToolError: For every RedditToolError; FastMCP turns it into an
            error result (isError=True) instead of crashing the server.
    """
    _log_request(tool_name, **arguments)
    try:
        text = operation(arguments, CONFIG)
    except ValidationError as e:
        message = str(e)
    except FetchError as e:
        message = f"Reddit API error: {e}"
    except FormatError as e:
        message = f"{format_failure}: {e}"
    else:
        return _log_response(tool_name, text)

    _log_error(tool_name, message)
    raise ToolError(message)


# =============================================================================
# TOOL 1: reddit_search
# =============================================================================
# The docstring becomes the tool description the LLM reads, so it says what
# comes back and how to use the ids in it.
# =============================================================================
def reddit_search(
    query: Annotated[str, Field(description="Search query terms")],
    subreddit: Annotated[
        str | None,
        Field(description="Optional subreddit to search within (without the 'r/' prefix)"),
    ] = None,
    sort: Annotated[
        Literal["relevance", "hot", "new", "top"],
        Field(description="Sort method for results"),
    ] = "relevance",
    limit: Annotated[
        float,
        Field(
            description="Maximum number of results to return (1-25)",
            json_schema_extra={"minimum": 1, "maximum": 25},
        ),
    ] = 10,
) -> str:
    """Search Reddit for posts matching a query.

    Returns a numbered list of posts with title, author, score and post id.
    Pass a post id to reddit_post or reddit_comments to drill down.
    """
    if subreddit:
        _log_status(f"Restricting search to r/{subreddit}")
    return _run_tool(
        "reddit_search", search_posts, "Failed to format results",
        query=query, subreddit=subreddit, sort=sort, limit=limit,
    )


# =============================================================================
# TOOL 2: reddit_post
# =============================================================================
def reddit_post(
    post_id: Annotated[str, Field(description="Reddit post ID (with or without prefix)")],
) -> str:
    """Get details for a specific Reddit post.

    Returns title, author, score with upvote percentage, comment count,
    creation time (UTC), the body text for text posts, and the link for
    posts that point outside Reddit.
    """
    return _run_tool(
        "reddit_post", get_post_details, "Failed to format post details",
        post_id=post_id,
    )


# =============================================================================
# TOOL 3: reddit_comments
# =============================================================================
def reddit_comments(
    post_id: Annotated[str, Field(description="Reddit post ID (with or without prefix)")],
    limit: Annotated[
        float,
        Field(
            description="Maximum number of comments to return (1-100)",
            json_schema_extra={"minimum": 1, "maximum": 100},
        ),
    ] = 25,
    sort: Annotated[
        Literal["top", "new", "controversial", "old", "qa"],
        Field(description="Sort method for comments"),
    ] = "top",
) -> str:
    """Get comments for a specific Reddit post.

    Returns the top-level comments only (no nested replies), each with
    author, score and body text.
    """
    return _run_tool(
        "reddit_comments", get_comments, "Failed to format comments",
        post_id=post_id, limit=limit, sort=sort,
    )


# Registered explicitly so the plain functions above stay directly callable.
mcp.tool(name="reddit_search")(reddit_search)
mcp.tool(name="reddit_post")(reddit_post)
mcp.tool(name="reddit_comments")(reddit_comments)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Run the server over stdio (the default MCP transport)."""
    logging.info(f"Starting reddit-api-tool against {CONFIG.base_url}")
    mcp.run()


if __name__ == "__main__":
    main()
