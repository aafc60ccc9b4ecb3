# =============================================================================
# core/client.py  -  HTTP Fetcher for the Reddit JSON API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues exactly ONE GET request per call against the configured base URL,
#   checks for HTTP 200, and decodes the body into a tagged JsonArray or
#   JsonObject.  No retries, no caching.
#
# WHY THE CUSTOM USER-AGENT?
#   Reddit aggressively throttles or blocks requests that use a generic
#   library User-Agent.  An identifying one ("mcp-reddit-tool/1.0") keeps the
#   public .json endpoints usable without authentication.
#
# TIMEOUT:
#   Every request carries config.timeout (default 10s).  A stalled upstream
#   becomes a FetchError instead of hanging the tool call forever.
# =============================================================================

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Mapping

from core.config import RedditConfig
from core.errors import DecodeError, FetchError
from core.models import FetchResult, JsonArray, JsonObject

logger = logging.getLogger(__name__)


def build_url(base_url: str, path: str, params: Mapping[str, str] | None = None) -> str:
    """Join base URL, path and (when non-empty) the URL-encoded query string."""
    url = base_url.rstrip("/") + path
    if params:
        url += "?" + urllib.parse.urlencode(params)
    return url


def decode_body(body: bytes) -> FetchResult:
    """Parse a response body and tag its root as array or object.

    Raises:
        DecodeError: If the body is not JSON, or its root is a scalar.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"failed to parse JSON response: {e}") from e

    if isinstance(data, list):
        return JsonArray(items=data)
    if isinstance(data, dict):
        return JsonObject(fields=data)
    raise DecodeError(
        f"failed to parse JSON response: expected an array or object, got {type(data).__name__}"
    )


def fetch(path: str, params: Mapping[str, str] | None, config: RedditConfig) -> FetchResult:
    """GET `path` from the Reddit API and return the decoded JSON root.

    Args:
        path: Endpoint path beginning with "/", e.g. "/search.json".
        params: Query parameters; omitted from the URL when empty.
        config: Supplies base_url, user_agent and timeout.

    Returns:
        JsonArray for array roots (comments endpoint), JsonObject otherwise.

    Raises:
        FetchError: On transport failure or any status other than 200.
        DecodeError: If the body is not a JSON array or object.
    """
    url = build_url(config.base_url, path, params)
    req = urllib.request.Request(url, headers={"User-Agent": config.user_agent}, method="GET")
    logger.debug("GET %s", url)

    try:
        with urllib.request.urlopen(req, timeout=config.timeout) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as e:
        # urllib raises for 4xx/5xx; surface the code like any other non-200.
        raise FetchError(f"API returned error status: {e.code}", status_code=e.code) from e
    except urllib.error.URLError as e:
        raise FetchError(f"request failed: {e.reason}") from e
    except (TimeoutError, OSError, http.client.HTTPException) as e:
        raise FetchError(f"request failed: {e}") from e

    if status != 200:
        raise FetchError(f"API returned error status: {status}", status_code=status)

    return decode_body(body)
