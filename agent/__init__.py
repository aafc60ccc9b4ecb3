# =============================================================================
# agent/__init__.py
# =============================================================================
# Google ADK agent that consumes the Reddit MCP tools.
#
# The agent decides WHICH tool to call and WHEN (search, then read posts,
# then read comments) and turns the tool text into an answer with sources.
# It knows nothing about Reddit's JSON; that is core/'s job.
# =============================================================================
