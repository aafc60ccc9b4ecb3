# =============================================================================
# agent/reddit_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers questions by calling the three
#   Reddit tools.  ADK handles orchestration; the LLM (any LiteLlm-supported
#   model, GPT-4o via OpenRouter by default) handles reasoning.
#
#   ┌─────────────────────────┐   stdio / MCP   ┌──────────────────────────┐
#   │  Google ADK Agent       │ ──────────────▶ │  FastMCP Server          │
#   │  (LiteLlm model +       │                 │  (tools/mcp_server.py)   │
#   │   research prompt)      │ ◀────────────── │  reddit_search / _post / │
#   └─────────────────────────┘   text results  │  _comments               │
#                                               └────────────┬─────────────┘
#                                                            │ HTTPS GET
#                                                            ▼
#                                                   www.reddit.com/*.json
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and talks to it over
#   stdin/stdout.  We launch it as a module ("-m tools.mcp_server") from the
#   project root so `core` and `tools` resolve as packages.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_research_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent(model: str | None = None) -> Agent:
    """Create the Reddit research agent.

    Args:
        model: LiteLlm model string.  Falls back to REDDIT_AGENT_MODEL, then
               to DEFAULT_MODEL.  LiteLlm reads the provider key (e.g.
               OPENROUTER_API_KEY) from the environment itself.

    Returns:
        A configured Google ADK Agent with the Reddit MCP tools attached.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    # "uv run" makes the subprocess use the project's .venv, where fastmcp
    # and the core/ package are installed.
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    model_name = model or os.environ.get("REDDIT_AGENT_MODEL") or DEFAULT_MODEL

    return Agent(
        name="reddit_research_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_research_assistant_prompt(),
        tools=[mcp_tools],
    )
