# =============================================================================
# main.py  -  Entry Point for the Reddit Research Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/reddit_agent.py), which spawns the
#      Reddit MCP tool server (tools/mcp_server.py) as a subprocess
#   2. Opens an in-memory session
#   3. Reads a question, lets the agent call reddit_search / reddit_post /
#      reddit_comments as it sees fit, and prints the final answer
#
# To run ONLY the tool server for another MCP host (Claude Desktop, an IDE,
# etc.), use:  python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must happen before the agent is created: LiteLlm reads the provider key
# (OPENROUTER_API_KEY, ...) from the environment when it initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.reddit_agent import create_agent

APP_NAME = "reddit_research"
USER_ID = "console_user"


async def run_agent():
    """Run the research assistant interactively until the user quits."""
    print("=" * 70)
    print("  REDDIT RESEARCH ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask a question about what people are saying on Reddit.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # The runner yields events as the agent works: text, tool calls and
        # tool results.  We show tool calls live and keep the last text part.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        call = part.function_call
                        print(f"  🔧 Calling tool: {call.name} {dict(call.args or {})}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
