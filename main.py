# =============================================================================
# main.py  -  Interactive Directory Assistant (demo client)
# =============================================================================
#
# HOW TO RUN:
#   pip install -e ".[agent]"
#   AGENTWEB_API_KEY=... OPENROUTER_API_KEY=... python main.py
#
# WHAT HAPPENS:
#   1. Creates the ADK agent (agent/directory_agent.py), which spawns the
#      AgentWeb MCP server (tools/mcp_server.py) over stdio
#   2. Opens an in-memory session
#   3. Sends each line you type to the agent
#   4. Prints every tool call as it happens, then the final answer
#
# The MCP server itself does not need this file; hosts such as Claude Desktop
# launch `agentweb-mcp` directly.
# =============================================================================

import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.directory_agent import create_agent
from agentweb.config import load_config
from agentweb.errors import ConfigError

APP_NAME = "agentweb_directory"
USER_ID = "demo_user"


async def run_agent(api_key: str, base_url: str) -> None:
    """Interactive loop: read a question, stream the agent's events, print the answer."""
    print("=" * 70)
    print("  AGENTWEB DIRECTORY ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent(api_key, base_url=base_url)

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about businesses anywhere (e.g. 'coffee shops in Lisbon').")
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

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

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
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    try:
        config = load_config(sys.argv[1:])
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    asyncio.run(run_agent(config.api_key, config.base_url))
