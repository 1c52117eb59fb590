# =============================================================================
# agent/directory_agent.py  -  Google ADK Agent Wired to the AgentWeb Server
# =============================================================================
#
#   ┌────────────────────────────┐   stdio   ┌──────────────────────────┐
#   │  ADK Agent (LiteLlm model) │ ────────▶ │  tools/mcp_server.py     │
#   │  + directory prompt        │ ◀──────── │  (FastMCP, 3 tools)      │
#   └────────────────────────────┘           └────────────┬─────────────┘
#                                                         │ HTTPS GET
#                                                         ▼
#                                              api.agentweb.live/v1/...
#
# MCP CONNECTION:
#   ADK spawns the server as a subprocess with the current interpreter
#   (`python -m tools.mcp_server`) from the project root.  The API key is
#   handed over through the child's environment, never on the command line.
#
# MODEL:
#   AGENT_MODEL picks the LiteLlm model string; the default routes GPT-4o
#   through OpenRouter (LiteLlm reads OPENROUTER_API_KEY itself).
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_directory_assistant_prompt
from agentweb.config import API_KEY_ENV, BASE_URL_ENV

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters(api_key: str, base_url: str | None = None) -> StdioServerParameters:
    """How ADK should launch the AgentWeb MCP server."""
    env = {API_KEY_ENV: api_key}
    if base_url:
        env[BASE_URL_ENV] = base_url
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        env=env,
        cwd=PROJECT_ROOT,
    )


def create_agent(api_key: str, model: str | None = None, base_url: str | None = None) -> Agent:
    """Create the directory assistant agent.

    Args:
        api_key: AgentWeb API key passed to the spawned MCP server.
        model: LiteLlm model string (defaults to AGENT_MODEL or GPT-4o via OpenRouter).
        base_url: Optional AgentWeb base URL override for the server.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters(api_key, base_url))

    return Agent(
        name="agentweb_directory_assistant",
        model=LiteLlm(model=model or os.environ.get("AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_directory_assistant_prompt(),
        tools=[mcp_tools],
    )
