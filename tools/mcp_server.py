# =============================================================================
# tools/mcp_server.py  -  FastMCP Server for the AgentWeb Directory
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wires the ToolGateway (agentweb/gateway.py) into a FastMCP server and
#   runs it over stdio.  Each of the gateway's three descriptors becomes one
#   FastMCP tool whose input schema is taken verbatim from the descriptor.
#
# HOW IT WORKS (the flow):
#   1. The MCP host (Claude Desktop, an ADK agent, ...) calls a tool by name
#   2. FastMCP routes the call to GatewayTool.run()
#   3. run() hands name + arguments to ToolGateway.call_tool()
#   4. The gateway does one GET against api.agentweb.live and returns a
#      ToolResult: pretty-printed JSON, or "Error: ..." with is_error set
#   5. Errors are raised as ToolError; FastMCP turns that into an isError
#      result carrying our text unchanged, so the host sees a failed TOOL,
#      never a failed protocol exchange
#
# RUNNING THIS SERVER:
#     AGENTWEB_API_KEY=your_key agentweb-mcp
#     agentweb-mcp your_key
#     python -m tools.mcp_server your_key
# =============================================================================

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent
from pydantic import ConfigDict, Field

from agentweb.config import AgentWebConfig, load_config
from agentweb.errors import ConfigError
from agentweb.gateway import ToolGateway
from agentweb.models import ToolDescriptor, ToolResult

SERVER_NAME = "agentweb-mcp"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# Everything goes to STDERR: stdout is the MCP transport, and a stray log
# line there would corrupt the JSON-RPC stream.
#
#   CYAN   incoming tool calls (name + arguments)
#   YELLOW status / lifecycle messages
#   GREEN  tool responses (truncated)
#   RED    tool-level errors
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

_RESPONSE_PREVIEW_CHARS = 300

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or os.environ.get("AGENTWEB_LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log a lifecycle/status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: ToolResult) -> ToolResult:
    """Log the start of the tool response (GREEN, or RED for errors), then return it."""
    preview = " ".join(result.text.split())
    if len(preview) > _RESPONSE_PREVIEW_CHARS:
        preview = preview[:_RESPONSE_PREVIEW_CHARS] + "…"
    color = _RED if result.is_error else _GREEN
    logger.info(f"{color}  ← {tool_name} response: {preview}{_RESET}")
    return result


# =============================================================================
# GatewayTool - one FastMCP tool backed by a gateway descriptor
# =============================================================================
# FastMCP normally derives the input schema from a function signature.  Here
# the schema already exists (agentweb/descriptors.py), so we subclass Tool
# and set `parameters` directly.  That keeps list_tools on the wire identical
# to ToolGateway.list_tools().
# =============================================================================
class GatewayTool(Tool):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    gateway: ToolGateway = Field(exclude=True, repr=False)

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, gateway: ToolGateway) -> "GatewayTool":
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema,
            gateway=gateway,
        )

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        _log_request(self.name, arguments or {})
        result = _log_response(self.name, await self.gateway.call_tool(self.name, arguments))
        if result.is_error:
            raise ToolError(result.text)
        return MCPToolResult(content=[TextContent(type="text", text=result.text)])


# =============================================================================
# UnknownToolMiddleware - keep the "Error: " envelope for unregistered names
# =============================================================================
# FastMCP answers a call to an unregistered tool with its own message.  This
# middleware runs before the tool lookup and lets the gateway produce the
# "Error: Unknown tool: <name>" result instead.
# =============================================================================
class UnknownToolMiddleware(Middleware):
    def __init__(self, gateway: ToolGateway):
        self.gateway = gateway

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if self.gateway.knows(name):
            return await call_next(context)
        _log_request(name, context.message.arguments or {})
        result = _log_response(name, await self.gateway.call_tool(name, context.message.arguments))
        raise ToolError(result.text)


def build_server(config: AgentWebConfig, gateway: ToolGateway | None = None) -> FastMCP:
    """Create the FastMCP server with all gateway tools registered.

    Args:
        config: Resolved process configuration.
        gateway: Pre-built gateway (tests inject one with a mock transport).
    """
    gateway = gateway or ToolGateway(config)
    mcp = FastMCP(
        SERVER_NAME,
        version=SERVER_VERSION,
        instructions=(
            "AgentWeb business directory. Use search_businesses to find "
            "businesses, get_business for the full record of one result, and "
            "agentweb_health to check that the API is reachable."
        ),
        middleware=[UnknownToolMiddleware(gateway)],
    )
    for descriptor in gateway.list_tools():
        mcp.add_tool(GatewayTool.from_descriptor(descriptor, gateway))
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# Exit codes:
#   0  clean shutdown, including Ctrl+C / SIGINT
#   1  missing API key, bad configuration, or any fatal startup error
# =============================================================================
def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    configure_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        config = load_config(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        server = build_server(config)
        _log_status("AgentWeb MCP Server running on stdio")
        server.run(transport="stdio")
    except KeyboardInterrupt:
        _log_status("Interrupted, shutting down")
        return 0
    except Exception as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        logger.debug("Fatal error", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
