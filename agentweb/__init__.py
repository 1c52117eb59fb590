# =============================================================================
# agentweb/__init__.py
# =============================================================================
# This package contains the AgentWeb tool gateway: configuration, the three
# tool descriptors, the HTTP client and the dispatcher that turns a tool call
# into one GET against the AgentWeb directory API.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  The gateway speaks
#   plain dataclasses (ToolDescriptor in, ToolResult out); tools/mcp_server.py
#   is the only place that knows about the MCP protocol.
# =============================================================================

from agentweb.config import AgentWebConfig, load_config
from agentweb.errors import AgentWebError, ConfigError, InvalidArguments
from agentweb.gateway import ToolGateway
from agentweb.models import ToolDescriptor, ToolResult

__all__ = [
    "AgentWebConfig",
    "AgentWebError",
    "ConfigError",
    "InvalidArguments",
    "ToolDescriptor",
    "ToolGateway",
    "ToolResult",
    "load_config",
]
