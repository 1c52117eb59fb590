# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer.  tools/mcp_server.py is the only module that imports FastMCP;
# it registers the ToolGateway's descriptors as FastMCP tools and runs the
# stdio transport.
#
# WHAT THIS LAYER DOES NOT DO:
#   - build URLs or talk HTTP (agentweb/client.py)
#   - validate tool arguments (agentweb/models.py parameter structs)
#   - decide what counts as an error (agentweb/gateway.py)
# =============================================================================
