# =============================================================================
# agent/__init__.py
# =============================================================================
# Demo Google ADK agent that uses the AgentWeb MCP server as its only tool
# source.  Nothing in agentweb/ or tools/ imports this package; it is
# installed with the optional "agent" extra (google-adk, litellm).
#
#   agent/prompt.py           system prompt (today's date injected)
#   agent/directory_agent.py  create_agent(): LLM + MCPToolset over stdio
# =============================================================================
