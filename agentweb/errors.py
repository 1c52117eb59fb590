"""Exception types raised inside the gateway and at startup."""


class AgentWebError(Exception):
    """Base class for all AgentWeb MCP errors."""


class ConfigError(AgentWebError):
    """Startup configuration is missing or malformed.  Fatal."""


class InvalidArguments(AgentWebError):
    """A tool was called with arguments that fail local validation."""
