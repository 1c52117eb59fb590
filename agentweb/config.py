# =============================================================================
# agentweb/config.py  -  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Resolves the API key (and a few optional knobs) ONCE at startup and
#   freezes them into an AgentWebConfig value.  The gateway receives that
#   value in its constructor; nothing downstream reads os.environ.
#
# RESOLUTION ORDER FOR THE API KEY:
#   1. AGENTWEB_API_KEY environment variable (a .env file works too, because
#      the entry point calls load_dotenv() before we get here)
#   2. The first command-line argument:  agentweb-mcp <your_key>
#
# OPTIONAL VARIABLES:
#   AGENTWEB_BASE_URL   Override the API host (staging, local mock server)
#   AGENTWEB_TIMEOUT    Per-request timeout in seconds; unset = no timeout
# =============================================================================

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from agentweb.errors import ConfigError

API_BASE_URL = "https://api.agentweb.live"
API_KEY_ENV = "AGENTWEB_API_KEY"
BASE_URL_ENV = "AGENTWEB_BASE_URL"
TIMEOUT_ENV = "AGENTWEB_TIMEOUT"

SIGNUP_URL = "https://agentweb.live/#signup"

USAGE = f"""Error: {API_KEY_ENV} environment variable is required
Get your API key at: {SIGNUP_URL}

Usage: {API_KEY_ENV}=your_key agentweb-mcp
   or: agentweb-mcp your_key"""


@dataclass(frozen=True)
class AgentWebConfig:
    """Everything the gateway needs to reach the AgentWeb API."""

    api_key: str
    base_url: str = API_BASE_URL
    timeout: float | None = None       # None = wait as long as the socket does

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("API key must be a non-empty string")

    def __repr__(self) -> str:
        # Keep the key out of tracebacks and log lines.
        return (
            f"AgentWebConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


def load_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AgentWebConfig:
    """Build the process configuration from the environment and argv.

    Args:
        argv: Command-line arguments WITHOUT the program name.  The first
              positional argument is used as the API key when the
              environment does not provide one.
        environ: Environment mapping (defaults to os.environ).

    Raises:
        ConfigError: if no API key can be found or an optional variable
                     is malformed.
    """
    env = os.environ if environ is None else environ
    args = list(argv or [])

    api_key = env.get(API_KEY_ENV) or (args[0] if args else "")
    if not api_key.strip():
        raise ConfigError(USAGE)

    base_url = (env.get(BASE_URL_ENV) or API_BASE_URL).rstrip("/")

    return AgentWebConfig(
        api_key=api_key.strip(),
        base_url=base_url,
        timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
    )
