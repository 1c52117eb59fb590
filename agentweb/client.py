# =============================================================================
# agentweb/client.py  -  HTTP Client for the AgentWeb Directory API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues exactly one authenticated GET per call and reports the outcome as
#   an ApiSuccess (parsed JSON) or an ApiFailure (message + optional status).
#   It never raises for HTTP, network, URL-building or decoding problems.
#
# AUTHENTICATION:
#   AgentWeb takes the key as a query parameter, so api_key is appended LAST
#   to every query string.  Log lines show the path and the caller's params
#   only; the key never reaches the log.
#
# CONNECTIONS:
#   A fresh httpx.AsyncClient per request: no pool, no keep-alive between
#   tool calls, nothing to close at shutdown.  Tests pass an
#   httpx.MockTransport through `transport` to stay offline.
# =============================================================================

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from agentweb.config import AgentWebConfig
from agentweb.models import ApiFailure, ApiResponse, ApiSuccess

logger = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Render a query value the way the API expects it.

    Booleans go out lowercase and whole floats lose their ".0", so
    limit=10.0 is sent as "10".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: Mapping[str, Any] | None, api_key: str) -> list[tuple[str, str]]:
    """Non-null params (stringified, in order) followed by api_key."""
    query = [
        (key, stringify(value))
        for key, value in (params or {}).items()
        if value is not None
    ]
    query.append(("api_key", api_key))
    return query


class AgentWebClient:
    """Thin async wrapper around GET {base_url}{endpoint}."""

    def __init__(self, config: AgentWebConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> ApiResponse:
        query = build_query(params, self.config.api_key)
        logger.debug("GET %s params=%s", endpoint, query[:-1])

        try:
            async with httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(endpoint, params=query)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("GET %s failed: %s", endpoint, message)
            return ApiFailure(message=message)

        if not response.is_success:
            logger.warning("GET %s returned HTTP %s", endpoint, response.status_code)
            return ApiFailure(
                message=f"AgentWeb API error ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return ApiFailure(
                message=f"AgentWeb API returned invalid JSON: {exc}",
                status_code=response.status_code,
            )

        return ApiSuccess(data=data)
