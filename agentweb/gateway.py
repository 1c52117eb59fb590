# =============================================================================
# agentweb/gateway.py  -  Tool Gateway (list_tools / call_tool)
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. call_tool(name, arguments) looks the name up in the handler table
#      (unknown name -> error result, no HTTP)
#   2. The handler builds its parameter struct (SearchQuery, BusinessLookup);
#      InvalidArguments -> error result, no HTTP
#   3. AgentWebClient.get() performs the single GET and returns
#      ApiSuccess | ApiFailure
#   4. _to_result() maps that onto a ToolResult
#
# Every failure path ends up as ToolResult.error(...).  Nothing escapes
# call_tool as an exception, so the MCP layer only has to look at is_error.
# =============================================================================

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from agentweb.client import AgentWebClient
from agentweb.config import AgentWebConfig
from agentweb.descriptors import AGENTWEB_HEALTH, GET_BUSINESS, SEARCH_BUSINESSES, TOOL_DESCRIPTORS
from agentweb.errors import InvalidArguments
from agentweb.models import ApiFailure, ApiResponse, BusinessLookup, SearchQuery, ToolDescriptor, ToolResult

logger = logging.getLogger(__name__)


class ToolGateway:
    """Maps MCP tool calls onto the AgentWeb REST endpoints."""

    def __init__(self, config: AgentWebConfig, client: AgentWebClient | None = None):
        self.client = client or AgentWebClient(config)
        self._handlers = {
            SEARCH_BUSINESSES.name: self._search_businesses,
            GET_BUSINESS.name: self._get_business,
            AGENTWEB_HEALTH.name: self._health,
        }

    def list_tools(self) -> list[ToolDescriptor]:
        return list(TOOL_DESCRIPTORS)

    def knows(self, name: str) -> bool:
        return name in self._handlers

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Run one tool call and wrap the outcome.

        Args:
            name: Registered tool name.
            arguments: The raw argument mapping from the client (may be None).

        Returns:
            A ToolResult: pretty-printed JSON on success, or an
            "Error: ..." text with is_error set.
        """
        handler = self._handlers.get(name)
        if handler is None:
            return ToolResult.error(f"Unknown tool: {name}")

        try:
            response = await handler(arguments or {})
        except InvalidArguments as exc:
            return ToolResult.error(str(exc))

        return self._to_result(response)

    # -------------------------------------------------------------------------
    # Handlers: build the parameter struct, then issue the request
    # -------------------------------------------------------------------------
    async def _search_businesses(self, arguments: Mapping[str, Any]) -> ApiResponse:
        query = SearchQuery.from_arguments(arguments)
        ignored = query.ignored_keys(arguments)
        if ignored:
            logger.info("search_businesses: ignoring unsupported arguments %s", ignored)
        return await self.client.get("/v1/search", query.to_params())

    async def _get_business(self, arguments: Mapping[str, Any]) -> ApiResponse:
        lookup = BusinessLookup.from_arguments(arguments)
        try:
            path = f"/v1/business/{quote(lookup.id, safe='')}"
        except UnicodeEncodeError:
            raise InvalidArguments("Business ID must be valid Unicode text") from None
        return await self.client.get(path)

    async def _health(self, arguments: Mapping[str, Any]) -> ApiResponse:
        return await self.client.get("/v1/health")

    @staticmethod
    def _to_result(response: ApiResponse) -> ToolResult:
        if isinstance(response, ApiFailure):
            return ToolResult.error(response.message)
        return ToolResult.from_payload(response.data)
