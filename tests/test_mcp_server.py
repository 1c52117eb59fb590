"""Tests for the FastMCP wiring and the agentweb-mcp entry point.

Tool calls go through an in-memory fastmcp.Client, so the real MCP request
handlers run; only HTTP is stubbed.
"""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fastmcp import Client

from agentweb.client import AgentWebClient
from agentweb.descriptors import TOOL_DESCRIPTORS
from agentweb.gateway import ToolGateway
from conftest import TEST_KEY, RecordingTransport
from tools import mcp_server
from tools.mcp_server import GatewayTool, build_server, main


@pytest.fixture
def server(config, transport):
    gateway = ToolGateway(config, client=AgentWebClient(config, transport=transport))
    return build_server(config, gateway=gateway)


@pytest.fixture
def no_dotenv():
    with patch.object(mcp_server, "load_dotenv"):
        yield


# ============================================================================
# Protocol surface
# ============================================================================

@pytest.mark.asyncio
async def test_list_tools_advertises_descriptor_schemas(server):
    async with Client(server) as client:
        tools = await client.list_tools()

    by_name = {tool.name: tool for tool in tools}
    assert set(by_name) == {"search_businesses", "get_business", "agentweb_health"}
    for descriptor in TOOL_DESCRIPTORS:
        advertised = by_name[descriptor.name]
        assert advertised.description == descriptor.description
        assert advertised.inputSchema["type"] == "object"
        assert advertised.inputSchema.get("required", []) == descriptor.required


@pytest.mark.asyncio
async def test_registered_tools_share_the_gateway(config, transport):
    gateway = ToolGateway(config, client=AgentWebClient(config, transport=transport))
    tools = await build_server(config, gateway=gateway).get_tools()

    assert set(tools) == {d.name for d in TOOL_DESCRIPTORS}
    for tool in tools.values():
        assert isinstance(tool, GatewayTool)
        assert tool.gateway is gateway
        assert "gateway" not in tool.model_dump()


@pytest.mark.asyncio
async def test_call_tool_success_returns_single_text_block(config):
    body = {"id": "abc123", "name": "Blue Bottle Coffee"}
    transport = RecordingTransport(body=body)
    gateway = ToolGateway(config, client=AgentWebClient(config, transport=transport))

    async with Client(build_server(config, gateway=gateway)) as client:
        result = await client.call_tool_mcp("get_business", {"id": "abc123"})

    assert not result.isError
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert json.loads(result.content[0].text) == body
    assert transport.last.url.params["api_key"] == TEST_KEY


@pytest.mark.asyncio
async def test_call_tool_validation_error_is_tool_level(server, transport):
    async with Client(server) as client:
        result = await client.call_tool_mcp("get_business", {})

    assert result.isError
    assert "id" in result.content[0].text.lower()
    assert transport.requests == []


@pytest.mark.asyncio
async def test_call_tool_upstream_error_is_tool_level(config):
    transport = RecordingTransport(status_code=404, text="not found")
    gateway = ToolGateway(config, client=AgentWebClient(config, transport=transport))

    async with Client(build_server(config, gateway=gateway)) as client:
        result = await client.call_tool_mcp("get_business", {"id": "nope"})

    assert result.isError
    assert "404" in result.content[0].text
    assert "not found" in result.content[0].text


@pytest.mark.asyncio
async def test_call_unknown_tool_keeps_error_prefix(server, transport):
    async with Client(server) as client:
        result = await client.call_tool_mcp("foo", {})

    assert result.isError
    assert result.content[0].text == "Error: Unknown tool: foo"
    assert transport.requests == []


@pytest.mark.asyncio
async def test_call_tool_network_error_is_tool_level(config):
    transport = RecordingTransport(exc=httpx.ConnectError("connection refused"))
    gateway = ToolGateway(config, client=AgentWebClient(config, transport=transport))

    async with Client(build_server(config, gateway=gateway)) as client:
        result = await client.call_tool_mcp("agentweb_health", {})

    assert result.isError
    assert result.content[0].text == "Error: connection refused"


@pytest.mark.asyncio
async def test_call_tool_oversized_query_keeps_error_prefix(server):
    async with Client(server) as client:
        result = await client.call_tool_mcp("search_businesses", {"q": "x" * 70000})

    assert result.isError
    assert result.content[0].text.startswith("Error: ")


# ============================================================================
# Entry point
# ============================================================================

def test_main_without_api_key_exits_nonzero_and_never_serves(monkeypatch, capsys, no_dotenv):
    monkeypatch.delenv("AGENTWEB_API_KEY", raising=False)

    with patch.object(mcp_server, "build_server") as build:
        exit_code = main([])

    assert exit_code != 0
    build.assert_not_called()
    assert "AGENTWEB_API_KEY" in capsys.readouterr().err


def test_main_runs_stdio_transport(monkeypatch, no_dotenv):
    monkeypatch.delenv("AGENTWEB_API_KEY", raising=False)
    server = MagicMock()

    with patch.object(mcp_server, "build_server", return_value=server) as build:
        exit_code = main(["cli-key"])

    assert exit_code == 0
    assert build.call_args.args[0].api_key == "cli-key"
    server.run.assert_called_once_with(transport="stdio")


def test_main_interrupt_exits_cleanly(monkeypatch, no_dotenv):
    monkeypatch.setenv("AGENTWEB_API_KEY", "env-key")
    server = MagicMock()
    server.run.side_effect = KeyboardInterrupt

    with patch.object(mcp_server, "build_server", return_value=server):
        assert main([]) == 0


def test_main_fatal_error_exits_with_one(monkeypatch, capsys, no_dotenv):
    monkeypatch.setenv("AGENTWEB_API_KEY", "env-key")
    server = MagicMock()
    server.run.side_effect = RuntimeError("stdin closed")

    with patch.object(mcp_server, "build_server", return_value=server):
        assert main([]) == 1

    assert "Fatal error: stdin closed" in capsys.readouterr().err
