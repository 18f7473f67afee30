"""Tests for the MCP server handlers (no stdio session is opened)."""

import asyncio
import json

import pytest
from mcp import types

from figma_mcp.infrastructure.errors import UnknownTool
from figma_mcp.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
from figma_mcp.server.stdio import SERVER_NAME, build_server, handle_call, to_mcp_tools


def call_through_server(server, name, arguments):
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    handler = server.request_handlers[types.CallToolRequest]
    return asyncio.run(handler(request)).root


@pytest.fixture
def server(manager, dispatcher):
    return build_server(ToolManagerCatalogAdapter(manager), dispatcher)


def test_tools_are_listed_with_input_schemas(manager):
    tools = to_mcp_tools(ToolManagerCatalogAdapter(manager))
    assert len(tools) == 23
    assert all(isinstance(t, types.Tool) for t in tools)
    me, get_file = tools[0], tools[1]
    assert me.name == "figma_get_me"
    assert me.inputSchema == {"type": "object", "properties": {}, "required": []}
    assert get_file.inputSchema["required"] == ["fileKey"]


def test_call_returns_payload_text_and_envelope(dispatcher, transport):
    transport.payload = {"id": "user-1", "handle": "designer"}
    content, structured = asyncio.run(handle_call(dispatcher, "figma_get_me", {}))
    assert len(content) == 1
    assert content[0].type == "text"
    assert json.loads(content[0].text) == {"id": "user-1", "handle": "designer"}
    assert structured == {"result": content[0].text, "type": "json"}


def test_call_errors_propagate(dispatcher):
    with pytest.raises(UnknownTool):
        asyncio.run(handle_call(dispatcher, "nonexistent_tool", {}))


def test_build_server(server):
    assert server.name == SERVER_NAME
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def test_server_call_success(server, transport):
    transport.payload = {"name": "Design"}
    result = call_through_server(server, "figma_get_file", {"fileKey": "abc"})
    assert not result.isError
    assert json.loads(result.content[0].text) == {"name": "Design"}
    assert result.structuredContent == {"result": '{"name":"Design"}', "type": "json"}


def test_server_reports_unknown_tool_as_error_text(server, transport):
    result = call_through_server(server, "nonexistent_tool", {})
    assert result.isError
    assert len(result.content) == 1
    assert result.content[0].text == "Unknown tool: nonexistent_tool"
    assert transport.requests == []


def test_server_keeps_dispatcher_violation_list(server, transport):
    result = call_through_server(server, "figma_get_images", {"fileKey": 42, "format": "gif"})
    assert result.isError
    text = result.content[0].text
    assert text.startswith("Invalid arguments: fileKey: Expected string, received number, ids: Required, ")
    assert "format: Invalid enum value. Expected 'jpg' | 'png' | 'svg' | 'pdf', received 'gif'" in text
    assert transport.requests == []
