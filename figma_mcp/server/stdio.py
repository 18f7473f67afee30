"""
MCP tool server over stdio.

Serves the Figma catalogue through the MCP low-level server. Each call_tool
request runs the (blocking) dispatcher in a worker thread, so concurrent
calls do not wait on each other's HTTP exchanges. Errors are left to the
MCP framework, which returns them to the client as a single error text.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import anyio.to_thread
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from figma_mcp import __version__
from figma_mcp.interfaces.services.tools import IToolCatalog, IToolDispatcher
from figma_mcp.infrastructure.tools.tool_base import EMPTY_INPUT_SCHEMA

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp_figma"


def to_mcp_tools(catalog: IToolCatalog) -> List[types.Tool]:
    return [
        types.Tool(
            name=d.name,
            description=d.description,
            inputSchema=d.raw_schema if d.raw_schema is not None else dict(EMPTY_INPUT_SCHEMA),
        )
        for d in catalog.list_tools()
    ]


async def handle_call(
    dispatcher: IToolDispatcher,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> Tuple[List[types.TextContent], Dict[str, Any]]:
    """Dispatch one call; the payload goes out as text and the envelope as structured content."""
    envelope = await anyio.to_thread.run_sync(dispatcher.dispatch, name, arguments)
    return [types.TextContent(type="text", text=envelope.result)], envelope.as_dict()


def build_server(catalog: IToolCatalog, dispatcher: IToolDispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return to_mcp_tools(catalog)

    # Arguments are validated by the dispatcher's own schemas.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> Tuple[List[types.TextContent], Dict[str, Any]]:
        return await handle_call(dispatcher, name, arguments)

    return server


async def serve(catalog: IToolCatalog, dispatcher: IToolDispatcher) -> None:
    server = build_server(catalog, dispatcher)
    logger.info("Starting MCP Figma Server...")
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Figma Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
