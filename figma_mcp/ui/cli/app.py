"""
Command line entry point for the Figma tool server.

Commands:
  serve      Run the MCP server on stdio (default)
  tools      List registered tools
  call       Execute a tool directly (e.g., call figma_get_file --args '{"fileKey": "abc"}')

Run:
  figma-mcp [serve|tools|call]
  or
  python -m figma_mcp
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import anyio
from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from figma_mcp import __version__
from figma_mcp.api.di.composition import build_tool_catalog, build_tool_dispatcher, build_tool_manager
from figma_mcp.infrastructure.config import log_level, parse_log_level
from figma_mcp.interfaces.services.tools import IToolCatalog, IToolDispatcher


def configure_logging(level: Optional[str] = None) -> None:
    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(
        level=parse_log_level(level) if level else log_level(),
        format="[%(asctime)s] [figma-mcp] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stderr,
    )


def list_tools(console: Console, catalog: IToolCatalog) -> None:
    """Render a table of registered tools."""
    table = Table(title="Figma Tools", box=ROUNDED)
    table.add_column("Name", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required Params")

    for descriptor in catalog.list_tools():
        req = ", ".join((descriptor.raw_schema or {}).get("required", []))
        table.add_row(descriptor.name, descriptor.description, req or "-")

    console.print(table)


def call_tool(console: Console, dispatcher: IToolDispatcher, name: str, raw_args: str) -> int:
    """Execute one tool and print its envelope; returns the process exit status."""
    try:
        args = json.loads(raw_args) if raw_args else {}
    except json.JSONDecodeError as e:
        console.print(Panel(f"--args is not valid JSON: {e}", title="Error", box=ROUNDED))
        return 2

    outcome = dispatcher.execute(name, args)
    if not outcome.ok:
        failure = outcome.failure
        console.print(Panel(failure.message, title=f"Error ({failure.kind})", box=ROUNDED))
        return 1
    console.print_json(json.dumps(outcome.envelope.as_dict()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="figma-mcp", description="Figma REST API tools over MCP")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Override FIGMA_MCP_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="Run the MCP server on stdio")
    sub.add_parser("tools", help="List registered tools")
    call = sub.add_parser("call", help="Execute a tool directly")
    call.add_argument("name", help="Tool name, e.g. figma_get_file")
    call.add_argument("--args", default="{}", help="JSON object of tool arguments")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        Console(stderr=True).print(Panel(str(e), title="Configuration error", box=ROUNDED))
        return 2
    command = args.command or "serve"

    manager = build_tool_manager()
    if command == "tools":
        list_tools(Console(), build_tool_catalog(manager))
        return 0
    if command == "call":
        return call_tool(Console(), build_tool_dispatcher(manager), args.name, args.args)

    from figma_mcp.server.stdio import serve
    catalog = build_tool_catalog(manager)
    dispatcher = build_tool_dispatcher(manager)
    try:
        anyio.run(serve, catalog, dispatcher)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
