"""Tests for the command line handlers."""

import json

from rich.console import Console

from figma_mcp.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
from figma_mcp.ui.cli.app import build_parser, call_tool, list_tools, main


def recording_console():
    return Console(record=True, width=200, color_system=None)


def test_list_tools_renders_table(manager):
    console = recording_console()
    list_tools(console, ToolManagerCatalogAdapter(manager))
    text = console.export_text()
    assert "figma_get_file_nodes" in text
    assert "fileKey, ids" in text


def test_call_tool_prints_envelope(dispatcher, transport):
    transport.payload = {"name": "Design"}
    console = recording_console()
    status = call_tool(console, dispatcher, "figma_get_file", json.dumps({"fileKey": "abc"}))
    assert status == 0
    out = json.loads(console.export_text())
    assert out["type"] == "json"
    assert json.loads(out["result"]) == {"name": "Design"}


def test_call_tool_reports_failures(dispatcher, transport):
    console = recording_console()
    assert call_tool(console, dispatcher, "figma_get_file", "{}") == 1
    assert "fileKey: Required" in console.export_text()
    assert transport.requests == []


def test_call_tool_rejects_bad_json(dispatcher):
    assert call_tool(recording_console(), dispatcher, "figma_get_file", "{oops") == 2


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.command is None
    args = build_parser().parse_args(["call", "figma_get_me"])
    assert (args.command, args.name, args.args) == ("call", "figma_get_me", "{}")


def test_main_rejects_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setenv("FIGMA_MCP_LOG_LEVEL", "verbose")
    assert main(["tools"]) == 2
    assert "Unknown log level 'verbose'" in capsys.readouterr().err


def test_main_rejects_unknown_log_level_flag(capsys):
    assert main(["--log-level", "chatty", "tools"]) == 2
    assert "Unknown log level 'chatty'" in capsys.readouterr().err
