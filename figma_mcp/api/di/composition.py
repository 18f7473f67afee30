"""
Composition module (edge wiring).

Builds the process-wide objects once at startup: the credential context,
the Figma client, the tool catalogue and the dispatcher.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from figma_mcp.infrastructure.config import CredentialContext

if TYPE_CHECKING:
    from figma_mcp.infrastructure.http.figma_client import FigmaClient
    from figma_mcp.infrastructure.tools.tool_manager import ToolManager
    from figma_mcp.interfaces.services.tools import IToolCatalog, IToolDispatcher, ITransport


def build_tool_manager() -> "ToolManager":
    """
    Construct the tool registry with the Figma catalogue registered.
    """
    from figma_mcp.infrastructure.tools.tool_manager import ToolManager
    return ToolManager(register_defaults=True)


def build_figma_client(context: Optional[CredentialContext] = None) -> "FigmaClient":
    """
    Construct the Figma client; the context is read from the environment when not given.
    """
    from figma_mcp.infrastructure.http.figma_client import FigmaClient
    return FigmaClient(context if context is not None else CredentialContext.from_env())


def build_tool_catalog(manager: Optional["ToolManager"] = None) -> "IToolCatalog":
    """
    Construct and return an IToolCatalog instance.
    """
    from figma_mcp.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
    return ToolManagerCatalogAdapter(manager or build_tool_manager())


def build_tool_dispatcher(
    manager: Optional["ToolManager"] = None,
    transport: Optional["ITransport"] = None,
) -> "IToolDispatcher":
    """
    Construct and return an IToolDispatcher instance.
    """
    from figma_mcp.infrastructure.tools.invocation_adapter import ToolDispatcher
    return ToolDispatcher(
        transport=transport if transport is not None else build_figma_client(),
        manager=manager or build_tool_manager(),
    )
