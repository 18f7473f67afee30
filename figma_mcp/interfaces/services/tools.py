"""
Tool catalog, dispatch and transport ports.
"""
from __future__ import annotations
from typing import Protocol, List, Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from figma_mcp.abstractions.dto.tools import (
        OutboundRequest,
        ResponseEnvelope,
        ToolDescriptor,
        ToolInvocationResult,
    )


class IToolCatalog(Protocol):
    def list_tools(self) -> List["ToolDescriptor"]:
        ...

    def get_tool(self, name: str) -> Optional["ToolDescriptor"]:
        ...


class IToolDispatcher(Protocol):
    def dispatch(self, name: str, raw_args: Optional[Dict[str, Any]]) -> "ResponseEnvelope":
        ...

    def execute(self, name: str, raw_args: Optional[Dict[str, Any]]) -> "ToolInvocationResult":
        ...


class ITransport(Protocol):
    def send(self, request: "OutboundRequest") -> Any:
        ...


__all__ = ["IToolCatalog", "IToolDispatcher", "ITransport"]
