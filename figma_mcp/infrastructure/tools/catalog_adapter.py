"""
Tool catalog adapter implementing IToolCatalog interface.
"""

from typing import List, Optional, TYPE_CHECKING

from figma_mcp.abstractions.dto.tools import ToolDescriptor
from figma_mcp.infrastructure.errors import UnknownTool

if TYPE_CHECKING:
    from figma_mcp.interfaces.services.tools import IToolCatalog  # noqa: F401

from .tool_manager import ToolManager


class ToolManagerCatalogAdapter:
    """
    Adapter for ToolManager to implement IToolCatalog interface.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    def list_tools(self) -> List[ToolDescriptor]:
        """
        List all registered tools as ToolDescriptor objects, in declaration order.
        """
        return [
            ToolDescriptor(
                name=info["name"],
                description=info["description"],
                raw_schema=info["input_schema"],
            )
            for info in self.manager.list_tools()
        ]

    def get_tool(self, name: str) -> Optional[ToolDescriptor]:
        """
        Get a tool descriptor by name.
        """
        try:
            tool = self.manager.get_tool(name)
        except UnknownTool:
            return None
        info = tool.get_tool_definition(self.manager.schema_for(tool))
        return ToolDescriptor(
            name=info["name"],
            description=info["description"],
            raw_schema=info["input_schema"],
        )
