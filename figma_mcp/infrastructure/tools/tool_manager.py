import logging
from typing import Dict, Any, Iterable, List, Optional

from figma_mcp.infrastructure.errors import UnknownTool
from figma_mcp.infrastructure.tools.catalog import FIGMA_TOOLS
from figma_mcp.infrastructure.tools.figma_schemas import register_figma_schemas
from figma_mcp.infrastructure.tools.schema import ArgumentSchema, SchemaRegistry
from figma_mcp.infrastructure.tools.tool_base import ToolDefinition

logger = logging.getLogger(__name__)


class ToolManager:
    """
    Manages the tool catalogue: registration at startup, lookup and listing afterwards.

    The set of tools is fixed once startup registration is done; listing
    always returns tools in declaration order.
    """

    def __init__(self, schemas: Optional[SchemaRegistry] = None, register_defaults: bool = True):
        """
        Initialize tool registry.

        Args:
            schemas: Schema registry the tools' schema_ids point into
            register_defaults: Whether to register the Figma tools and their schemas
        """
        self.schemas = schemas if schemas is not None else SchemaRegistry()
        self.tools: Dict[str, ToolDefinition] = {}
        if register_defaults:
            self.register_default_tools()

    def register_default_tools(self) -> None:
        """Register every Figma tool together with the schemas they use."""
        register_figma_schemas(self.schemas)
        self.register_tools(FIGMA_TOOLS)
        logger.debug(f"Registered {len(self.tools)} Figma tools")

    def register_tools(self, tools: Iterable[ToolDefinition]) -> None:
        for tool in tools:
            self.register_tool(tool)

    def register_tool(self, tool: ToolDefinition) -> None:
        """
        Register a tool definition.

        Args:
            tool: Definition to register

        Raises:
            ValueError: If the name is taken or the routing rule does not fit the schema
        """
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        if tool.schema_id is not None and tool.schema_id not in self.schemas:
            raise ValueError(f"Tool '{tool.name}' references unknown schema '{tool.schema_id}'")
        tool.check(self.schema_for(tool))
        self.tools[tool.name] = tool

    def schema_for(self, tool: ToolDefinition) -> Optional[ArgumentSchema]:
        if tool.schema_id is None:
            return None
        return self.schemas.get(tool.schema_id)

    def get_tool(self, name: str) -> ToolDefinition:
        """
        Get a registered tool by exact name.

        Raises:
            UnknownTool: If tool is not found
        """
        if name not in self.tools:
            raise UnknownTool(name)
        return self.tools[name]

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        Get information about all registered tools.

        Returns:
            List of dictionaries with name, description and input_schema
            (None for tools that take no arguments)
        """
        return [tool.get_tool_definition(self.schema_for(tool)) for tool in self.tools.values()]
