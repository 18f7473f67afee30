"""
Tool definitions: what a tool is called, what it accepts and where it goes.

A definition is pure data. Adding a tool means adding a ToolDefinition to the
catalogue; the dispatcher never branches on tool names.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional

from figma_mcp.infrastructure.http.endpoints import Endpoint
from figma_mcp.infrastructure.tools.schema import ArgumentSchema

Placement = Literal["query", "body"]

EMPTY_INPUT_SCHEMA: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}


@dataclass(frozen=True)
class ToolDefinition:
    """
    name: unique tool identifier
    description: human-readable summary shown in listings
    endpoint: outbound method and path template
    schema_id: key into the SchemaRegistry, None for no-argument tools
    path_params: validated field name -> path placeholder
    placement: where the remaining validated fields go
    """

    name: str
    description: str
    endpoint: Endpoint
    schema_id: Optional[str] = None
    path_params: Mapping[str, str] = field(default_factory=dict)
    placement: Placement = "query"

    def check(self, schema: Optional[ArgumentSchema]) -> None:
        """
        Verify the routing rule against the schema it will be fed from.

        Raises:
            ValueError: If a path field is not in the schema or a placeholder is left unfilled
        """
        if self.placement not in ("query", "body"):
            raise ValueError(f"{self.name}: placement must be 'query' or 'body', got {self.placement!r}")
        for arg_name in self.path_params:
            if schema is None or arg_name not in schema:
                raise ValueError(f"{self.name}: path field '{arg_name}' is not declared in its schema")
        unfilled = self.endpoint.placeholders - set(self.path_params.values())
        if unfilled:
            raise ValueError(f"{self.name}: no field fills path placeholder(s) {sorted(unfilled)}")
        unknown = set(self.path_params.values()) - self.endpoint.placeholders
        if unknown:
            raise ValueError(f"{self.name}: placeholder(s) {sorted(unknown)} missing from {self.endpoint.path}")

    def get_tool_definition(self, schema: Optional[ArgumentSchema]) -> Dict[str, Any]:
        """Get the discovery entry: name, description and JSON Schema input."""
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": schema.to_json_schema() if schema is not None else None,
        }
