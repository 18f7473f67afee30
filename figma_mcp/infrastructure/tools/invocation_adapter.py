"""
Tool dispatcher implementing IToolDispatcher interface.

dispatch(name, raw_args):
  lookup -> validate -> partition into path/query/body -> one transport.send -> envelope
"""

import json
import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from figma_mcp.abstractions.dto.tools import OutboundRequest, ResponseEnvelope, ToolInvocationResult
from figma_mcp.infrastructure.errors import FigmaToolError
from figma_mcp.infrastructure.tools.tool_base import ToolDefinition

if TYPE_CHECKING:
    from figma_mcp.interfaces.services.tools import ITransport

from .tool_manager import ToolManager

logger = logging.getLogger(__name__)


def build_request(tool: ToolDefinition, validated: Dict[str, Any]) -> OutboundRequest:
    """
    Split validated arguments per the tool's routing rule.

    Path fields fill the endpoint placeholders; every other field goes to the
    query string or the JSON body. Only fields the caller supplied (or that
    carry a default) are present, so an explicit null in a free-form field is
    kept.
    """
    path_values = {placeholder: validated[arg] for arg, placeholder in tool.path_params.items()}
    rest = {k: v for k, v in validated.items() if k not in tool.path_params}
    path = tool.endpoint.render(**path_values)
    if tool.placement == "body":
        return OutboundRequest(method=tool.endpoint.method, path=path, body=rest)
    return OutboundRequest(method=tool.endpoint.method, path=path, query=rest)


def to_envelope(payload: Any) -> ResponseEnvelope:
    """Wrap the payload verbatim; json.loads(envelope.result) gives it back unchanged."""
    return ResponseEnvelope(result=json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


class ToolDispatcher:
    """
    Routes a tool call to exactly one outbound request.

    Validation failures are raised before any network I/O; retries belong to
    the transport and are invisible here.
    """

    def __init__(self, transport: "ITransport", manager: Optional[ToolManager] = None):
        self.transport = transport
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    def dispatch(self, name: str, raw_args: Optional[Dict[str, Any]]) -> ResponseEnvelope:
        """
        Execute a tool by name with the caller's argument bag.

        Raises:
            UnknownTool: If no tool has that exact name
            InvalidArguments: With every schema violation found
            TransportError: If the outbound exchange failed after retries
        """
        tool = self.manager.get_tool(name)
        validated: Dict[str, Any] = {}
        if tool.schema_id is not None:
            validated = self.manager.schemas.validate(tool.schema_id, raw_args)
        request = build_request(tool, validated)
        logger.info(f"Dispatching {name} -> {request.method} {request.path}")
        payload = self.transport.send(request)
        return to_envelope(payload)

    def execute(self, name: str, raw_args: Optional[Dict[str, Any]]) -> ToolInvocationResult:
        """
        Like dispatch, but known failures come back as a FailureDescriptor.
        Anything else propagates.
        """
        try:
            envelope = self.dispatch(name, raw_args)
        except FigmaToolError as e:
            logger.error(f"Tool {name} failed: {e.message}")
            return ToolInvocationResult(ok=False, envelope=None, failure=e.descriptor(), tool_name=name)
        return ToolInvocationResult(ok=True, envelope=envelope, failure=None, tool_name=name)
