"""
Shared tool DTOs for catalogs, outbound requests and invocation results.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

ENCODING_JSON = "json"


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    raw_schema: Optional[Dict[str, Any]]


@dataclass(frozen=True)
class OutboundRequest:
    method: str
    path: str
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ResponseEnvelope:
    result: str
    type: str = ENCODING_JSON

    def as_dict(self) -> Dict[str, str]:
        return {"result": self.result, "type": self.type}


@dataclass(frozen=True)
class FailureDescriptor:
    kind: str
    message: str


@dataclass(frozen=True)
class ToolInvocationResult:
    ok: bool
    envelope: Optional[ResponseEnvelope]
    failure: Optional[FailureDescriptor]
    tool_name: str


__all__ = [
    "ENCODING_JSON",
    "ToolDescriptor",
    "OutboundRequest",
    "ResponseEnvelope",
    "FailureDescriptor",
    "ToolInvocationResult",
]
