"""
Failure taxonomy for tool calls.

Every error carries a structured payload so callers can report it as one
textual message or as a FailureDescriptor:
{ kind: str, message: str, details: dict }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from figma_mcp.abstractions.dto.tools import FailureDescriptor


@dataclass(frozen=True)
class FieldViolation:
    """One schema violation; path is dotted, the empty string means the whole bag."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class FigmaToolError(Exception):
    """Base class for failures surfaced by the dispatcher."""

    kind: str = "tool_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details: Dict[str, Any] = details or {}
        self.payload = {"kind": self.kind, "message": self.message, "details": self.details}
        super().__init__(message)

    def descriptor(self) -> FailureDescriptor:
        return FailureDescriptor(kind=self.kind, message=self.message)


class UnknownTool(FigmaToolError, LookupError):
    kind = "unknown_tool"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}", {"name": name})


class InvalidArguments(FigmaToolError, ValueError):
    """Raised with every violation found, so callers can fix them in one round trip."""

    kind = "invalid_arguments"

    def __init__(self, violations: Iterable[FieldViolation]):
        self.violations: List[FieldViolation] = list(violations)
        joined = ", ".join(str(v) for v in self.violations)
        super().__init__(
            f"Invalid arguments: {joined}",
            {"violations": [{"path": v.path, "reason": v.reason} for v in self.violations]},
        )


class TransportError(FigmaToolError):
    """Outbound exchange failed after the retry policy gave up."""

    kind = "transport_error"

    def __init__(self, message: str, status: Optional[int] = None, attempts: int = 1):
        self.status = status
        self.attempts = attempts
        super().__init__(message, {"status": status, "attempts": attempts})


__all__ = [
    "FieldViolation",
    "FigmaToolError",
    "UnknownTool",
    "InvalidArguments",
    "TransportError",
]
