"""
Shared test fixtures: fake transport, fake clock and a default tool registry.

Nothing here talks to the real Figma API.
"""

import os
import sys
from typing import Any, List, Optional

import pytest

# Ensure project root is on sys.path so 'figma_mcp' imports resolve in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from figma_mcp.abstractions.dto.tools import OutboundRequest  # noqa: E402
from figma_mcp.infrastructure.config import CredentialContext  # noqa: E402
from figma_mcp.infrastructure.tools.invocation_adapter import ToolDispatcher  # noqa: E402
from figma_mcp.infrastructure.tools.tool_manager import ToolManager  # noqa: E402

API_URL = "https://api.figma.test"


class FakeTransport:
    """Records every request and answers with a canned payload or error."""

    def __init__(self, payload: Any = None, error: Optional[BaseException] = None):
        self.payload = payload
        self.error = error
        self.requests: List[OutboundRequest] = []

    def send(self, request: OutboundRequest) -> Any:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.payload


class FakeClock:
    def __init__(self):
        self.sleeps: List[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


@pytest.fixture
def manager():
    return ToolManager(register_defaults=True)


@pytest.fixture
def transport():
    return FakeTransport(payload={"ok": True})


@pytest.fixture
def dispatcher(manager, transport):
    return ToolDispatcher(transport=transport, manager=manager)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def context():
    return CredentialContext(base_url=API_URL, token="figd_test_token", timeout_seconds=5.0)
