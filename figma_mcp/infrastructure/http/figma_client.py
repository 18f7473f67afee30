"""
Figma REST client (HTTP transport with retry)

Responsibilities:
- Send one OutboundRequest to the configured base URL and return the decoded JSON payload.
- Attach the X-Figma-Token credential to every attempt, retries included.
- Retry failed attempts according to a RetryPolicy, sleeping with exponential back-off.
- Classify the final failure as TransportError (HTTP status when there was one).

Notes:
- Session-level headers carry Content-Type only; the token is applied per attempt.
- Empty 2xx bodies decode to None and non-JSON bodies to their text.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from figma_mcp.abstractions.dto.tools import OutboundRequest
from figma_mcp.infrastructure.config import CredentialContext
from figma_mcp.infrastructure.errors import TransportError
from figma_mcp.infrastructure.http.retry import RetryPolicy

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Figma-Token"


def _encode_query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def encode_query(query: Dict[str, Any]) -> Dict[str, Any]:
    """Render query values the way the API expects them; None means absent."""
    return {k: _encode_query_value(v) for k, v in query.items() if v is not None}


class FigmaClient:
    def __init__(
        self,
        context: CredentialContext,
        policy: Optional[RetryPolicy] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.context = context
        self.policy = policy if policy is not None else RetryPolicy()
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self._sleep = sleep

    @property
    def base_url(self) -> str:
        return self.context.base_url

    # ---------- Public API ----------

    def send(self, request: OutboundRequest) -> Any:
        """
        Perform the HTTP exchange for request, retrying per policy.

        Returns:
            The decoded response payload

        Raises:
            TransportError: On a network failure or non-2xx status once retries are exhausted
        """
        url = self._join(request.path)
        params = encode_query(request.query)
        attempt = 0
        while True:
            attempt += 1
            status: Optional[int] = None
            cause: Optional[BaseException] = None
            try:
                response = self.session.request(
                    request.method,
                    url,
                    params=params or None,
                    json=request.body,
                    headers=self._auth_headers(),
                    timeout=self.context.timeout_seconds,
                )
            except requests.RequestException as e:
                cause = e
                message = str(e) or type(e).__name__
            else:
                if 200 <= response.status_code < 300:
                    return self._decode(response)
                status = response.status_code
                message = f"Request failed with status code {status}"

            if attempt > self.policy.retries or not self.policy.should_retry(status):
                logger.error(f"{request.method} {request.path} failed after {attempt} attempt(s): {message}")
                raise TransportError(message, status=status, attempts=attempt) from cause

            delay = self.policy.delay(attempt)
            logger.warning(f"{request.method} {request.path} failed ({message}); retry {attempt} in {delay:.2f}s")
            self._sleep(delay)

    # ---------- Private helpers ----------

    def _auth_headers(self) -> Dict[str, str]:
        return {TOKEN_HEADER: self.context.token}

    def _join(self, path: str) -> str:
        base = self.base_url.rstrip("/")
        p = path if path.startswith("/") else f"/{path}"
        return f"{base}{p}"

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
