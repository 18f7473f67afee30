"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading variables from a .env file
2. Building the immutable CredentialContext used by the Figma client
3. Resolving the log level for the CLI

Environment variables:
- FIGMA_TOKEN              (personal access token; empty when unset)
- FIGMA_API_URL            (preferred; default: https://api.figma.com)
- API_URL                  (legacy; used if FIGMA_API_URL not set)
- FIGMA_TIMEOUT_SECONDS    (default: 30)
- FIGMA_MCP_LOG_LEVEL      (default: INFO)

A missing token is not an error here; the API rejects the call later with 401.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://api.figma.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("CRITICAL", "FATAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class CredentialContext:
    """Base endpoint and credential shared by every outbound request."""

    base_url: str = DEFAULT_API_URL
    token: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        masked = "***" if self.token else "''"
        return (
            f"CredentialContext(base_url={self.base_url!r}, token={masked}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CredentialContext":
        """
        Read the context once from the process environment.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            A frozen CredentialContext
        """
        env = os.environ if environ is None else environ
        base_url = env.get("FIGMA_API_URL") or env.get("API_URL") or DEFAULT_API_URL
        raw_timeout = env.get("FIGMA_TIMEOUT_SECONDS", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ValueError(f"FIGMA_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}")
        if timeout <= 0:
            raise ValueError("FIGMA_TIMEOUT_SECONDS must be > 0")
        return cls(
            base_url=base_url.rstrip("/"),
            token=env.get("FIGMA_TOKEN", ""),
            timeout_seconds=timeout,
        )


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


def log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return parse_log_level(env.get("FIGMA_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL)
