"""Tests for environment-driven configuration."""

import pytest

from figma_mcp.infrastructure.config import DEFAULT_API_URL, CredentialContext, log_level


def test_defaults_when_environment_is_empty():
    context = CredentialContext.from_env({})
    assert context.base_url == DEFAULT_API_URL
    assert context.token == ""
    assert context.timeout_seconds == 30.0


def test_preferred_url_wins_over_legacy():
    context = CredentialContext.from_env({"FIGMA_API_URL": "https://a.test/", "API_URL": "https://b.test"})
    assert context.base_url == "https://a.test"
    assert CredentialContext.from_env({"API_URL": "https://b.test"}).base_url == "https://b.test"


def test_token_and_timeout_read_from_env():
    context = CredentialContext.from_env({"FIGMA_TOKEN": "figd_x", "FIGMA_TIMEOUT_SECONDS": "12.5"})
    assert context.token == "figd_x"
    assert context.timeout_seconds == 12.5


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_bad_timeout_rejected(value):
    with pytest.raises(ValueError):
        CredentialContext.from_env({"FIGMA_TIMEOUT_SECONDS": value})


def test_context_is_immutable_and_masks_token():
    context = CredentialContext(token="figd_secret")
    with pytest.raises(AttributeError):
        context.token = "other"
    assert "figd_secret" not in repr(context)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("FIGMA_TOKEN", "figd_env")
    monkeypatch.delenv("FIGMA_API_URL", raising=False)
    monkeypatch.delenv("API_URL", raising=False)
    assert CredentialContext.from_env().token == "figd_env"


def test_log_level():
    assert log_level({}) == "INFO"
    assert log_level({"FIGMA_MCP_LOG_LEVEL": " debug "}) == "DEBUG"


@pytest.mark.parametrize("value", ["verbose", "loud", "5"])
def test_unknown_log_level_rejected(value):
    with pytest.raises(ValueError, match="Unknown log level"):
        log_level({"FIGMA_MCP_LOG_LEVEL": value})
