"""Tests for the retry policy object (no network, no clock)."""

import pytest

from figma_mcp.infrastructure.http.retry import DEFAULT_NON_RETRY_STATUSES, RetryPolicy


def test_reference_defaults():
    policy = RetryPolicy()
    assert policy.retries == 1
    assert policy.max_attempts == 2
    assert policy.base_delay == 0.5
    assert policy.non_retry_statuses == frozenset({401, 500})


def test_delay_is_exponential_without_jitter():
    policy = RetryPolicy(retries=4)
    assert list(policy.delays()) == [1.0, 2.0, 4.0, 8.0]
    assert policy.delay(1) == policy.delay(1)


def test_delay_is_one_indexed():
    with pytest.raises(ValueError):
        RetryPolicy().delay(0)


@pytest.mark.parametrize("status", [None, 400, 403, 404, 429, 502, 503, 504])
def test_retryable_statuses(status):
    assert RetryPolicy().should_retry(status)


@pytest.mark.parametrize("status", sorted(DEFAULT_NON_RETRY_STATUSES))
def test_documented_deny_list_fails_fast(status):
    # 500 is deliberately not retried, unlike other 5xx statuses
    assert not RetryPolicy().should_retry(status)


def test_invalid_configuration_rejected():
    with pytest.raises(ValueError):
        RetryPolicy(retries=-1)
    with pytest.raises(ValueError):
        RetryPolicy(base_delay=-0.1)
