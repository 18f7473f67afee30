"""
Retry policy for outbound Figma requests.

The policy is a predicate plus a delay function; the client owns the loop
and the sleeping, so both can be exercised without a network or a real clock.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

# Statuses that fail immediately; note 500 is on the list while 502-504 are not.
DEFAULT_NON_RETRY_STATUSES: FrozenSet[int] = frozenset({401, 500})


@dataclass(frozen=True)
class RetryPolicy:
    """Configuration for retry attempts."""

    retries: int = 1
    base_delay: float = 0.5
    non_retry_statuses: FrozenSet[int] = field(default_factory=lambda: DEFAULT_NON_RETRY_STATUSES)

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("retries must be >= 0")
        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    def should_retry(self, status: Optional[int]) -> bool:
        """Network failures (no status) and any status outside the deny-list are retried."""
        return status not in self.non_retry_statuses

    def delay(self, retry_count: int) -> float:
        """Seconds to wait before retry number retry_count (1-indexed): base * 2^n, no jitter."""
        if retry_count < 1:
            raise ValueError("retry_count is 1-indexed")
        return self.base_delay * (2 ** retry_count)

    def delays(self) -> Iterable[float]:
        """Expose the full delay schedule for testing purposes."""
        for retry_count in range(1, self.retries + 1):
            yield self.delay(retry_count)


__all__ = ["RetryPolicy", "DEFAULT_NON_RETRY_STATUSES"]
