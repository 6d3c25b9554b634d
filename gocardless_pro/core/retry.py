"""
core/retry.py
--------------

Retry decisions and backoff delays for failed attempts.

Only transient failures are retried: connection problems, 429 and 5xx
responses.  Even those are retried only when the call is retry-safe; a
POST without an idempotency key is sent once, because a duplicated
payment is worse than a surfaced error.  Delays grow exponentially, are
capped, and carry random jitter so concurrent callers hitting the same
outage spread their retries out.
"""

from __future__ import annotations

import random
from typing import Optional

from gocardless_pro.core.config import Settings
from gocardless_pro.core.errors import TransportFailure

# Non-5xx statuses that may succeed when sent again; every 5xx does too
RETRY_STATUS = {429}


class RetryPolicy:
    """Immutable retry configuration shared by every call of a client.

    :param max_attempts: attempts per logical call, first one included
    :param base_delay: delay before the first retry, in seconds
    :param max_delay: upper bound for any single delay, in seconds
    :param rng: random source for jitter; pass a seeded one in tests
    """

    __slots__ = ("max_attempts", "base_delay", "max_delay", "_rng")

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 0.1,
        max_delay: float = 0.5,
        rng: Optional[random.Random] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if base_delay < 0 or max_delay < 0:
            raise ValueError("delays must not be negative")
        object.__setattr__(self, "max_attempts", max_attempts)
        object.__setattr__(self, "base_delay", base_delay)
        object.__setattr__(self, "max_delay", max_delay)
        object.__setattr__(self, "_rng", rng or random.Random())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("RetryPolicy is immutable")

    def __repr__(self) -> str:
        return (f"RetryPolicy(max_attempts={self.max_attempts}, base_delay={self.base_delay}, "
                f"max_delay={self.max_delay})")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        return cls(
            max_attempts=settings.http_max_retries,
            base_delay=settings.http_backoff_factor,
            max_delay=settings.http_backoff_max,
        )

    @property
    def max_total_delay(self) -> float:
        """Upper bound on the time one call can spend waiting."""
        return self.max_delay * (self.max_attempts - 1)

    def is_retryable_status(self, status: int) -> bool:
        return status in RETRY_STATUS or 500 <= status < 600

    def should_retry(
        self,
        attempt: int,
        *,
        safe: bool,
        status: Optional[int] = None,
        failure: Optional[TransportFailure] = None,
    ) -> bool:
        """Decide whether attempt number ``attempt`` (1-based) gets a successor.

        :param attempt: number of the attempt that just failed
        :param safe: whether the call is retry-safe
        :param status: HTTP status of the failed attempt, if a response arrived
        :param failure: transport failure of the failed attempt, if any
        """
        if attempt >= self.max_attempts:
            return False
        if failure is None and (status is None or not self.is_retryable_status(status)):
            return False
        return safe

    def backoff(self, attempt: int) -> float:
        """Seconds to wait after attempt number ``attempt`` failed.

        Capped exponential growth with equal jitter: half of the delay is
        fixed, the other half is drawn uniformly.
        """
        delay = min(self.max_delay, self.base_delay * (2 ** (attempt - 1)))
        half = delay / 2
        return half + self._rng.uniform(0, half)
