from __future__ import annotations

import time
from datetime import datetime, timezone

from rich.console import Console

from .client import GitHubClient
from .errors import RateLimitError
from .models import RateLimit

_LOW_WATERMARK = 100
_stderr = Console(stderr=True)


def reset_datetime(rate: RateLimit) -> datetime:
    # GitHub reports ``reset`` in epoch seconds.
    return datetime.fromtimestamp(rate.reset, tz=timezone.utc)


def seconds_until_reset(rate: RateLimit, now: float | None = None) -> int:
    if now is None:
        now = time.time()
    return max(0, rate.reset - int(now))


class RateLimitGuard:
    """Snapshot of the core API quota, taken before any listing traffic.

    The snapshot is advisory; the service remains the authority on whether a
    given request is accepted.
    """

    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def check(self) -> RateLimit:
        rate = self.report()
        if rate.remaining == 0:
            raise RateLimitError(
                f"GitHub rate limit exhausted. Resets at {reset_datetime(rate):%Y-%m-%dT%H:%M:%SZ}.",
                reset_at=reset_datetime(rate),
            )
        if rate.remaining < _LOW_WATERMARK:
            _stderr.print(
                f"[yellow]Warning:[/yellow] GitHub rate limit low: {rate.remaining} requests remaining"
            )
        return rate

    def report(self) -> RateLimit:
        rate = self._client.rate_limit()
        now = datetime.now(tz=timezone.utc)
        _stderr.print(
            f"Rate limit: {rate.remaining}/{rate.limit} remaining · "
            f"now {now:%Y-%m-%dT%H:%M:%SZ} · resets {reset_datetime(rate):%Y-%m-%dT%H:%M:%SZ} "
            f"(in {seconds_until_reset(rate, now.timestamp())}s)"
        )
        return rate
