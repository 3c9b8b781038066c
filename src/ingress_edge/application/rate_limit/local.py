"""Application rate limiting – in-memory fixed-window implementation."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from ingress_edge.application.rate_limit.rate_limiter import Quota, RateLimitResult, RateLimiter


class LocalFixedWindowRateLimiter(RateLimiter):
    """Single-process fixed-window rate limiter for development and tests.

    A window opens with the first request for a bucket and closes
    ``quota.window_seconds`` later.
    """

    def __init__(self) -> None:
        # bucket -> (count, window_start)
        self._windows: dict[str, tuple[int, datetime]] = {}

    async def check(self, quota: Quota, identifier: str) -> RateLimitResult:
        bucket = quota.bucket(identifier)
        now = datetime.now(UTC)
        count, opened = self._windows.get(bucket, (0, now))
        if (now - opened).total_seconds() >= quota.window_seconds:
            count, opened = 0, now

        self._windows[bucket] = (count + 1, opened)
        return RateLimitResult.counted(quota, count + 1, opened + timedelta(seconds=quota.window_seconds))


__all__ = ["LocalFixedWindowRateLimiter"]
