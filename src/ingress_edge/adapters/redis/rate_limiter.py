"""Redis adapter – RedisRateLimiter."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from redis.exceptions import RedisError

from ingress_edge.adapters.redis.connection import RedisConnection
from ingress_edge.application.rate_limit import Quota, RateLimitDecision, RateLimitResult, RateLimiter
from ingress_edge.observability.logging import get_logger

_log = get_logger(__name__)


class RedisRateLimiter(RateLimiter):
    """Fixed-window rate limiter backed by Redis ``SET NX PX`` + ``INCR``.

    The window key is created with its TTL on the first request, so the
    window starts with that request and ends ``window_seconds`` later. When
    Redis is unreachable the request is allowed.
    """

    def __init__(self, connection: RedisConnection) -> None:
        self._connection = connection

    async def check(self, quota: Quota, identifier: str) -> RateLimitResult:
        bucket = quota.bucket(identifier)
        now = datetime.now(UTC)

        try:
            async with self._connection.client.pipeline(transaction=True) as pipe:
                await pipe.set(bucket, 0, px=quota.window_ms, nx=True)
                await pipe.incr(bucket)
                await pipe.pttl(bucket)
                _, count, ttl_ms = await pipe.execute()
        except RedisError as exc:
            _log.warning("rate_limit.unavailable", instance=self._connection.name, error=str(exc))
            return RateLimitResult(RateLimitDecision.ALLOWED, quota.limit, now, quota)

        ttl_ms = int(ttl_ms)
        if ttl_ms <= 0:
            ttl_ms = quota.window_ms
        return RateLimitResult.counted(quota, int(count), now + timedelta(milliseconds=ttl_ms))


__all__ = ["RedisRateLimiter"]
