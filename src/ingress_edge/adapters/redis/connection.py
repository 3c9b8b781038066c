"""Redis adapter – RedisConnection."""
from __future__ import annotations

from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ingress_edge.observability.logging import get_logger

_log = get_logger(__name__)


class RedisConnection:
    """A named, long-lived async Redis client.

    The edge opens one per logical use (``ingress`` and ``rate_limit``) so
    that a degraded rate-limit instance cannot stall event ingestion and
    vice versa.
    """

    def __init__(self, name: str, client: Any) -> None:
        self.name = name
        self._client = client

    @classmethod
    def from_url(cls, name: str, url: str, **kwargs: Any) -> "RedisConnection":
        kwargs.setdefault("decode_responses", True)
        return cls(name, aioredis.from_url(url, **kwargs))

    @property
    def client(self) -> Any:
        return self._client

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as exc:
            _log.error("redis.ping_failed", instance=self.name, error=str(exc))
            return False

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisConnection"]
