"""Redis adapter – RedisHealthCheck."""
from __future__ import annotations

from ingress_edge.adapters.redis.connection import RedisConnection
from ingress_edge.observability.health import HealthCheck, HealthStatus


class RedisHealthCheck(HealthCheck):
    """Readiness probe for one named Redis connection (PING)."""

    def __init__(self, connection: RedisConnection) -> None:
        self._connection = connection

    @property
    def name(self) -> str:
        return f"redis.{self._connection.name}"

    async def check(self) -> HealthStatus:
        if await self._connection.ping():
            return HealthStatus(healthy=True)
        return HealthStatus(healthy=False, detail=f"Redis instance '{self._connection.name}' did not answer PING")


__all__ = ["RedisHealthCheck"]
