"""Integration tests for the Redis adapters.

Uses testcontainers to spawn a real Redis instance.
Run with: pytest tests/integration/test_redis.py -m integration -v
"""
from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime

import pytest
from testcontainers.redis import RedisContainer

from ingress_edge.adapters.redis import RedisConnection, RedisKeyValueStore, RedisRateLimiter
from ingress_edge.application.admission import Admit, IngestRequest, Reject
from ingress_edge.application.rate_limit import Quota, RateLimitDecision
from ingress_edge.bootstrap import build_service
from ingress_edge.kernel.ingress import ProjectConfig
from ingress_edge.kernel.time import epoch_ms, next_midnight_utc
from ingress_edge.testing.fakes import FakeClock, FakeErrorReporter, FakeMetricsRegistry

PAYLOAD = "v1.naclbox.bm9uY2U.a2V5.Y2lwaGVy"


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def _redis_url(container) -> str:  # type: ignore[no-untyped-def]
    host = container.get_container_host_ip()
    port = container.get_exposed_port(container.port)
    return f"redis://{host}:{port}/0"


@pytest.fixture(scope="module")
def redis_url():  # type: ignore[no-untyped-def]
    with RedisContainer() as container:
        yield _redis_url(container)


# ---------------------------------------------------------------------------
# RedisKeyValueStore + IngestService
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestIngestAgainstRedis:
    """End-to-end admission with a real Redis behind the store port."""

    def test_limited_project_scenario(self, redis_url: str) -> None:
        async def run() -> None:
            connection = RedisConnection.from_url("ingress", redis_url)
            client = connection.client
            await client.flushdb()
            await client.set("p1.config", ProjectConfig(origins=("https://a.test",), daily_limit=2).to_json())

            pubsub = client.pubsub()
            await pubsub.subscribe("overLimit")

            clock = FakeClock(datetime.now(UTC))
            service = build_service(
                RedisKeyValueStore(connection),
                metrics=FakeMetricsRegistry(),
                reporter=FakeErrorReporter(),
                clock=clock,
            )
            request = IngestRequest.from_params("p1", payload=PAYLOAD, origin="https://a.test")
            decisions = [await service.ingest(request) for _ in range(3)]

            assert [type(d) for d in decisions] == [Admit, Admit, Reject]
            assert await client.llen("p1.data") == 2
            assert await client.get("p1.count") == "3"
            expire_at = await client.pexpiretime("p1.count")
            assert expire_at == epoch_ms(next_midnight_utc(clock.now()))

            message = None
            for _ in range(20):
                message = await pubsub.get_message(ignore_subscribe_messages=True, timeout=0.5)
                if message is not None:
                    break
            assert message is not None
            assert json.loads(message["data"])["overUsage"] == 1

            await pubsub.aclose()
            await connection.close()

        _run(run())

    def test_unknown_project_leaves_no_keys(self, redis_url: str) -> None:
        async def run() -> None:
            connection = RedisConnection.from_url("ingress", redis_url)
            await connection.client.flushdb()
            service = build_service(
                RedisKeyValueStore(connection), metrics=FakeMetricsRegistry(), reporter=FakeErrorReporter()
            )
            decision = await service.ingest(IngestRequest.from_params("p2", payload=PAYLOAD))
            assert decision.reason == "config_not_found"
            assert await connection.client.exists("p2.count", "p2.data") == 0
            await connection.close()

        _run(run())

    def test_ping(self, redis_url: str) -> None:
        async def run() -> None:
            connection = RedisConnection.from_url("ingress", redis_url)
            assert await connection.ping() is True
            await connection.close()

        _run(run())


# ---------------------------------------------------------------------------
# RedisRateLimiter
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestRedisRateLimiterIntegration:
    def test_denies_request_exceeding_limit(self, redis_url: str) -> None:
        async def run() -> None:
            connection = RedisConnection.from_url("rate_limit", redis_url)
            await connection.client.flushdb()
            limiter = RedisRateLimiter(connection)
            quota = Quota(key="push", limit=2, window_seconds=60)
            decisions = [(await limiter.check(quota, "p1:abc")).decision for _ in range(3)]
            assert decisions == [RateLimitDecision.ALLOWED, RateLimitDecision.ALLOWED, RateLimitDecision.DENIED]
            ttl = await connection.client.pttl("push:p1:abc")
            assert 0 < ttl <= 60_000
            await connection.close()

        _run(run())
