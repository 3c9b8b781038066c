"""Unit tests for health checks."""
from __future__ import annotations

import asyncio

import pytest

from ingress_edge.observability.health import HealthCheck, HealthStatus


class _OkCheck(HealthCheck):
    @property
    def name(self) -> str:
        return "ok"

    async def check(self) -> HealthStatus:
        return HealthStatus(healthy=True)


class _BrokenCheck(HealthCheck):
    @property
    def name(self) -> str:
        return "broken"

    async def check(self) -> HealthStatus:
        raise RuntimeError("connection refused")


class TestHealthCheck:
    def test_timed_check_records_latency(self) -> None:
        status = asyncio.run(_OkCheck().timed_check())
        assert status.healthy
        assert status.latency_ms >= 0.0

    def test_timed_check_turns_exception_into_unhealthy(self) -> None:
        status = asyncio.run(_BrokenCheck().timed_check())
        assert not status.healthy
        assert status.detail == "connection refused"

    def test_status_defaults(self) -> None:
        status = HealthStatus(healthy=False)
        assert status.detail is None
        assert status.latency_ms == 0.0

    def test_as_dict(self) -> None:
        status = HealthStatus(healthy=False, detail="down", latency_ms=1.23456)
        assert status.as_dict() == {"healthy": False, "latency_ms": 1.235, "detail": "down"}

    def test_status_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            HealthStatus(healthy=True).healthy = False  # type: ignore[misc]
