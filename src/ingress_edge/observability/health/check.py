"""Observability – readiness checks."""
from __future__ import annotations

import dataclasses
import time
from abc import ABC, abstractmethod
from typing import Any

from ingress_edge.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class HealthStatus:
    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0

    def as_dict(self) -> dict[str, Any]:
        return {"healthy": self.healthy, "latency_ms": round(self.latency_ms, 3), "detail": self.detail}


class HealthCheck(ABC):
    """A named dependency probe backing the readiness endpoint."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def check(self) -> HealthStatus: ...

    async def timed_check(self) -> HealthStatus:
        """Run :meth:`check`, timing it; a raised exception means unhealthy."""
        start = time.monotonic()
        try:
            status = await self.check()
        except Exception as exc:  # noqa: BLE001
            _log.warning("health.check_failed", check=self.name, error=str(exc))
            status = HealthStatus(healthy=False, detail=str(exc))
        return dataclasses.replace(status, latency_ms=(time.monotonic() - start) * 1000)


__all__ = ["HealthCheck", "HealthStatus"]
