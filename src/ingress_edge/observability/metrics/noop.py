"""Observability – NoopMetrics implementation."""
from __future__ import annotations

from ingress_edge.observability.metrics.ports import Counter, Gauge, Histogram, Metrics


class _Discard(Counter, Histogram, Gauge):
    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        pass

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        pass

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        pass


_DISCARD = _Discard()


class NoopMetrics(Metrics):
    """Hands out one shared instrument that drops every measurement."""

    def counter(self, name: str, description: str = "", unit: str = "") -> Counter:
        return _DISCARD

    def histogram(self, name: str, description: str = "", unit: str = "") -> Histogram:
        return _DISCARD

    def gauge(self, name: str, description: str = "", unit: str = "") -> Gauge:
        return _DISCARD


__all__ = ["NoopMetrics"]
