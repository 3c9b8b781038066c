"""OpenTelemetry adapter – OtelMetrics."""
from __future__ import annotations

from typing import Any

from opentelemetry import metrics

from ingress_edge.observability.metrics import Counter, Gauge, Histogram, Metrics


class _OtelInstrument(Counter, Histogram, Gauge):
    """Wraps one OTel instrument; only the method matching its kind is ever called."""

    def __init__(self, instrument: Any) -> None:
        self._instrument = instrument

    def add(self, value: float = 1.0, labels: dict[str, str] | None = None) -> None:
        self._instrument.add(value, attributes=labels)

    def record(self, value: float, labels: dict[str, str] | None = None) -> None:
        self._instrument.record(value, attributes=labels)

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        self._instrument.set(value, attributes=labels)


class OtelMetrics(Metrics):
    """Instruments from the globally configured meter provider.

    Without an SDK installed the OTel API returns no-op instruments, so this
    adapter is safe to use unconditionally.
    """

    def __init__(self, meter_name: str = "ingress_edge") -> None:
        self._meter = metrics.get_meter(meter_name)

    def counter(self, name: str, description: str = "", unit: str = "") -> Counter:
        return _OtelInstrument(self._meter.create_counter(name, description=description, unit=unit))

    def histogram(self, name: str, description: str = "", unit: str = "") -> Histogram:
        return _OtelInstrument(self._meter.create_histogram(name, description=description, unit=unit))

    def gauge(self, name: str, description: str = "", unit: str = "") -> Gauge:
        return _OtelInstrument(self._meter.create_gauge(name, description=description, unit=unit))


__all__ = ["OtelMetrics"]
