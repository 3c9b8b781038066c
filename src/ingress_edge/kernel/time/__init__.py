"""Kernel time – Clock port, implementations and UTC-day helpers."""
from ingress_edge.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    epoch_ms,
    next_midnight_utc,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_ms", "next_midnight_utc"]
