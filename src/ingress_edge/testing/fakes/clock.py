"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from ingress_edge.kernel.time import FrozenClock


def FakeClock(moment: datetime | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` pinned to *moment* (default 2026-01-01 12:00 UTC)."""
    return FrozenClock(moment or datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


__all__ = ["FakeClock"]
