"""Kernel time – Clock protocol, implementations and UTC-day helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock requires a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def epoch_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, without float rounding."""
    delta = moment.astimezone(UTC) - datetime(1970, 1, 1, tzinfo=UTC)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def next_midnight_utc(moment: datetime) -> datetime:
    """Return the first UTC midnight strictly after *moment*.

    At exactly ``00:00:00.000`` the result is the following midnight, so a
    counter written at that instant still expires at the end of its own day.
    """
    day = moment.astimezone(UTC).date()
    return datetime(day.year, day.month, day.day, tzinfo=UTC) + timedelta(days=1)


__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_ms", "next_midnight_utc"]
