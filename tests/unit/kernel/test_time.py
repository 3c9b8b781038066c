"""Unit tests for kernel time helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from ingress_edge.kernel.time import FrozenClock, SystemClock, epoch_ms, next_midnight_utc


class TestFrozenClock:
    def test_returns_fixed_time(self) -> None:
        moment = datetime(2026, 3, 1, 8, 30, tzinfo=UTC)
        assert FrozenClock(moment).now() == moment

    def test_requires_aware_datetime(self) -> None:
        with pytest.raises(ValueError):
            FrozenClock(datetime(2026, 3, 1))

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2026, 3, 1, tzinfo=UTC))
        clock.advance(hours=25)
        assert clock.now() == datetime(2026, 3, 2, 1, tzinfo=UTC)


class TestSystemClock:
    def test_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC


class TestEpochMs:
    def test_epoch_is_zero(self) -> None:
        assert epoch_ms(datetime(1970, 1, 1, tzinfo=UTC)) == 0

    def test_millisecond_precision(self) -> None:
        moment = datetime(2026, 1, 1, 0, 0, 0, 123_999, tzinfo=UTC)
        assert epoch_ms(moment) == 1_767_225_600_123

    def test_other_timezone(self) -> None:
        local = datetime(2026, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert epoch_ms(local) == 1_767_225_600_000


class TestNextMidnightUtc:
    def test_midday(self) -> None:
        assert next_midnight_utc(datetime(2026, 1, 1, 12, tzinfo=UTC)) == datetime(2026, 1, 2, tzinfo=UTC)

    def test_exact_midnight_is_strictly_after(self) -> None:
        assert next_midnight_utc(datetime(2026, 1, 1, tzinfo=UTC)) == datetime(2026, 1, 2, tzinfo=UTC)

    def test_last_millisecond_of_day(self) -> None:
        moment = datetime(2026, 1, 1, 23, 59, 59, 999_000, tzinfo=UTC)
        assert next_midnight_utc(moment) == datetime(2026, 1, 2, tzinfo=UTC)

    def test_uses_utc_day_not_local_day(self) -> None:
        # 2026-01-02 01:00 at UTC+3 is still 2026-01-01 in UTC
        local = datetime(2026, 1, 2, 1, 0, tzinfo=timezone(timedelta(hours=3)))
        assert next_midnight_utc(local) == datetime(2026, 1, 2, tzinfo=UTC)

    def test_same_value_within_a_day(self) -> None:
        morning = next_midnight_utc(datetime(2026, 5, 5, 0, 0, 1, tzinfo=UTC))
        evening = next_midnight_utc(datetime(2026, 5, 5, 23, 0, tzinfo=UTC))
        assert morning == evening
