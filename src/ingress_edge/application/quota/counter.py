"""Application quota – QuotaCounter.

The daily counter lives at ``<project>.count`` and expires at the next UTC
midnight, so it resets without a sweeper. Reading and incrementing are
deliberately split: :meth:`QuotaCounter.check_and_reserve` only reads and
estimates, while :meth:`QuotaCounter.reserve` queues the increment on the
same atomic batch as the write it gates. Concurrent requests may therefore
overshoot the limit by up to ``concurrency - 1`` events; no lock is taken.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime

from ingress_edge.application.store import AtomicBatch, KeyValueStore
from ingress_edge.kernel.errors import SerializationError
from ingress_edge.kernel.ingress import KeyTag, OverLimitStats, project_key
from ingress_edge.kernel.time import Clock, epoch_ms, next_midnight_utc


@dataclasses.dataclass(frozen=True)
class QuotaCheck:
    """Best-effort view of a project's usage if the current request counts."""

    project_id: str
    within_limit: bool
    usage: int
    daily_limit: int
    checked_at: datetime
    next_reset_at: datetime

    @property
    def over_usage(self) -> int:
        return max(0, self.usage - self.daily_limit)

    def over_limit_stats(self) -> OverLimitStats:
        now_ms = epoch_ms(self.checked_at)
        reset_ms = epoch_ms(self.next_reset_at)
        return OverLimitStats(
            project_id=self.project_id,
            usage=self.usage,
            over_usage=self.over_usage,
            current_time=now_ms,
            remaining_time=reset_ms - now_ms,
        )


class QuotaCounter:
    def __init__(self, store: KeyValueStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def next_reset_at(self) -> datetime:
        return next_midnight_utc(self._clock.now())

    async def usage(self, project_id: str) -> int:
        """Current value of the project's counter (0 when absent)."""
        count_key = project_key(project_id, KeyTag.COUNT)
        raw = await self._store.get(count_key)
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError as exc:
            raise SerializationError(
                f"Counter '{count_key}' holds a non-integer value", payload_type="UsageCounter", cause=exc
            ) from exc

    async def check_and_reserve(self, project_id: str, daily_limit: int) -> QuotaCheck:
        now = self._clock.now()
        usage = await self.usage(project_id) + 1
        return QuotaCheck(
            project_id=project_id,
            within_limit=usage <= daily_limit,
            usage=usage,
            daily_limit=daily_limit,
            checked_at=now,
            next_reset_at=next_midnight_utc(now),
        )

    @staticmethod
    def reserve(batch: AtomicBatch, project_id: str, next_reset_at: datetime) -> AtomicBatch:
        """Queue the counter increment and its expiry refresh on *batch*.

        The expiry is rewritten on every call; within one UTC day it always
        lands on the same midnight, so repeats are harmless.
        """
        count_key = project_key(project_id, KeyTag.COUNT)
        return batch.increment(count_key).expire_at(count_key, next_reset_at)


__all__ = ["QuotaCheck", "QuotaCounter"]
