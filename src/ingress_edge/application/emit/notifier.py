"""Application emit – OverLimitNotifier."""
from __future__ import annotations

from ingress_edge.application.quota import QuotaCounter
from ingress_edge.application.store import AtomicBatch, KeyValueStore
from ingress_edge.kernel.ingress import Channel, OverLimitStats
from ingress_edge.kernel.time import Clock, next_midnight_utc


class OverLimitNotifier:
    """Publish over-limit stats and still count the request against the quota.

    The data list is never touched, so nothing of the payload leaves the edge
    once a project is over budget.
    """

    def __init__(self, store: KeyValueStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def build_batch(self, stats: OverLimitStats) -> AtomicBatch:
        batch = AtomicBatch().publish(Channel.OVER_LIMIT.value, stats.to_json())
        return QuotaCounter.reserve(batch, stats.project_id, next_midnight_utc(self._clock.now()))

    async def notify_over_limit(self, stats: OverLimitStats) -> None:
        await self._store.execute(self.build_batch(stats))


__all__ = ["OverLimitNotifier"]
