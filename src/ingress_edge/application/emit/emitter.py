"""Application emit – EventEmitter."""
from __future__ import annotations

from ingress_edge.application.admission import Admit
from ingress_edge.application.quota import QuotaCounter
from ingress_edge.application.store import AtomicBatch, KeyValueStore
from ingress_edge.kernel.ingress import Channel, KeyTag, project_key
from ingress_edge.kernel.time import Clock, next_midnight_utc


class EventEmitter:
    """Hand an admitted event to the downstream workers.

    One transaction appends the serialized event to the project's data list,
    publishes the list key on ``newDataAvailable`` (a wake-up signal only,
    workers re-read the list) and bumps the daily counter with its expiry.
    Consumers must not rely on FIFO order: the list is most-recent-first.
    The expiry is the midnight following the moment the batch is built, not
    the moment the request was admitted.
    """

    def __init__(self, store: KeyValueStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def build_batch(self, admit: Admit) -> AtomicBatch:
        data_key = project_key(admit.project_id, KeyTag.DATA)
        batch = (
            AtomicBatch()
            .list_push(data_key, admit.event.to_json())
            .publish(Channel.NEW_DATA_AVAILABLE.value, data_key)
        )
        return QuotaCounter.reserve(batch, admit.project_id, next_midnight_utc(self._clock.now()))

    async def emit(self, admit: Admit) -> None:
        await self._store.execute(self.build_batch(admit))


__all__ = ["EventEmitter"]
