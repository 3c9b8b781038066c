"""Redis adapter – RedisKeyValueStore."""
from __future__ import annotations

from typing import Any

from redis.exceptions import RedisError

from ingress_edge.adapters.redis.connection import RedisConnection
from ingress_edge.application.store import (
    AtomicBatch,
    ExpireAt,
    Increment,
    KeyValueStore,
    ListPush,
    Publish,
    StoreOperation,
)
from ingress_edge.kernel.errors import StoreUnavailableError
from ingress_edge.kernel.time import epoch_ms


class RedisKeyValueStore(KeyValueStore):
    """KeyValueStore over a Redis connection; batches run as ``MULTI``/``EXEC``."""

    def __init__(self, connection: RedisConnection) -> None:
        self._connection = connection

    async def get(self, key: str) -> str | None:
        try:
            return await self._connection.client.get(key)
        except RedisError as exc:
            raise StoreUnavailableError(self._connection.name, f"GET {key} failed: {exc}", cause=exc) from exc

    async def execute(self, batch: AtomicBatch) -> list[Any]:
        client = self._connection.client
        try:
            async with client.pipeline(transaction=True) as pipe:
                for operation in batch:
                    await _queue(pipe, operation)
                return list(await pipe.execute())
        except RedisError as exc:
            raise StoreUnavailableError(
                self._connection.name, f"Atomic batch of {len(batch)} operations failed: {exc}", cause=exc
            ) from exc

    async def ping(self) -> bool:
        return await self._connection.ping()


async def _queue(pipe: Any, operation: StoreOperation) -> None:
    match operation:
        case ListPush(key=key, value=value):
            await pipe.lpush(key, value)
        case Publish(channel=channel, message=message):
            await pipe.publish(channel, message)
        case Increment(key=key):
            await pipe.incr(key)
        case ExpireAt(key=key, when=when):
            await pipe.pexpireat(key, epoch_ms(when))
        case _:
            raise TypeError(f"Unsupported store operation: {operation!r}")


__all__ = ["RedisKeyValueStore"]
