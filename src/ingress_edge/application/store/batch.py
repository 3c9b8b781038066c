"""Application store – AtomicBatch.

A batch is an ordered list of write operations that the store commits as one
unit (Redis ``MULTI``/``EXEC``). Writes that gate each other (queue append and
counter increment) are always queued on the same batch instead of being issued
as independent calls.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Iterator


@dataclasses.dataclass(frozen=True)
class ListPush:
    """Prepend *value* to the list at *key* (LPUSH)."""
    key: str
    value: str


@dataclasses.dataclass(frozen=True)
class Publish:
    """Publish *message* on *channel*."""
    channel: str
    message: str


@dataclasses.dataclass(frozen=True)
class Increment:
    """Increment the integer at *key* by one (INCR)."""
    key: str


@dataclasses.dataclass(frozen=True)
class ExpireAt:
    """Set the absolute expiry of *key* (PEXPIREAT)."""
    key: str
    when: datetime


StoreOperation = ListPush | Publish | Increment | ExpireAt


class AtomicBatch:
    """Fluent builder for an all-or-nothing group of store writes.

    Usage::

        batch = (
            AtomicBatch()
            .list_push(data_key, message)
            .publish("newDataAvailable", data_key)
            .increment(count_key)
            .expire_at(count_key, next_midnight)
        )
        await store.execute(batch)
    """

    def __init__(self) -> None:
        self._operations: list[StoreOperation] = []

    def list_push(self, key: str, value: str) -> "AtomicBatch":
        self._operations.append(ListPush(key, value))
        return self

    def publish(self, channel: str, message: str) -> "AtomicBatch":
        self._operations.append(Publish(channel, message))
        return self

    def increment(self, key: str) -> "AtomicBatch":
        self._operations.append(Increment(key))
        return self

    def expire_at(self, key: str, when: datetime) -> "AtomicBatch":
        self._operations.append(ExpireAt(key, when))
        return self

    @property
    def operations(self) -> tuple[StoreOperation, ...]:
        return tuple(self._operations)

    def __iter__(self) -> Iterator[StoreOperation]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __repr__(self) -> str:
        return f"AtomicBatch({self._operations!r})"


__all__ = ["AtomicBatch", "ExpireAt", "Increment", "ListPush", "Publish", "StoreOperation"]
