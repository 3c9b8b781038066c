"""Application store – KeyValueStore port."""
from __future__ import annotations

import abc
from typing import Any

from ingress_edge.application.store.batch import AtomicBatch


class KeyValueStore(abc.ABC):
    """Port: the external key-value store shared by every edge process.

    Implementations raise :class:`~ingress_edge.kernel.errors.StoreUnavailableError`
    when the backend cannot be reached.
    """

    @abc.abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abc.abstractmethod
    async def execute(self, batch: AtomicBatch) -> list[Any]:
        """Commit every operation of *batch* atomically; return per-operation replies."""

    @abc.abstractmethod
    async def ping(self) -> bool: ...


__all__ = ["KeyValueStore"]
