"""Application store – KeyValueStore port and AtomicBatch."""
from ingress_edge.application.store.batch import (
    AtomicBatch,
    ExpireAt,
    Increment,
    ListPush,
    Publish,
    StoreOperation,
)
from ingress_edge.application.store.port import KeyValueStore

__all__ = [
    "AtomicBatch",
    "ExpireAt",
    "Increment",
    "KeyValueStore",
    "ListPush",
    "Publish",
    "StoreOperation",
]
