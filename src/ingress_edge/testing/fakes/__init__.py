"""Testing fakes – in-memory doubles for kernel and application ports."""
from ingress_edge.kernel.time import FrozenClock
from ingress_edge.testing.fakes.clock import FakeClock
from ingress_edge.testing.fakes.metrics import FakeMetricsRegistry
from ingress_edge.testing.fakes.reporter import FakeErrorReporter
from ingress_edge.testing.fakes.store import InMemoryKeyValueStore

__all__ = [
    "FakeClock",
    "FakeErrorReporter",
    "FakeMetricsRegistry",
    "FrozenClock",
    "InMemoryKeyValueStore",
]
