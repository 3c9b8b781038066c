"""Testing – in-memory doubles for the edge's ports."""
from ingress_edge.testing.fakes import (
    FakeClock,
    FakeErrorReporter,
    FakeMetricsRegistry,
    InMemoryKeyValueStore,
)

__all__ = ["FakeClock", "FakeErrorReporter", "FakeMetricsRegistry", "InMemoryKeyValueStore"]
