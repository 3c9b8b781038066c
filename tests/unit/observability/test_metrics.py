"""Unit tests for the metrics port and the IngressMetrics facade."""
from __future__ import annotations

from ingress_edge.application.admission import IngestRequest
from ingress_edge.kernel.ingress import IncomingEvent, OverLimitStats
from ingress_edge.observability.metrics import IngressMetrics, NoopMetrics
from ingress_edge.testing.fakes import FakeMetricsRegistry


class TestNoopMetrics:
    def test_instruments_accept_calls(self) -> None:
        metrics = NoopMetrics()
        metrics.counter("c").add(1.0, {"a": "b"})
        metrics.histogram("h").record(2.0)
        metrics.gauge("g").set(3.0)

    def test_ingress_metrics_over_noop(self) -> None:
        IngressMetrics(NoopMetrics()).record_received(IngestRequest(project_id="p1"))


class TestIngressMetrics:
    def test_record_received_defaults_unknown(self) -> None:
        registry = FakeMetricsRegistry()
        IngressMetrics(registry).record_received(IngestRequest(project_id="p1"))
        registry.assert_counter_incremented("ingress.received", 1, project_id="p1")
        registry.assert_counter_incremented("ingress.tracker.version", 1, version="unknown")
        registry.assert_counter_incremented("ingress.tracker.xhr", 1, xhr="unknown")
        registry.assert_counter_incremented("ingress.tracker.dnt", 1, dnt="false")

    def test_rejection_reasons_map_to_instruments(self) -> None:
        registry = FakeMetricsRegistry()
        metrics = IngressMetrics(registry)
        for reason in (
            "payload_missing",
            "payload_malformed",
            "config_not_found",
            "public_key_missing",
            "origin_invalid",
            "origin_localhost_ignored",
            "quota_exceeded",
        ):
            metrics.record_rejection("p1", reason)
        registry.assert_counter_incremented("ingress.payload.missing", 1)
        registry.assert_counter_incremented("ingress.payload.invalid", 1)
        registry.assert_counter_incremented("ingress.config.invalid", 2)
        registry.assert_counter_incremented("ingress.origin.invalid", 1)
        registry.assert_counter_incremented("ingress.origin.ignored", 1)
        registry.assert_counter_incremented("ingress.overusage.count", 1)
        registry.assert_counter_incremented("ingress.dropped", 7, project_id="p1")

    def test_unknown_reason_only_counts_dropped(self) -> None:
        registry = FakeMetricsRegistry()
        IngressMetrics(registry).record_rejection("p1", "error")
        registry.assert_counter_incremented("ingress.dropped", 1, reason="error")

    def test_record_over_limit(self) -> None:
        registry = FakeMetricsRegistry()
        stats = OverLimitStats(project_id="p1", usage=12, over_usage=2, current_time=0, remaining_time=500)
        IngressMetrics(registry).record_over_limit(stats)
        assert registry.gauge_value("ingress.overusage.usage") == 12
        assert registry.gauge_value("ingress.overusage.remaining") == 500

    def test_record_processed_without_country(self) -> None:
        registry = FakeMetricsRegistry()
        event = IncomingEvent(project_id="p1", payload="v1.naclbox.abc", received_at=1, perf=-1)
        IngressMetrics(registry).record_processed(event)
        registry.assert_counter_incremented("ingress.processed", 1, project_id="p1")
        registry.assert_not_recorded("ingress.processed.country")
        assert registry.histogram_values("ingress.processed.perf") == [-1]
        assert registry.histogram_values("ingress.processed.size") == [len("v1.naclbox.abc")]
