"""Unit tests for OpenTelemetry adapters – meter and span are patched."""
from __future__ import annotations

from unittest.mock import MagicMock, patch

from ingress_edge.adapters.opentelemetry import OtelErrorReporter, OtelMetrics
from ingress_edge.kernel.errors import StoreUnavailableError
from ingress_edge.testing.fakes import FakeErrorReporter


class TestOtelMetrics:
    def test_instruments_forward_labels_as_attributes(self) -> None:
        meter = MagicMock()
        with patch("ingress_edge.adapters.opentelemetry.metrics.metrics.get_meter", return_value=meter) as get_meter:
            otel = OtelMetrics("ingress-edge")
        get_meter.assert_called_once_with("ingress-edge")

        otel.counter("ingress.received", "Requests received").add(1.0, {"project_id": "p1"})
        meter.create_counter.assert_called_once_with("ingress.received", description="Requests received", unit="")
        meter.create_counter.return_value.add.assert_called_once_with(1.0, attributes={"project_id": "p1"})

        otel.histogram("ingress.processed.perf", unit="ms").record(12, {"project_id": "p1"})
        meter.create_histogram.return_value.record.assert_called_once_with(12, attributes={"project_id": "p1"})

        otel.gauge("ingress.overusage.usage").set(3, {"project_id": "p1"})
        meter.create_gauge.return_value.set.assert_called_once_with(3, attributes={"project_id": "p1"})


class TestOtelErrorReporter:
    def test_records_exception_on_recording_span(self) -> None:
        span = MagicMock()
        span.is_recording.return_value = True
        fallback = FakeErrorReporter()
        error = StoreUnavailableError("ingress")
        with patch("ingress_edge.adapters.opentelemetry.reporter.trace.get_current_span", return_value=span):
            OtelErrorReporter(fallback).report(error, {"projectID": "p1"})

        span.record_exception.assert_called_once_with(
            error, attributes={"ingress.projectID": "p1", "ingress.error_code": "store_unavailable"}
        )
        span.set_status.assert_called_once()
        assert fallback.reports == [(error, {"projectID": "p1"})]

    def test_non_recording_span_only_forwards(self) -> None:
        span = MagicMock()
        span.is_recording.return_value = False
        fallback = FakeErrorReporter()
        with patch("ingress_edge.adapters.opentelemetry.reporter.trace.get_current_span", return_value=span):
            OtelErrorReporter(fallback).report(RuntimeError("x"))
        span.record_exception.assert_not_called()
        assert len(fallback.reports) == 1

    def test_without_fallback(self) -> None:
        span = MagicMock()
        span.is_recording.return_value = False
        with patch("ingress_edge.adapters.opentelemetry.reporter.trace.get_current_span", return_value=span):
            OtelErrorReporter().report(RuntimeError("x"))
