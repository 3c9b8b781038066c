"""OpenTelemetry adapter – metrics backend and span-based error reporter."""
from ingress_edge.adapters.opentelemetry.metrics import OtelMetrics
from ingress_edge.adapters.opentelemetry.reporter import OtelErrorReporter

__all__ = ["OtelErrorReporter", "OtelMetrics"]
