"""Observability – metrics ports and the ingest instrument set."""
from ingress_edge.observability.metrics.ingress import IngressMetrics
from ingress_edge.observability.metrics.noop import NoopMetrics
from ingress_edge.observability.metrics.ports import Counter, Gauge, Histogram, Metrics

__all__ = ["Counter", "Gauge", "Histogram", "IngressMetrics", "Metrics", "NoopMetrics"]
