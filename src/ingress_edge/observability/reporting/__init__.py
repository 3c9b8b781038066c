"""Observability – error-reporting sink."""
from ingress_edge.observability.reporting.logging import LoggingErrorReporter
from ingress_edge.observability.reporting.ports import ErrorReporter

__all__ = ["ErrorReporter", "LoggingErrorReporter"]
