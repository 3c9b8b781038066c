"""OpenTelemetry adapter – OtelErrorReporter."""
from __future__ import annotations

from opentelemetry import trace
from opentelemetry.trace import StatusCode

from ingress_edge.kernel.errors import BaseError
from ingress_edge.observability.reporting import ErrorReporter


class OtelErrorReporter(ErrorReporter):
    """Record absorbed errors on the active span, then forward to *fallback*.

    When no span is recording (no tracer provider configured) only the
    fallback reporter sees the error.
    """

    def __init__(self, fallback: ErrorReporter | None = None) -> None:
        self._fallback = fallback

    def report(self, error: BaseException, tags: dict[str, str] | None = None) -> None:
        span = trace.get_current_span()
        if span.is_recording():
            attributes = {f"ingress.{k}": v for k, v in (tags or {}).items()}
            if isinstance(error, BaseError):
                attributes["ingress.error_code"] = error.code
            span.record_exception(error, attributes=attributes)
            span.set_status(StatusCode.ERROR, type(error).__name__)
        if self._fallback is not None:
            self._fallback.report(error, tags)


__all__ = ["OtelErrorReporter"]
