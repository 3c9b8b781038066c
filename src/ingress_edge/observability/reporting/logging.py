"""Observability – LoggingErrorReporter."""
from __future__ import annotations

from typing import Any

from ingress_edge.kernel.errors import BaseError
from ingress_edge.observability.logging import get_logger
from ingress_edge.observability.reporting.ports import ErrorReporter


class LoggingErrorReporter(ErrorReporter):
    """Report errors as structured ``error.reported`` log entries."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger or get_logger("ingress_edge.errors")

    def report(self, error: BaseException, tags: dict[str, str] | None = None) -> None:
        fields: dict[str, Any] = {"error_type": type(error).__name__, "tags": dict(tags or {})}
        if isinstance(error, BaseError):
            fields["error_code"] = error.code
            fields["error_detail"] = error.detail
        self._log.error("error.reported", exc_info=error, **fields)


__all__ = ["LoggingErrorReporter"]
