"""Observability – ErrorReporter port."""
from __future__ import annotations

import abc


class ErrorReporter(abc.ABC):
    """Port: ship an absorbed error to an external error-tracking sink.

    Implementations must not raise and must not block the request: reporting
    is a side channel and never changes the response.

    ``tags`` carry identifiers only (project id, tracker version, store key);
    callers never put payload content in them.
    """

    @abc.abstractmethod
    def report(self, error: BaseException, tags: dict[str, str] | None = None) -> None: ...


__all__ = ["ErrorReporter"]
