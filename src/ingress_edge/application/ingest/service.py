"""Application ingest – IngestService.

The single place where admission outcomes turn into side effects. Every
rejection and every failure is absorbed here and surfaces only as metrics,
structured logs and error reports, so the HTTP layer can answer ``204``
whatever happened: a third party must not be able to tell an accepted event
from a dropped one.
"""
from __future__ import annotations

import json
from typing import Any

from ingress_edge.application.admission import Admit, AdmissionPipeline, Decision, IngestRequest, Reject
from ingress_edge.application.emit import EventEmitter, OverLimitNotifier
from ingress_edge.application.projects import ProjectConfigOracle
from ingress_edge.kernel.errors import (
    BaseError,
    OriginRejectedError,
    PayloadMissingError,
    PayloadRejectedError,
    QuotaExceededError,
)
from ingress_edge.kernel.time import Clock, epoch_ms
from ingress_edge.observability.logging import get_logger
from ingress_edge.observability.metrics import IngressMetrics
from ingress_edge.observability.reporting import ErrorReporter
from ingress_edge.security.sealing import PayloadSealer

_log = get_logger(__name__)

NOSCRIPT_XHR = "noscript"


def noscript_event(time_ms: int) -> dict[str, Any]:
    """Browser event recorded for visitors without JavaScript."""
    return {"type": "session:noscript", "time": time_ms, "data": None}


class IngestService:
    def __init__(
        self,
        pipeline: AdmissionPipeline,
        oracle: ProjectConfigOracle,
        emitter: EventEmitter,
        notifier: OverLimitNotifier,
        sealer: PayloadSealer,
        metrics: IngressMetrics,
        reporter: ErrorReporter,
        clock: Clock,
    ) -> None:
        self._pipeline = pipeline
        self._oracle = oracle
        self._emitter = emitter
        self._notifier = notifier
        self._sealer = sealer
        self._metrics = metrics
        self._reporter = reporter
        self._clock = clock

    async def ingest(self, request: IngestRequest) -> Decision | None:
        """Evaluate and commit one tracker request. Never raises.

        Returns the decision, or ``None`` when the request was lost to an
        infrastructure failure.
        """
        self._metrics.record_received(request)
        try:
            decision = await self._pipeline.evaluate(request)
            if isinstance(decision, Admit):
                await self._emitter.emit(decision)
                self._metrics.record_processed(decision.event)
            else:
                await self._reject(request, decision)
            return decision
        except Exception as exc:  # noqa: BLE001
            self._absorb(request, exc)
            return None

    async def ingest_noscript(self, request: IngestRequest) -> Decision | None:
        """Synthesize, seal and ingest a ``session:noscript`` event.

        Visitors without JavaScript cannot encrypt client-side, so the event
        (which carries nothing but its type) is sealed here with the project's
        public key and then goes through the regular pipeline.
        """
        project_id = request.project_id
        try:
            config = await self._oracle.lookup(project_id)
            if config is None:
                self._metrics.record_rejection(project_id, "config_not_found")
                return None
            if not config.public_key:
                _log.warning("project_config.missing_public_key", project_id=project_id)
                self._metrics.record_rejection(project_id, "public_key_missing")
                return None
            event = noscript_event(epoch_ms(self._clock.now()))
            payload = self._sealer.seal(json.dumps(event), config.public_key)
        except Exception as exc:  # noqa: BLE001
            self._absorb(request, exc)
            return None
        return await self.ingest(request.with_payload(payload, xhr=NOSCRIPT_XHR))

    async def _reject(self, request: IngestRequest, decision: Reject) -> None:
        error = decision.error
        fields = {
            "project_id": request.project_id,
            "reason": error.reason,
            "tracker_version": request.tracker_version,
            "tracker_xhr": request.tracker_xhr,
        }

        if isinstance(error, QuotaExceededError):
            await self._notifier.notify_over_limit(error.stats)
            self._metrics.record_over_limit(error.stats)
            _log.info("event.over_limit", usage=error.stats.usage, over_usage=error.stats.over_usage, **fields)
        elif isinstance(error, OriginRejectedError):
            _log.warning("event.origin_rejected", origin=error.origin, **fields)
        elif isinstance(error, PayloadRejectedError):
            level = "warning" if isinstance(error, PayloadMissingError) else "error"
            getattr(_log, level)("event.payload_rejected", **fields)
            self._reporter.report(error, request.diagnostic_tags())

        self._metrics.record_rejection(request.project_id, error.reason)

    def _absorb(self, request: IngestRequest, exc: Exception) -> None:
        code = exc.code if isinstance(exc, BaseError) else type(exc).__name__
        _log.error(
            "event.dropped_on_error",
            project_id=request.project_id,
            error_code=code,
            exc_info=exc,
        )
        self._metrics.record_dropped(request.project_id, "error")
        self._reporter.report(exc, request.diagnostic_tags())


__all__ = ["NOSCRIPT_XHR", "IngestService", "noscript_event"]
