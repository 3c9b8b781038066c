"""Observability – IngressMetrics.

Fixed instrument set of the ingestion edge. Every data point is tagged with
the project id; rejections are additionally tagged with their reason so that
development traffic (localhost origins) can be told apart from genuine
policy violations.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ingress_edge.observability.metrics.ports import Metrics

if TYPE_CHECKING:
    from ingress_edge.application.admission.request import IngestRequest
    from ingress_edge.kernel.ingress import IncomingEvent, OverLimitStats

_INSTRUMENTS: dict[str, str] = {
    "ingress.payload.missing": "Requests without a payload",
    "ingress.payload.invalid": "Payloads with an unknown envelope prefix",
    "ingress.config.invalid": "Requests for projects without usable config",
    "ingress.origin.invalid": "Requests from origins outside the allow-list",
    "ingress.origin.ignored": "Development requests from localhost",
    "ingress.overusage.count": "Requests over the daily limit",
}

_REASON_INSTRUMENTS: dict[str, str] = {
    "payload_missing": "ingress.payload.missing",
    "payload_malformed": "ingress.payload.invalid",
    "config_not_found": "ingress.config.invalid",
    "public_key_missing": "ingress.config.invalid",
    "origin_invalid": "ingress.origin.invalid",
    "origin_localhost_ignored": "ingress.origin.ignored",
    "quota_exceeded": "ingress.overusage.count",
}


class IngressMetrics:
    """Record the lifecycle of an ingest request on a :class:`Metrics` backend."""

    def __init__(self, metrics: Metrics) -> None:
        self._received = metrics.counter("ingress.received", "Requests received")
        self._dropped = metrics.counter("ingress.dropped", "Requests dropped for any reason")
        self._processed = metrics.counter("ingress.processed", "Events appended to the data queue")
        self._tracker_version = metrics.counter("ingress.tracker.version", "Requests per tracker version")
        self._tracker_xhr = metrics.counter("ingress.tracker.xhr", "Requests per transport type")
        self._tracker_dnt = metrics.counter("ingress.tracker.dnt", "Requests per Do-Not-Track flag")
        self._processed_country = metrics.counter("ingress.processed.country", "Processed events per country")
        self._processed_perf = metrics.histogram("ingress.processed.perf", "Tracker-reported timing", "ms")
        self._processed_size = metrics.histogram("ingress.processed.size", "Payload length", "By")
        self._overusage_usage = metrics.gauge("ingress.overusage.usage", "Usage when over the daily limit")
        self._overusage_remaining = metrics.gauge(
            "ingress.overusage.remaining", "Time until the daily counter resets", "ms"
        )
        instruments = {name: metrics.counter(name, description) for name, description in _INSTRUMENTS.items()}
        self._reasons = {reason: instruments[name] for reason, name in _REASON_INSTRUMENTS.items()}

    def record_received(self, request: IngestRequest) -> None:
        project = {"project_id": request.project_id}
        self._received.add(1.0, project)
        self._tracker_version.add(1.0, {**project, "version": request.tracker_version or "unknown"})
        self._tracker_xhr.add(1.0, {**project, "xhr": request.tracker_xhr or "unknown"})
        self._tracker_dnt.add(1.0, {**project, "dnt": "true" if request.dnt else "false"})

    def record_rejection(self, project_id: str, reason: str) -> None:
        counter = self._reasons.get(reason)
        if counter is not None:
            counter.add(1.0, {"project_id": project_id})
        self.record_dropped(project_id, reason)

    def record_dropped(self, project_id: str, reason: str) -> None:
        self._dropped.add(1.0, {"project_id": project_id, "reason": reason})

    def record_over_limit(self, stats: OverLimitStats) -> None:
        project = {"project_id": stats.project_id}
        self._overusage_usage.set(stats.usage, project)
        self._overusage_remaining.set(stats.remaining_time, project)

    def record_processed(self, event: IncomingEvent) -> None:
        project = {"project_id": event.project_id}
        self._processed.add(1.0, project)
        self._processed_perf.record(event.perf, project)
        self._processed_size.record(len(event.payload), project)
        if event.country:
            self._processed_country.add(1.0, {**project, "country": event.country})


__all__ = ["IngressMetrics"]
