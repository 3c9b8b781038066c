"""Process wiring – build the immutable IngressContext once at startup."""
from __future__ import annotations

import dataclasses

from ingress_edge.adapters.opentelemetry import OtelErrorReporter, OtelMetrics
from ingress_edge.adapters.redis import RedisConnection, RedisHealthCheck, RedisKeyValueStore, RedisRateLimiter
from ingress_edge.application.admission import AdmissionPipeline
from ingress_edge.application.emit import EventEmitter, OverLimitNotifier
from ingress_edge.application.ingest import IngestService
from ingress_edge.application.projects import ProjectConfigOracle
from ingress_edge.application.quota import QuotaCounter
from ingress_edge.application.rate_limit import Quota, RateLimiter
from ingress_edge.application.store import KeyValueStore
from ingress_edge.config import IngressSettings
from ingress_edge.kernel.time import Clock, SystemClock
from ingress_edge.observability.health import HealthCheck
from ingress_edge.observability.metrics import IngressMetrics, Metrics
from ingress_edge.observability.reporting import ErrorReporter, LoggingErrorReporter
from ingress_edge.security.sealing import NaclBoxSealer, PayloadSealer

RATE_LIMIT_KEY = "push"
RATE_LIMIT_WINDOW_SECONDS = 60


@dataclasses.dataclass(frozen=True)
class IngressContext:
    """Everything a request handler needs, shared read-only by all requests."""

    service: IngestService
    rate_limiter: RateLimiter
    rate_limit_quota: Quota
    health_checks: tuple[HealthCheck, ...] = ()
    connections: tuple[RedisConnection, ...] = ()

    async def aclose(self) -> None:
        for connection in self.connections:
            await connection.close()


def build_service(
    store: KeyValueStore,
    *,
    metrics: Metrics,
    reporter: ErrorReporter,
    clock: Clock | None = None,
    sealer: PayloadSealer | None = None,
) -> IngestService:
    clock = clock or SystemClock()
    oracle = ProjectConfigOracle(store, reporter)
    quota = QuotaCounter(store, clock)
    return IngestService(
        pipeline=AdmissionPipeline(oracle, quota, clock),
        oracle=oracle,
        emitter=EventEmitter(store, clock),
        notifier=OverLimitNotifier(store, clock),
        sealer=sealer or NaclBoxSealer(),
        metrics=IngressMetrics(metrics),
        reporter=reporter,
        clock=clock,
    )


def build_context(settings: IngressSettings) -> IngressContext:
    ingress = RedisConnection.from_url("ingress", settings.redis_uri_ingress)
    rate_limit = RedisConnection.from_url("rate_limit", settings.redis_uri_rate_limit)
    service = build_service(
        RedisKeyValueStore(ingress),
        metrics=OtelMetrics(settings.service_name),
        reporter=OtelErrorReporter(fallback=LoggingErrorReporter()),
    )
    return IngressContext(
        service=service,
        rate_limiter=RedisRateLimiter(rate_limit),
        rate_limit_quota=Quota(
            key=RATE_LIMIT_KEY,
            limit=settings.rate_limit_requests_per_minute,
            window_seconds=RATE_LIMIT_WINDOW_SECONDS,
        ),
        health_checks=(RedisHealthCheck(ingress), RedisHealthCheck(rate_limit)),
        connections=(ingress, rate_limit),
    )


__all__ = ["IngressContext", "build_context", "build_service"]
