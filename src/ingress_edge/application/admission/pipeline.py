"""Application admission – AdmissionPipeline, Admit, Reject.

Gates run strictly in order, cheapest first, and the first failure ends the
evaluation:

1. payload shape (no I/O)
2. project config lookup (one store read)
3. origin allow-list (no I/O)
4. daily quota (one store read, only for projects with a limit)

The pipeline never writes; the caller commits an :class:`Admit` through the
event emitter and a quota :class:`Reject` through the over-limit notifier.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime

from ingress_edge.application.admission.gates import check_origin, check_payload
from ingress_edge.application.admission.request import IngestRequest
from ingress_edge.application.projects import ProjectConfigOracle
from ingress_edge.application.quota import QuotaCounter
from ingress_edge.kernel.errors import AdmissionError, ConfigNotFoundError, QuotaExceededError
from ingress_edge.kernel.ingress import IncomingEvent, ProjectConfig
from ingress_edge.kernel.time import Clock, epoch_ms
from ingress_edge.kernel.types import Err, Ok, Result


@dataclasses.dataclass(frozen=True)
class Admit:
    event: IncomingEvent

    @property
    def project_id(self) -> str:
        return self.event.project_id

    @property
    def reason(self) -> str:
        return "admitted"


@dataclasses.dataclass(frozen=True)
class Reject:
    error: AdmissionError

    @property
    def project_id(self) -> str:
        return self.error.project_id

    @property
    def reason(self) -> str:
        return self.error.reason


Decision = Admit | Reject


class AdmissionPipeline:
    def __init__(self, oracle: ProjectConfigOracle, quota: QuotaCounter, clock: Clock) -> None:
        self._oracle = oracle
        self._quota = quota
        self._clock = clock

    async def evaluate(self, request: IngestRequest) -> Decision:
        payload = check_payload(request)
        if payload.is_err():
            return Reject(payload.error)

        config = await self._check_config(request.project_id)
        if config.is_err():
            return Reject(config.error)

        origin = check_origin(request, config.value)
        if origin.is_err():
            return Reject(origin.error)

        quota = await self._check_quota(request.project_id, config.value)
        if quota.is_err():
            return Reject(quota.error)

        now = quota.value
        event = IncomingEvent(
            project_id=request.project_id,
            payload=payload.value,
            perf=request.perf,
            received_at=epoch_ms(now),
            country=request.country,
        )
        return Admit(event=event)

    async def _check_config(self, project_id: str) -> Result[ProjectConfig, ConfigNotFoundError]:
        config = await self._oracle.lookup(project_id)
        if config is None:
            return Err(ConfigNotFoundError(project_id))
        return Ok(config)

    async def _check_quota(self, project_id: str, config: ProjectConfig) -> Result[datetime, QuotaExceededError]:
        """Return the admission time, or the over-limit stats as an error."""
        if not config.has_daily_limit:
            return Ok(self._clock.now())
        check = await self._quota.check_and_reserve(project_id, config.daily_limit)  # type: ignore[arg-type]
        if not check.within_limit:
            return Err(QuotaExceededError(check.over_limit_stats()))
        return Ok(check.checked_at)


__all__ = ["Admit", "AdmissionPipeline", "Decision", "Reject"]
