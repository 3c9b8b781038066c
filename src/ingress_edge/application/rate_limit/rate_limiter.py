"""Application rate limiting – per-caller fixed windows in front of the ingest routes."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from enum import Enum


class RateLimitDecision(str, Enum):
    ALLOWED = "ALLOWED"
    DENIED = "DENIED"


@dataclasses.dataclass(frozen=True)
class Quota:
    """``limit`` requests per caller within ``window_seconds``, namespaced by ``key``."""
    key: str
    limit: int
    window_seconds: int

    @property
    def window_ms(self) -> int:
        return self.window_seconds * 1000

    def bucket(self, identifier: str) -> str:
        """Storage key of the window counting ``identifier``."""
        return f"{self.key}:{identifier}"


@dataclasses.dataclass
class RateLimitResult:
    decision: RateLimitDecision
    remaining: int
    reset_at: datetime
    quota: Quota

    @classmethod
    def counted(cls, quota: Quota, count: int, reset_at: datetime) -> RateLimitResult:
        """Outcome for the ``count``-th request seen in the current window."""
        return cls(
            decision=RateLimitDecision.ALLOWED if count <= quota.limit else RateLimitDecision.DENIED,
            remaining=max(0, quota.limit - count),
            reset_at=reset_at,
            quota=quota,
        )

    @property
    def allowed(self) -> bool:
        return self.decision == RateLimitDecision.ALLOWED

    @property
    def retry_after_seconds(self) -> float:
        return max(0.0, (self.reset_at - datetime.now(UTC)).total_seconds())


class RateLimiter(abc.ABC):
    """Port: count one request by ``identifier`` against ``quota``."""

    @abc.abstractmethod
    async def check(self, quota: Quota, identifier: str) -> RateLimitResult: ...


def push_rate_limit_key(project_id: str, request_id: str | None, client_host: str | None) -> str:
    """Identifier for the ingest routes.

    The project plus the first ``.``-separated segment of the request id, or
    the client host when the request carries no id.
    """
    identifier = request_id.split(".", 1)[0] if request_id else None
    return f"{project_id}:{identifier or client_host or 'unknown'}"


__all__ = ["Quota", "RateLimitDecision", "RateLimitResult", "RateLimiter", "push_rate_limit_key"]
