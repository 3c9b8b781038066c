"""Admission errors – the reasons a request is dropped before reaching the queue."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from ingress_edge.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from ingress_edge.kernel.ingress.models import OverLimitStats


class AdmissionError(BaseError):
    """A gate of the admission pipeline refused the request."""

    default_code = "admission_rejected"
    reason: str = "rejected"

    def __init__(self, message: str, *, project_id: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.project_id = project_id
        self.detail.setdefault("project_id", project_id)


class PayloadRejectedError(AdmissionError):
    """The payload failed the shape check."""

    default_code = "payload_rejected"


class PayloadMissingError(PayloadRejectedError):
    default_code = "payload_missing"
    reason = "payload_missing"

    def __init__(self, project_id: str, **kwargs: Any) -> None:
        super().__init__("Missing payload", project_id=project_id, **kwargs)


class PayloadMalformedError(PayloadRejectedError):
    default_code = "payload_malformed"
    reason = "payload_malformed"

    def __init__(self, project_id: str, **kwargs: Any) -> None:
        super().__init__("Invalid payload format", project_id=project_id, **kwargs)


class ConfigNotFoundError(AdmissionError):
    """No usable configuration exists for the project."""

    default_code = "config_not_found"
    reason = "config_not_found"

    def __init__(self, project_id: str, **kwargs: Any) -> None:
        super().__init__("Project configuration not found", project_id=project_id, **kwargs)


class OriginRejection(str, Enum):
    INVALID = "invalid"
    LOCALHOST_IGNORED = "localhost_ignored"


class OriginRejectedError(AdmissionError):
    """The request ``Origin`` is not in the project's allow-list."""

    default_code = "origin_rejected"

    def __init__(
        self,
        project_id: str,
        origin: str,
        rejection: OriginRejection,
        **kwargs: Any,
    ) -> None:
        message = (
            "Ignoring localhost origin"
            if rejection is OriginRejection.LOCALHOST_IGNORED
            else "Invalid origin"
        )
        super().__init__(message, project_id=project_id, **kwargs)
        self.origin = origin
        self.rejection = rejection
        self.detail["origin"] = origin

    @property
    def reason(self) -> str:  # type: ignore[override]
        return f"origin_{self.rejection.value}"


class QuotaExceededError(AdmissionError):
    """The project is over its daily limit; ``stats`` go to the over-limit channel."""

    default_code = "quota_exceeded"
    reason = "quota_exceeded"

    def __init__(self, stats: OverLimitStats, **kwargs: Any) -> None:
        super().__init__("Daily limit exceeded", project_id=stats.project_id, **kwargs)
        self.stats = stats
        self.detail["usage"] = stats.usage
        self.detail["over_usage"] = stats.over_usage


__all__ = [
    "AdmissionError",
    "ConfigNotFoundError",
    "OriginRejectedError",
    "OriginRejection",
    "PayloadMalformedError",
    "PayloadMissingError",
    "PayloadRejectedError",
    "QuotaExceededError",
]
