"""Config settings – IngressSettings."""
from __future__ import annotations

import dataclasses
import logging

from ingress_edge.config.settings.base import Settings
from ingress_edge.config.validation import InvalidSettingValueError

_REDIS_SCHEMES = ("redis://", "rediss://", "unix://")


@dataclasses.dataclass
class IngressSettings(Settings):
    """Process settings, read from ``REDIS_URI_INGRESS``, ``LOG_LEVEL`` etc."""

    redis_uri_ingress: str
    redis_uri_rate_limit: str
    rate_limit_requests_per_minute: int = 200
    log_level: str = "INFO"
    service_name: str = "ingress-edge"

    def _validate(self) -> None:
        for name in ("redis_uri_ingress", "redis_uri_rate_limit"):
            value = getattr(self, name)
            if not value.startswith(_REDIS_SCHEMES):
                raise InvalidSettingValueError(self.env_key(name), value, "expected a redis:// URL")
        if self.rate_limit_requests_per_minute <= 0:
            raise InvalidSettingValueError(
                "RATE_LIMIT_REQUESTS_PER_MINUTE", self.rate_limit_requests_per_minute, "must be positive"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("LOG_LEVEL", self.log_level, "unknown log level")


__all__ = ["IngressSettings"]
