"""Application rate limiting – fixed-window ports and an in-process limiter."""
from ingress_edge.application.rate_limit.local import LocalFixedWindowRateLimiter
from ingress_edge.application.rate_limit.rate_limiter import (
    Quota,
    RateLimitDecision,
    RateLimitResult,
    RateLimiter,
    push_rate_limit_key,
)

__all__ = [
    "LocalFixedWindowRateLimiter",
    "Quota",
    "RateLimitDecision",
    "RateLimitResult",
    "RateLimiter",
    "push_rate_limit_key",
]
