"""Kernel – framework-agnostic errors, value types, clock and ingress models."""

from ingress_edge.kernel.errors import (
    AdmissionError,
    BaseError,
    ConfigNotFoundError,
    InfrastructureError,
    OriginRejectedError,
    PayloadMalformedError,
    PayloadMissingError,
    QuotaExceededError,
    StoreUnavailableError,
)

__all__ = [
    "AdmissionError",
    "BaseError",
    "ConfigNotFoundError",
    "InfrastructureError",
    "OriginRejectedError",
    "PayloadMalformedError",
    "PayloadMissingError",
    "QuotaExceededError",
    "StoreUnavailableError",
]
