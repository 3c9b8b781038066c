"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── AdmissionError           (admission.py)
    │   ├── PayloadRejectedError
    │   │   ├── PayloadMissingError
    │   │   └── PayloadMalformedError
    │   ├── ConfigNotFoundError
    │   ├── OriginRejectedError
    │   └── QuotaExceededError
    └── InfrastructureError      (infrastructure.py)
        ├── StoreUnavailableError
        ├── SerializationError
        └── InvalidPublicKeyError

Every ``AdmissionError`` carries a fixed ``reason`` slug used to tag metrics.
"""

from ingress_edge.kernel.errors.admission import (
    AdmissionError,
    ConfigNotFoundError,
    OriginRejectedError,
    OriginRejection,
    PayloadMalformedError,
    PayloadMissingError,
    PayloadRejectedError,
    QuotaExceededError,
)
from ingress_edge.kernel.errors.base import BaseError
from ingress_edge.kernel.errors.infrastructure import (
    InfrastructureError,
    InvalidPublicKeyError,
    SerializationError,
    StoreUnavailableError,
)

__all__ = [
    "AdmissionError",
    "BaseError",
    "ConfigNotFoundError",
    "InfrastructureError",
    "InvalidPublicKeyError",
    "OriginRejectedError",
    "OriginRejection",
    "PayloadMalformedError",
    "PayloadMissingError",
    "PayloadRejectedError",
    "QuotaExceededError",
    "SerializationError",
    "StoreUnavailableError",
]
