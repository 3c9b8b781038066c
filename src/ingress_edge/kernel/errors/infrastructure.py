"""Infrastructure errors – store I/O, serialization, key material."""

from __future__ import annotations

from typing import Any

from ingress_edge.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not an admission decision."""

    default_code = "infrastructure_error"


class StoreUnavailableError(InfrastructureError):
    """A call to the key-value store failed or the connection is down."""

    default_code = "store_unavailable"

    def __init__(
        self,
        instance: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Store '{instance}' is unavailable", **kwargs)
        self.instance = instance


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a stored document."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class InvalidPublicKeyError(InfrastructureError):
    """A project's configured public key cannot be used for sealing."""

    default_code = "invalid_public_key"


__all__ = [
    "InfrastructureError",
    "InvalidPublicKeyError",
    "SerializationError",
    "StoreUnavailableError",
]
