"""Application admission – synchronous gates.

The store-backed gates (config lookup and quota) live on
:class:`~ingress_edge.application.admission.pipeline.AdmissionPipeline`.
"""
from __future__ import annotations

import re

from ingress_edge.application.admission.request import IngestRequest
from ingress_edge.kernel.errors import (
    OriginRejectedError,
    OriginRejection,
    PayloadMalformedError,
    PayloadMissingError,
    PayloadRejectedError,
)
from ingress_edge.kernel.ingress import PAYLOAD_PREFIX, ProjectConfig
from ingress_edge.kernel.types import Err, Ok, Result

_LOCALHOST_ORIGIN = re.compile(r"^https?://(localhost|127\.0\.0\.1)")


def is_localhost_origin(origin: str) -> bool:
    return _LOCALHOST_ORIGIN.match(origin) is not None


def check_payload(request: IngestRequest) -> Result[str, PayloadRejectedError]:
    if not request.payload:
        return Err(PayloadMissingError(request.project_id))
    if not request.payload.startswith(PAYLOAD_PREFIX):
        return Err(PayloadMalformedError(request.project_id))
    return Ok(request.payload)


def check_origin(request: IngestRequest, config: ProjectConfig) -> Result[None, OriginRejectedError]:
    """Requests without an ``Origin`` header (same-origin, non-browser) pass."""
    origin = request.origin
    if not origin or origin in config.origins:
        return Ok(None)
    rejection = OriginRejection.LOCALHOST_IGNORED if is_localhost_origin(origin) else OriginRejection.INVALID
    return Err(OriginRejectedError(request.project_id, origin, rejection))


__all__ = ["check_origin", "check_payload", "is_localhost_origin"]
