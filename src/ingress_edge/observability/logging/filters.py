"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

from ingress_edge.kernel.ingress import PAYLOAD_PREFIX

# Event payloads are end-to-end encrypted user data and must never reach a log sink.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"payload", "body", "public_key", "publickey", "authorization", "cookie"}
)


class SensitiveFieldsFilter:
    """structlog processor that masks payload material in log events.

    A value is replaced with ``[REDACTED]`` when its key is a sensitive field
    name, or when it is a string that looks like a sealed payload, whatever
    key it was logged under. Nested dicts, lists and tuples are walked.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact(event_dict)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            key: self.REDACTED if key.lower() in self._fields else self._scrub(value)
            for key, value in data.items()
        }

    def _scrub(self, value: Any) -> Any:
        if isinstance(value, str) and value.startswith(PAYLOAD_PREFIX):
            return self.REDACTED
        if isinstance(value, dict):
            return self.redact(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._scrub(item) for item in value)
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
