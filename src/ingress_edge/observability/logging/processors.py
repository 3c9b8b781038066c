"""Observability – service tagging processor and the get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class ServiceNameProcessor:
    """Stamp every event with the ``service`` it was emitted by.

    Several edge deployments usually ship into one log index; the service
    name (``SERVICE_NAME``) tells them apart.
    """

    def __init__(self, service_name: str) -> None:
        self._service_name = service_name

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        event_dict.setdefault("service", self._service_name)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger named *name*, with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["ServiceNameProcessor", "get_logger"]
