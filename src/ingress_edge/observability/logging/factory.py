"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from ingress_edge.observability.logging.filters import SensitiveFieldsFilter
from ingress_edge.observability.logging.processors import ServiceNameProcessor


class JsonLoggerFactory:
    """Route structlog and stdlib logging through one JSON-lines handler.

    Redaction runs first, before any other processor can copy a value
    elsewhere in the event. Foreign stdlib records (uvicorn, redis) go
    through the same renderer.
    """

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        *,
        service_name: str | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())

        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]
        if service_name:
            shared_processors.append(ServiceNameProcessor(service_name))

        structlog.configure(
            processors=[
                *shared_processors,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared_processors,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
