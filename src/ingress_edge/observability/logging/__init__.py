"""Observability – structured logging helpers (structlog)."""
from ingress_edge.observability.logging.factory import JsonLoggerFactory
from ingress_edge.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from ingress_edge.observability.logging.processors import ServiceNameProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "ServiceNameProcessor",
    "get_logger",
]
