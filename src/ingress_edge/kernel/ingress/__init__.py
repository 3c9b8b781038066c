"""Kernel ingress – project policy, incoming events, over-limit stats, key layout."""
from ingress_edge.kernel.ingress.keys import (
    PAYLOAD_PREFIX,
    Channel,
    KeyTag,
    project_key,
)
from ingress_edge.kernel.ingress.models import IncomingEvent, OverLimitStats, ProjectConfig

__all__ = [
    "PAYLOAD_PREFIX",
    "Channel",
    "IncomingEvent",
    "KeyTag",
    "OverLimitStats",
    "ProjectConfig",
    "project_key",
]
