"""Observability – readiness checks."""
from ingress_edge.observability.health.check import HealthCheck, HealthStatus

__all__ = ["HealthCheck", "HealthStatus"]
