"""Application projects – read-only access to per-project policy."""
from ingress_edge.application.projects.oracle import ProjectConfigOracle

__all__ = ["ProjectConfigOracle"]
