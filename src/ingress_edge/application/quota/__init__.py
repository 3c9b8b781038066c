"""Application quota – per-project daily usage counter."""
from ingress_edge.application.quota.counter import QuotaCheck, QuotaCounter

__all__ = ["QuotaCheck", "QuotaCounter"]
