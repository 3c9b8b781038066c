"""Kernel value types."""
from ingress_edge.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
