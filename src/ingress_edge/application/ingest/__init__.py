"""Application ingest – top-level request handling."""
from ingress_edge.application.ingest.service import NOSCRIPT_XHR, IngestService, noscript_event

__all__ = ["NOSCRIPT_XHR", "IngestService", "noscript_event"]
