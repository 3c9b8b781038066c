"""Application admission – ordered validation gates and the admit/reject decision."""
from ingress_edge.application.admission.gates import check_origin, check_payload, is_localhost_origin
from ingress_edge.application.admission.pipeline import Admit, AdmissionPipeline, Decision, Reject
from ingress_edge.application.admission.request import IngestRequest, parse_perf

__all__ = [
    "Admit",
    "AdmissionPipeline",
    "Decision",
    "IngestRequest",
    "Reject",
    "check_origin",
    "check_payload",
    "is_localhost_origin",
    "parse_perf",
]
