"""
ingress_edge – ingestion edge for an end-to-end encrypted analytics collector.

Import path convention::

    from ingress_edge.kernel.errors import AdmissionError
    from ingress_edge.application.admission import AdmissionPipeline
    from ingress_edge.adapters.fastapi import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
