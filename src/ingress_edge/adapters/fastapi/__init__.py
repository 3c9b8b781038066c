"""FastAPI adapter – ingest routes, health router and the application factory."""
from ingress_edge.adapters.fastapi.app import create_app
from ingress_edge.adapters.fastapi.deps import IngressContextDep, enforce_rate_limit, get_context
from ingress_edge.adapters.fastapi.routers import FastAPIHealthRouter
from ingress_edge.adapters.fastapi.routes import BING_PREVIEW_USER_AGENT, ingest_router

__all__ = [
    "BING_PREVIEW_USER_AGENT",
    "FastAPIHealthRouter",
    "IngressContextDep",
    "create_app",
    "enforce_rate_limit",
    "get_context",
    "ingest_router",
]
