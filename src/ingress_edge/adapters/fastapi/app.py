"""FastAPI adapter – application factory.

Run with::

    uvicorn --factory ingress_edge.adapters.fastapi:create_app
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ingress_edge import __version__
from ingress_edge.adapters.fastapi.routers import FastAPIHealthRouter
from ingress_edge.adapters.fastapi.routes import ingest_router
from ingress_edge.bootstrap import IngressContext, build_context
from ingress_edge.config import DotenvSettingsLoader, IngressSettings
from ingress_edge.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def create_app(
    context: IngressContext | None = None,
    settings: IngressSettings | None = None,
) -> FastAPI:
    """Build the ingress FastAPI app.

    When *context* is omitted it is built during startup from *settings*,
    or from the environment (and an optional ``.env`` file) when those are
    omitted too.  Redis connections owned by the context are closed on
    shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if context is None:
            resolved = settings or DotenvSettingsLoader().load(IngressSettings)
            JsonLoggerFactory.configure(resolved.log_level, service_name=resolved.service_name)
            app.state.ingress = build_context(resolved)
            _log.info("ingress.started", service=resolved.service_name, version=__version__)
        try:
            yield
        finally:
            await app.state.ingress.aclose()

    app = FastAPI(
        title="ingress-edge",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    if context is not None:
        app.state.ingress = context
    app.include_router(ingest_router)
    app.include_router(FastAPIHealthRouter())
    return app


__all__ = ["create_app"]
