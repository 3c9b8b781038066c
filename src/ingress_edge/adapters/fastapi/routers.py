"""FastAPI adapter – liveness and readiness router."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ingress_edge.adapters.fastapi.deps import IngressContextDep


def FastAPIHealthRouter(path: str = "/health", tags: list[str] | None = None) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Parameters
    ----------
    path:
        Base path prefix.  Liveness is at ``{path}/live``, readiness at
        ``{path}/ready``.
    tags:
        OpenAPI tags for the generated routes.

    Readiness runs every :class:`HealthCheck` held by the request's
    ``IngressContext`` and answers 503 when any of them is unhealthy.
    """
    router = APIRouter(tags=tags or ["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        """Liveness probe – always 200 OK when the process is up."""
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness(context: IngressContextDep) -> Any:
        """Readiness probe – pings every backing store."""
        results: dict[str, dict[str, Any]] = {}
        all_ok = True
        for check in context.health_checks:
            status = await check.timed_check()
            results[check.name] = status.as_dict()
            if not status.healthy:
                all_ok = False

        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["FastAPIHealthRouter"]
