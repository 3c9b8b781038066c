"""FastAPI adapter – dependency functions."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from ingress_edge.application.rate_limit import push_rate_limit_key
from ingress_edge.bootstrap import IngressContext


def get_context(request: Request) -> IngressContext:
    return request.app.state.ingress


IngressContextDep = Annotated[IngressContext, Depends(get_context)]


async def enforce_rate_limit(project_id: str, request: Request, context: IngressContextDep) -> None:
    """Fixed-window limit per project and request-id prefix; 429 when exceeded."""
    client_host = request.client.host if request.client is not None else None
    identifier = push_rate_limit_key(project_id, request.headers.get("x-request-id"), client_host)
    result = await context.rate_limiter.check(context.rate_limit_quota, identifier)
    if not result.allowed:
        retry_after = str(int(result.retry_after_seconds) + 1)
        raise HTTPException(
            status_code=429,
            detail={
                "code": "rate_limit_exceeded",
                "message": f"Rate limit exceeded. Retry after {retry_after}s.",
            },
            headers={"Retry-After": retry_after},
        )


__all__ = ["IngressContextDep", "enforce_rate_limit", "get_context"]
