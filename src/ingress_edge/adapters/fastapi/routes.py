"""FastAPI adapter – tracker ingest routes.

Every route answers ``204 No Content`` whatever the admission outcome; the
only other status is ``429`` from the rate limiter.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from ingress_edge.adapters.fastapi.deps import IngressContextDep, enforce_rate_limit
from ingress_edge.application.admission import IngestRequest

# Badly-behaved preview crawler that hits tracking URLs without a payload.
BING_PREVIEW_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/534+ (KHTML, like Gecko) BingPreview/1.0b"
)
NO_CACHE = "private, no-cache, proxy-revalidate"

ingest_router = APIRouter(tags=["ingest"], dependencies=[Depends(enforce_rate_limit)])


def _no_content(*, no_cache: bool = False) -> Response:
    headers = {"cache-control": NO_CACHE} if no_cache else None
    return Response(status_code=204, headers=headers)


def _build_request(
    project_id: str,
    request: Request,
    *,
    payload: str | None,
    perf: str | None,
    v: str | None,
    xhr: str | None,
) -> IngestRequest:
    headers = request.headers
    return IngestRequest.from_params(
        project_id,
        payload=payload,
        perf=perf,
        version=v,
        xhr=xhr,
        origin=headers.get("origin"),
        country=headers.get("cf-ipcountry"),
        dnt=headers.get("dnt"),
    )


async def _read_body(request: Request) -> str:
    return (await request.body()).decode("utf-8", errors="replace")


@ingest_router.get("/event/{project_id}", status_code=204, response_class=Response)
async def get_event(
    project_id: str,
    request: Request,
    context: IngressContextDep,
    payload: str | None = None,
    perf: str | None = None,
    v: str | None = None,
    xhr: str | None = None,
) -> Response:
    body = await _read_body(request)
    if request.headers.get("user-agent") == BING_PREVIEW_USER_AGENT and not payload and not body:
        return _no_content()
    ingest_request = _build_request(project_id, request, payload=payload or body, perf=perf, v=v, xhr=xhr)
    await context.service.ingest(ingest_request)
    return _no_content(no_cache=True)


@ingest_router.post("/event/{project_id}", status_code=204, response_class=Response)
async def post_event(
    project_id: str,
    request: Request,
    context: IngressContextDep,
    perf: str | None = None,
    v: str | None = None,
    xhr: str | None = None,
) -> Response:
    payload = await _read_body(request)
    ingest_request = _build_request(project_id, request, payload=payload, perf=perf, v=v, xhr=xhr)
    await context.service.ingest(ingest_request)
    return _no_content()


@ingest_router.get("/noscript/{project_id}", status_code=204, response_class=Response)
async def get_noscript(
    project_id: str,
    request: Request,
    context: IngressContextDep,
    perf: str | None = None,
    v: str | None = None,
) -> Response:
    """Count visits from browsers without JavaScript (``<noscript>`` image)."""
    ingest_request = _build_request(project_id, request, payload=None, perf=perf, v=v, xhr=None)
    await context.service.ingest_noscript(ingest_request)
    return _no_content(no_cache=True)


__all__ = ["BING_PREVIEW_USER_AGENT", "NO_CACHE", "ingest_router"]
