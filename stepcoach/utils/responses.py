"""Response construction shared by handlers and middleware."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import RequestResponseEndpoint

ALLOW_ORIGIN_HEADERS = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN_HEADERS,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def build_response(
    status_code: int,
    content: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Return a JSON response, or an empty one when ``content`` is None.

    The permissive origin header is always present; ``headers`` are
    merged on top of it.
    """
    merged = {**ALLOW_ORIGIN_HEADERS, **(headers or {})}
    if content is None:
        return Response(status_code=status_code, headers=merged)
    return JSONResponse(status_code=status_code, content=content, headers=merged)


async def cors_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """Answer preflight requests directly and tag every other response."""
    if request.method == "OPTIONS":
        return build_response(204, headers=PREFLIGHT_HEADERS)

    response = await call_next(request)
    for name, value in ALLOW_ORIGIN_HEADERS.items():
        response.headers.setdefault(name, value)
    return response
