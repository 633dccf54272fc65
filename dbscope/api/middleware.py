"""Middleware and terminal exception handling for the API."""

import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from dbscope.core.exceptions import UnhandledHandlerError
from dbscope.core.logging import logger

UNMATCHED_ROUTE = "unmatched"


def _route_label(request: Request) -> str:
    """Route template of the matched route, so label values stay bounded."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else UNMATCHED_ROUTE


async def http_metrics_middleware(request: Request, call_next) -> Response:
    """Record the duration of every request into the HTTP histogram.

    Observes exactly once per request.  When the downstream app raises,
    the request is recorded as a ``500`` and the exception propagates to
    the terminal handler.
    """
    http_metrics = request.app.state.http_metrics
    start = time.perf_counter()
    status_code = "500"
    try:
        response = await call_next(request)
        status_code = str(response.status_code)
        return response
    finally:
        http_metrics.observe_http_duration(
            request.method,
            _route_label(request),
            status_code,
            time.perf_counter() - start,
        )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn any exception that escaped a route into a generic 500."""
    error = UnhandledHandlerError(request.method, request.url.path)
    error.__cause__ = exc
    logger.with_context(method=request.method, path=request.url.path).error(
        str(error), exc_info=error
    )
    return JSONResponse(status_code=500, content={"error": "Something broke!"})
