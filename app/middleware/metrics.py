"""Request metrics middleware for Prometheus monitoring."""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.routing import Match

from app.core.events import REQUEST_DURATION, REQUESTS_TOTAL, RESPONSES_TOTAL
from app.core.logging import get_logger

logger = get_logger("app.middleware.metrics")


def route_path(request: Request) -> str:
    """Templated path of the matched route, e.g. ``/api/news/{slug}``.

    Labelling by template keeps one series per endpoint instead of one per slug.
    """
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect request/response metrics.

    Records:
    - Total requests by method and route
    - Total responses by status code
    - Request duration histogram
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = route_path(request)
        REQUESTS_TOTAL.labels(method=request.method, path=path).inc()

        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        RESPONSES_TOTAL.labels(status_code=str(response.status_code)).inc()
        REQUEST_DURATION.labels(method=request.method).observe(duration)

        logger.info(
            "request_processed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=round(duration, 4),
        )
        return response
