"""Correlation ID middleware for request tracking."""

import re
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from structlog.contextvars import bind_contextvars, clear_contextvars

CORRELATION_HEADER = "X-Request-ID"

# Client supplied ids are echoed into logs and headers, so keep them short
# and free of separators.
_VALID_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")


def resolve_correlation_id(header_value: str | None) -> str:
    """Reuse a well-formed incoming id, otherwise mint a new UUID."""
    if header_value and _VALID_ID.match(header_value):
        return header_value
    return str(uuid.uuid4())


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle request correlation IDs.

    The id is stored on ``request.state``, bound to the structlog context
    for the duration of the request and returned in ``X-Request-ID``.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        clear_contextvars()

        correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_HEADER))
        bind_contextvars(correlation_id=correlation_id)
        request.state.correlation_id = correlation_id

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
