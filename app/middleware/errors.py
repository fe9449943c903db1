"""Error handlers and middleware producing the JSON error envelope."""

from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import (
    HTTP_422_UNPROCESSABLE_ENTITY,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.core.exceptions import AppError
from app.core.logging import get_logger

logger = get_logger("app.middleware.errors")


def _correlation_id(request: Request) -> str | None:
    correlation_id = getattr(request.state, "correlation_id", None)
    return str(correlation_id) if correlation_id else None


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope, echoing the correlation id when known."""
    correlation_id = _correlation_id(request)
    content: dict[str, Any] = {
        "error": error,
        "message": message,
        "status_code": status_code,
        "correlation_id": correlation_id or "unknown",
    }
    if details is not None:
        content["details"] = details

    response = JSONResponse(status_code=status_code, content=content, headers=headers)
    if correlation_id:
        response.headers["X-Request-ID"] = correlation_id
    return response


def _log(request: Request, error: str, message: str, status_code: int) -> None:
    log = logger.warning if status_code < HTTP_500_INTERNAL_SERVER_ERROR else logger.error
    log(
        "request_error",
        error_type=error,
        error_message=message,
        status_code=status_code,
        path=request.url.path,
        method=request.method,
    )


async def app_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map domain errors to their declared status code."""
    assert isinstance(exc, AppError)
    error = exc.__class__.__name__
    _log(request, error, exc.message, exc.status_code)
    return error_response(request, exc.status_code, error, exc.message)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Wrap Starlette/FastAPI HTTP exceptions, including routing 404/405."""
    assert isinstance(exc, StarletteHTTPException)
    message = str(exc.detail)
    _log(request, "HTTPException", message, exc.status_code)
    return error_response(
        request,
        exc.status_code,
        "HTTPException",
        message,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report request validation failures with the offending fields."""
    assert isinstance(exc, RequestValidationError)
    errors = exc.errors()
    fields = [".".join(str(part) for part in error.get("loc", ())) for error in errors]
    message = "Invalid request: " + ", ".join(fields) if fields else "Invalid request"
    _log(request, "RequestValidationError", message, HTTP_422_UNPROCESSABLE_ENTITY)
    return error_response(
        request,
        HTTP_422_UNPROCESSABLE_ENTITY,
        "RequestValidationError",
        message,
        details=jsonable_encoder(
            [
                {"loc": error.get("loc"), "msg": error.get("msg"), "type": error.get("type")}
                for error in errors
            ]
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn exceptions no handler claimed into a 500 envelope."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_error",
                error_type=exc.__class__.__name__,
                error_message=str(exc),
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                path=request.url.path,
                method=request.method,
            )
            return error_response(
                request,
                HTTP_500_INTERNAL_SERVER_ERROR,
                "InternalServerError",
                "Internal server error",
            )
