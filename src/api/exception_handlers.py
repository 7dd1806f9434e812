"""
Global exception handlers for consistent error responses.

All errors are returned in the envelope:

    {"error": {"code": "...", "message": "...", "details": {...}}}

Stack traces are never exposed in production.
"""

import traceback

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.auth.errors import AuthHeaderError
from src.api.middleware.auth import unauthorized_response
from src.api.middleware.request_id import get_request_id
from src.shared.config import is_production_mode

logger = structlog.get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.

    Args:
        app: The FastAPI application.
    """

    @app.exception_handler(AuthHeaderError)
    async def auth_header_exception_handler(
        request: Request, exc: AuthHeaderError
    ) -> JSONResponse:
        """Render Authorization header errors raised by route dependencies."""
        logger.warning(
            "API key authentication failed",
            reason=exc.error_code,
            path=request.url.path,
            method=request.method,
        )
        return unauthorized_response(exc, headers=_get_error_headers(request))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        field_errors = []
        for error in exc.errors():
            loc = ".".join(str(part) for part in error["loc"])
            field_errors.append(
                {
                    "field": loc,
                    "message": error["msg"],
                    "type": error["type"],
                }
            )

        logger.warning(
            "Request validation error",
            path=request.url.path,
            errors=field_errors,
        )

        return JSONResponse(
            status_code=422,
            content={
                "error": {
                    "code": "validation_error",
                    "message": "Request validation failed",
                    "details": {
                        "errors": field_errors,
                    },
                }
            },
            headers=_get_error_headers(request),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions (404, 405, etc.)."""
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            error_content = exc.detail
        else:
            error_content = {
                "error": {
                    "code": _status_to_code(exc.status_code),
                    "message": str(exc.detail) if exc.detail else _status_to_message(exc.status_code),
                }
            }

        if exc.status_code >= 500:
            logger.error(
                "HTTP error",
                status_code=exc.status_code,
                path=request.url.path,
                detail=exc.detail,
            )
        else:
            logger.warning(
                "HTTP error",
                status_code=exc.status_code,
                path=request.url.path,
            )

        headers = _get_error_headers(request)
        if exc.headers:
            headers.update(exc.headers)

        return JSONResponse(
            status_code=exc.status_code,
            content=error_content,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )

        error_content = {
            "error": {
                "code": "internal_error",
                "message": "An internal error occurred. Please try again later.",
            }
        }

        if not is_production_mode():
            error_content["error"]["details"] = {
                "exception_type": type(exc).__name__,
                "exception_message": str(exc),
                "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
            }

        return JSONResponse(
            status_code=500,
            content=error_content,
            headers=_get_error_headers(request),
        )


def _get_error_headers(request: Request) -> dict[str, str]:
    """Get headers to include in error responses."""
    headers = {}
    # request.state survives exception propagation; the context var may not
    request_id = getattr(request.state, "request_id", None) or get_request_id()
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers


def _status_to_code(status_code: int) -> str:
    """Convert HTTP status code to error code."""
    codes = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        422: "validation_error",
        500: "internal_error",
        503: "service_unavailable",
    }
    return codes.get(status_code, f"error_{status_code}")


def _status_to_message(status_code: int) -> str:
    """Convert HTTP status code to default message."""
    messages = {
        400: "Bad request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not found",
        405: "Method not allowed",
        422: "Unprocessable entity",
        500: "Internal server error",
        503: "Service unavailable",
    }
    return messages.get(status_code, f"Error {status_code}")
