"""
Request ID middleware for request tracing.

Every response carries X-Request-ID, and every log event emitted while the
request is handled is bound to the same ID.
"""

import uuid
from contextvars import ContextVar

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Context variable for request ID (per task)
request_id_context: ContextVar[str | None] = ContextVar("request_id", default=None)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return request_id_context.get()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique X-Request-ID to each request.

    A client-provided ID is preserved.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Assign or preserve the request ID and bind it for logging."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        token = request_id_context.set(request_id)
        request.state.request_id = request_id

        try:
            with structlog.contextvars.bound_contextvars(request_id=request_id):
                response = await call_next(request)
        finally:
            request_id_context.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
