"""
Authentication middleware for the ApiKey Authorization scheme.

Extracts the API key with get_api_key and stores it on request.state for
downstream verification. Returns 401 when the header is missing or malformed.
The key itself is not checked against any store here.
"""

from collections.abc import Iterable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from src.api.auth.errors import AuthHeaderError
from src.api.auth.header import AUTH_SCHEME, get_api_key
from src.shared.config import DEFAULT_EXEMPT_PATHS

logger = structlog.get_logger(__name__)


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    """
    Middleware that requires an `Authorization: ApiKey <token>` header.

    Skips exempt paths (health check and documentation by default).
    """

    def __init__(self, app, exempt_paths: Iterable[str] | None = None) -> None:
        """
        Initialize auth middleware.

        Args:
            app: The ASGI application.
            exempt_paths: Paths served without a key. Defaults to
                DEFAULT_EXEMPT_PATHS.
        """
        super().__init__(app)
        self.exempt_paths = frozenset(
            exempt_paths if exempt_paths is not None else DEFAULT_EXEMPT_PATHS
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and extract the API key."""
        if self._is_exempt(request.url.path):
            return await call_next(request)

        try:
            api_key = get_api_key(request.headers)
        except AuthHeaderError as e:
            self._log_auth_failure(request, e)
            return unauthorized_response(e)

        request.state.api_key = api_key

        return await call_next(request)

    def _is_exempt(self, path: str) -> bool:
        """Check if the path is exempt from authentication."""
        if path in self.exempt_paths:
            return True

        # Sub-paths such as /docs/oauth2-redirect
        return any(path.startswith(exempt_path + "/") for exempt_path in self.exempt_paths)

    def _log_auth_failure(self, request: Request, error: AuthHeaderError) -> None:
        """Log a rejected request without the header value."""
        client_ip = request.client.host if request.client else "unknown"
        logger.warning(
            "API key authentication failed",
            reason=error.error_code,
            client_ip=client_ip,
            path=request.url.path,
            method=request.method,
        )


def unauthorized_response(
    error: AuthHeaderError, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Create a 401 Unauthorized response for an extraction error."""
    return JSONResponse(
        status_code=401,
        content={
            "error": {
                "code": error.error_code,
                "message": error.message,
            }
        },
        headers={"WWW-Authenticate": AUTH_SCHEME, **(headers or {})},
    )
