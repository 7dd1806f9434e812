# API Middleware
"""
Middleware components for API key authentication and request tracing.
"""

from src.api.middleware.auth import ApiKeyAuthMiddleware, unauthorized_response
from src.api.middleware.request_id import RequestIdMiddleware, get_request_id

__all__ = [
    "ApiKeyAuthMiddleware",
    "RequestIdMiddleware",
    "get_request_id",
    "unauthorized_response",
]
