"""
FastAPI dependencies for dependency injection.

Provides the presented API key to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.api.auth.header import get_api_key


def require_api_key(request: Request) -> str:
    """
    Return the API key presented with the request.

    Uses the key stored by ApiKeyAuthMiddleware when it has already run,
    otherwise extracts it from the headers. Extraction errors propagate and
    are rendered as 401 by the registered exception handlers.
    """
    api_key = getattr(request.state, "api_key", None)
    if api_key is not None:
        return api_key
    return get_api_key(request.headers)


ApiKey = Annotated[str, Depends(require_api_key)]
