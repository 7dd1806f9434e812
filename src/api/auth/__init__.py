# API Authentication
"""
Authorization header parsing for API key authentication.

Only extraction lives here; verifying the key is left to the caller.
"""

from src.api.auth.errors import (
    AuthHeaderError,
    MalformedAuthHeaderError,
    NoAuthHeaderIncludedError,
)
from src.api.auth.header import AUTH_SCHEME, AUTHORIZATION_HEADER, get_api_key

__all__ = [
    "AUTH_SCHEME",
    "AUTHORIZATION_HEADER",
    "AuthHeaderError",
    "MalformedAuthHeaderError",
    "NoAuthHeaderIncludedError",
    "get_api_key",
]
