"""
API key extraction from the Authorization header.

Expected format:

    Authorization: ApiKey <token>

The value is split on every single space and the token at index 1 is
returned unvalidated. Consecutive spaces therefore yield an empty key and
anything after the second token is ignored; existing callers rely on this.
"""

from collections.abc import Mapping

from src.api.auth.errors import MalformedAuthHeaderError, NoAuthHeaderIncludedError

# Scheme literal, compared case-sensitively
AUTH_SCHEME = "ApiKey"

AUTHORIZATION_HEADER = "Authorization"


def get_api_key(headers: Mapping[str, str]) -> str:
    """
    Extract the API key from request headers.

    Args:
        headers: Request headers. Header name matching is only
            case-insensitive if the mapping is (e.g. Starlette `Headers`).

    Returns:
        The raw key following the `ApiKey` scheme.

    Raises:
        NoAuthHeaderIncludedError: Header missing or empty.
        MalformedAuthHeaderError: Header present but not `ApiKey <token>`.
    """
    auth_header = headers.get(AUTHORIZATION_HEADER)
    if not auth_header:
        raise NoAuthHeaderIncludedError()

    split_auth = auth_header.split(" ")
    if len(split_auth) < 2 or split_auth[0] != AUTH_SCHEME:
        raise MalformedAuthHeaderError()

    return split_auth[1]
