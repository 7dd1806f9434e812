"""
Endpoint reporting which API key the caller presented.
"""

import hashlib

from fastapi import APIRouter

from src.api.auth.header import AUTH_SCHEME
from src.api.dependencies import ApiKey
from src.api.schemas import ErrorResponse, WhoAmIResponse

router = APIRouter()


def fingerprint_key(api_key: str) -> str:
    """Hash an API key for display (privacy)."""
    return hashlib.sha256(api_key.encode()).hexdigest()[:12]


@router.get(
    "/whoami",
    response_model=WhoAmIResponse,
    responses={401: {"model": ErrorResponse}},
)
async def whoami(api_key: ApiKey) -> WhoAmIResponse:
    """
    Describe the presented credential without echoing it.

    The key is not verified; an empty key (e.g. `ApiKey ` with a trailing
    space) is reported like any other.
    """
    return WhoAmIResponse(scheme=AUTH_SCHEME, key_fingerprint=fingerprint_key(api_key))
