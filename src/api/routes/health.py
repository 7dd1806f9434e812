"""
Health check endpoint.
"""

from fastapi import APIRouter

from src.api.schemas import HealthResponse

router = APIRouter()

API_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Exempt from authentication so load balancers can probe it without a key.
    """
    return HealthResponse(status="healthy", version=API_VERSION)
