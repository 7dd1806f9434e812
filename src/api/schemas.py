"""
Pydantic schemas for API responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /api/v1/health."""

    status: str = Field(..., description="Overall service status")
    version: str = Field(..., description="API version")


class WhoAmIResponse(BaseModel):
    """Response for GET /api/v1/whoami."""

    scheme: str = Field(..., description="Authorization scheme the key was sent with")
    key_fingerprint: str = Field(
        ..., description="Truncated SHA-256 of the presented key; the key is never echoed"
    )


class ErrorDetail(BaseModel):
    """Error detail in the standard error envelope."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: dict[str, Any] | None = Field(default=None, description="Additional details")


class ErrorResponse(BaseModel):
    """Standard error response envelope."""

    error: ErrorDetail
