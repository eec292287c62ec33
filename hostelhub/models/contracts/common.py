"""
Common response models.
"""

from typing import Any, Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    message: str
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str = "healthy"
    version: str = "1.0.0"
    telemetry: Literal["ready", "disabled", "unavailable"] = "disabled"
