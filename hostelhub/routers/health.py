"""
Health Check Router

Provides health check endpoint for monitoring and load balancers.
"""

from fastapi import APIRouter

from hostelhub.core.cache import get_telemetry_store
from hostelhub.models.contracts.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Telemetry being down never makes the service unhealthy; it is reported
    so operators can see trending is off.
    """
    store = get_telemetry_store()
    if not store.is_configured:
        telemetry = "disabled"
    elif store.is_ready:
        telemetry = "ready"
    else:
        telemetry = "unavailable"

    return HealthResponse(status="healthy", version="1.0.0", telemetry=telemetry)
