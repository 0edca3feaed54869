"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..schemas.common import HealthResponse

router = APIRouter(tags=["Health"])

HEALTH_MESSAGE = "Intelligent Code Analysis API is running"


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Liveness probe.

    Always returns the same payload, whatever the state of the provider.
    """
    return HealthResponse(status="ok", message=HEALTH_MESSAGE)
