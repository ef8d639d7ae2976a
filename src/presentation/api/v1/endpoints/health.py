"""Health check endpoint."""

from fastapi import APIRouter, Depends

from presentation.schemas import HealthResponse
from infrastructure.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status and version information.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
    )
