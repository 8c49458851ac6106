"""Health check routes."""

from fastapi import APIRouter, Depends

from user_api.config import Settings, get_settings
from user_api.models.health import HealthCheckResponse
from user_api.services import get_user_directory
from user_common.services.user_directory import UserDirectory

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    directory: UserDirectory = Depends(get_user_directory),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and the current user count
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=directory.count(),
    )
