"""API response models."""

from user_api.models.error import ErrorResponse
from user_api.models.health import HealthCheckResponse

__all__ = ["ErrorResponse", "HealthCheckResponse"]
