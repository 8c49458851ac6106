"""Health check response models."""

from pydantic import BaseModel, ConfigDict


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "environment": "development",
                "message": "API is healthy",
                "user_count": 3,
            }
        }
    )

    status: str
    version: str
    environment: str | None = None
    message: str = "API is healthy"
    user_count: int = 0
