"""Error response model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    model_config = ConfigDict(json_schema_extra={"example": {"error": "User not found."}})

    error: str
    details: list[dict[str, Any]] | None = None
