"""User models for the Users API."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User entity model."""

    # Extra JSON attributes are stored as-is so they can be sorted on.
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "id": 1,
                "email": "jane.doe@example.com",
                "name": "Jane Doe",
                "phone": ["555-0100"],
            }
        },
    )

    id: int = Field(..., description="Caller supplied identifier for the user")
    email: str = Field(..., description="Email address of the user")
    name: str = Field(..., description="Full name of the user")
    phone: list[str] = Field(..., description="Phone numbers, unique across the directory")


class UserPatch(BaseModel):
    """Partial user update. Only fields present in the request body are applied."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Jane Smith"}},
    )

    id: int | None = None
    email: str | None = None
    name: str | None = None
    phone: list[str] | None = None

    def changes(self) -> dict:
        """Return the explicitly set fields, extras included."""
        return self.model_dump(exclude_unset=True)
