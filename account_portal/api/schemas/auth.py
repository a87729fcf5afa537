"""Authentication-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Schema for every API response body."""

    message: str = Field(..., description="Human-readable outcome of the request")


class LoginRequest(BaseModel):
    """Schema for a login attempt."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {"email": "test@example.com", "password": "password123"},
        },
    )

    email: str | None = Field(None, description="User email address")
    password: str | None = Field(None, description="Password")
