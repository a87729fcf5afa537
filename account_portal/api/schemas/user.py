"""User profile and password Pydantic schemas.

Wire names are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from .auth import MessageResponse


class PasswordChangeRequest(BaseModel):
    """Schema for changing the current user's password."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "currentPassword": "currentpass",
                "newPassword": "newpass123",
                "confirmPassword": "newpass123",
            }
        },
    )

    current_password: str | None = Field(None, alias="currentPassword")
    new_password: str | None = Field(None, alias="newPassword")
    confirm_password: str | None = Field(None, alias="confirmPassword")


class ProfileUpdateRequest(BaseModel):
    """Schema for updating the current user's profile."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "username": "validuser",
                "fullName": "John Doe",
                "email": "john@example.com",
                "phone": "1234567890",
                "birthDate": "1990-01-01",
                "bio": "Short bio",
            }
        },
    )

    username: str | None = None
    full_name: str | None = Field(None, alias="fullName")
    email: str | None = None
    phone: str | None = None
    birth_date: str | None = Field(None, alias="birthDate", description="ISO date, YYYY-MM-DD")
    bio: str | None = None


class ProfileErrorResponse(MessageResponse):
    """Schema for a rejected profile update, with one message per invalid field."""

    errors: dict[str, str] = Field(default_factory=dict)
