"""Pydantic schemas for API requests and responses."""

from .auth import LoginRequest, MessageResponse
from .user import PasswordChangeRequest, ProfileErrorResponse, ProfileUpdateRequest

__all__ = [
    "LoginRequest",
    "MessageResponse",
    "PasswordChangeRequest",
    "ProfileUpdateRequest",
    "ProfileErrorResponse",
]
