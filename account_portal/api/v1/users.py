"""User profile management API endpoints."""

from fastapi import APIRouter, Request, status

from ...config import settings
from ...services import AccountService
from ..dependencies import read_payload
from ..limiter import limiter
from ..schemas import (
    MessageResponse,
    PasswordChangeRequest,
    ProfileErrorResponse,
    ProfileUpdateRequest,
)

router = APIRouter()


@router.post(
    "/password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
@limiter.limit(settings.password_rate_limit)
async def change_password(request: Request) -> MessageResponse:
    """
    Change the current user's password.

    Body: {currentPassword, newPassword, confirmPassword}

    Returns:
        Success message

    Raises:
        BusinessRuleError: 400 with the message of the first failing rule
        ServerFault: 500 if the body cannot be parsed
    """
    password_change = await read_payload(request, PasswordChangeRequest)
    return MessageResponse(message=AccountService.change_password(password_change))


@router.put(
    "/profile",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ProfileErrorResponse}, 500: {"model": MessageResponse}},
)
async def update_profile(request: Request) -> MessageResponse:
    """
    Update the current user's profile.

    Body: {username, fullName, email, phone, birthDate, bio}

    Raises:
        BusinessRuleError: 400 with a per-field error mapping
        ServerFault: 500 if the body cannot be parsed
    """
    profile_update = await read_payload(request, ProfileUpdateRequest)
    return MessageResponse(message=AccountService.update_profile(profile_update))
