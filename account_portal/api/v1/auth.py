"""Authentication API endpoints."""

from fastapi import APIRouter, Request, status

from ...config import settings
from ...services import AccountService
from ..dependencies import read_payload
from ..limiter import limiter
from ..schemas import LoginRequest, MessageResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
@limiter.limit(settings.login_rate_limit)
async def login(request: Request) -> MessageResponse:
    """
    Check login credentials against the mock credential.

    Body: {email, password}

    Returns:
        Success message

    Raises:
        BusinessRuleError: 400 if a field is invalid or the credentials do not match
        ServerFault: 500 if the body cannot be parsed
    """
    credentials = await read_payload(request, LoginRequest)
    return MessageResponse(message=AccountService.login(credentials))
