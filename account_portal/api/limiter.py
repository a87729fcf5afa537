"""Rate limiting for the account endpoints."""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from ..config import settings
from ..config.logging import get_logger

logger = get_logger(__name__)

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

TOO_MANY_REQUESTS = "Too many requests. Please try again later"


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer a throttled request in the same {message} shape as every other response."""
    logger.warning("rate_limit_exceeded", path=request.url.path, limit=str(exc.detail))
    return JSONResponse(status_code=429, content={"message": TOO_MANY_REQUESTS})
