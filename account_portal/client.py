"""HTTP client the forms use to reach the account API."""

from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import BaseModel

from .api.schemas import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest
from .config import settings
from .config.logging import get_logger
from .exceptions import GENERIC_TRANSPORT_ERROR, TransportError

logger = get_logger(__name__)


@dataclass
class ApiResult:
    """Outcome of one API call as the forms see it."""

    status_code: int
    message: str
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class PortalClient:
    """Async client for the login, password and profile endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API host (defaults to settings.client_base_url)
            timeout: Timeout in seconds (defaults to settings.client_timeout)
            transport: Optional transport, e.g. httpx.ASGITransport for in-process calls
        """
        self.async_client = httpx.AsyncClient(
            base_url=base_url or settings.client_base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout or settings.client_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "PortalClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.async_client.aclose()

    async def login(self, payload: LoginRequest) -> ApiResult:
        return await self.request("POST", "/login", payload)

    async def change_password(self, payload: PasswordChangeRequest) -> ApiResult:
        return await self.request("POST", "/password", payload)

    async def update_profile(self, payload: ProfileUpdateRequest) -> ApiResult:
        return await self.request("PUT", "/profile", payload)

    async def request(self, method: str, path: str, payload: BaseModel) -> ApiResult:
        """
        Send a JSON payload and normalize the response.

        Args:
            method: HTTP method
            path: Endpoint path below the API prefix
            payload: Request schema, serialized with its wire (camelCase) names

        Returns:
            ApiResult with the status code and the server's message

        Raises:
            TransportError: if no response was received
        """
        url = f"{settings.api_prefix}{path}"
        try:
            response = await self.async_client.request(
                method, url, json=payload.model_dump(by_alias=True)
            )
        except httpx.TimeoutException as e:
            logger.warning("api_request_timed_out", method=method, url=url)
            raise TransportError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("api_request_failed", method=method, url=url, error=str(e))
            raise TransportError(f"HTTP error: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        message = data.get("message")
        if not isinstance(message, str) or not message:
            message = response.reason_phrase or GENERIC_TRANSPORT_ERROR

        errors = data.get("errors")
        return ApiResult(
            status_code=response.status_code,
            message=message,
            errors=errors if isinstance(errors, dict) else {},
        )
