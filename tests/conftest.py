"""Shared fixtures for the account portal tests."""

import os

# Settings are read once at import time; keep throttling out of functional tests
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from typing import Callable  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from account_portal.api.limiter import limiter  # noqa: E402
from account_portal.client import PortalClient  # noqa: E402
from account_portal.main import app  # noqa: E402

VALID_PASSWORD_CHANGE = {
    "currentPassword": "currentpass",
    "newPassword": "newpass123",
    "confirmPassword": "newpass123",
}

VALID_PROFILE = {
    "username": "validuser",
    "fullName": "John Doe",
    "email": "john@example.com",
    "phone": "1234567890",
    "birthDate": "1990-01-01",
    "bio": "This is a valid bio that is within the 160 character limit.",
}


@pytest.fixture
def client():
    """Test client for the whole application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_password_change() -> dict[str, str]:
    return dict(VALID_PASSWORD_CHANGE)


@pytest.fixture
def valid_profile() -> dict[str, str]:
    return dict(VALID_PROFILE)


@pytest.fixture
def mock_api() -> Callable[..., tuple[PortalClient, list[httpx.Request]]]:
    """
    Build a PortalClient whose requests are answered by a fake API.

    Returns a factory taking a status code and JSON body (or a custom handler)
    and returning the client plus the list of requests it sent.
    """

    def factory(
        status_code: int = 200,
        json: dict | None = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> tuple[PortalClient, list[httpx.Request]]:
        sent: list[httpx.Request] = []

        def respond(request: httpx.Request):
            sent.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, json=json if json is not None else {"message": "Success"})

        portal = PortalClient(base_url="http://portal.test", transport=httpx.MockTransport(respond))
        return portal, sent

    return factory


@pytest.fixture
def asgi_portal_client() -> PortalClient:
    """PortalClient wired to the real application in-process."""
    return PortalClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


@pytest.fixture
def rate_limiting():
    """Enable the limiter with clean counters for one test."""
    limiter.reset()
    limiter.enabled = True
    try:
        yield limiter
    finally:
        limiter.enabled = False
        limiter.reset()
