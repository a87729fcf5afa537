"""Login form."""

from ..api.schemas import LoginRequest
from ..client import ApiResult
from ..validation import FieldErrors, validate_login
from .base import BaseForm


class LoginForm(BaseForm):
    """Email and password form posting to the login endpoint."""

    name = "login"
    fields = ("email", "password")
    schema = LoginRequest
    loading_message = "Logging in..."

    def validate(self, payload: LoginRequest) -> FieldErrors:
        return validate_login(payload)

    async def send(self, payload: LoginRequest) -> ApiResult:
        return await self.client.login(payload)
