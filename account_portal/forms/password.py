"""Password change form."""

from ..api.schemas import PasswordChangeRequest
from ..client import ApiResult
from ..validation import FieldErrors, validate_password_change
from .base import BaseForm


class PasswordForm(BaseForm):
    """Current/new/confirm password form.

    Validation stops at the first failing rule, so at most one field error is
    shown at a time.
    """

    name = "password"
    fields = ("currentPassword", "newPassword", "confirmPassword")
    schema = PasswordChangeRequest
    loading_message = "Updating password..."

    def validate(self, payload: PasswordChangeRequest) -> FieldErrors:
        return validate_password_change(payload)

    async def send(self, payload: PasswordChangeRequest) -> ApiResult:
        return await self.client.change_password(payload)
