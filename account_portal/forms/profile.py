"""Profile edit form."""

from ..api.schemas import ProfileUpdateRequest
from ..client import ApiResult
from ..validation import FieldErrors, validate_profile
from .base import BaseForm


class ProfileForm(BaseForm):
    """Profile edit form.

    Every rule is evaluated, so all invalid fields are reported together.
    """

    name = "profile"
    fields = ("username", "fullName", "email", "phone", "birthDate", "bio")
    schema = ProfileUpdateRequest
    loading_message = "Updating profile..."

    def validate(self, payload: ProfileUpdateRequest) -> FieldErrors:
        return validate_profile(payload)

    async def send(self, payload: ProfileUpdateRequest) -> ApiResult:
        return await self.client.update_profile(payload)
