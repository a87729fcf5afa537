"""
Account service for the login, password change and profile endpoints.

Nothing here is persisted: credentials are checked against a mock value from
settings and successful updates are only logged.

- login(): shared login rules, then the mock credential check
- change_password(): shared password rules, then the mock credential check
- update_profile(): shared profile rules
"""

import secrets
from datetime import date

from ..api.schemas import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest
from ..config import settings
from ..config.logging import get_logger
from ..exceptions import BusinessRuleError
from ..validation import validate_login, validate_password_change, validate_profile
from ..validation.rules import CURRENT_PASSWORD_INCORRECT, INVALID_CREDENTIALS

logger = get_logger(__name__)


def _matches_mock_credential(candidate: str) -> bool:
    return secrets.compare_digest(
        candidate.encode("utf-8"), settings.mock_current_password.encode("utf-8")
    )


class AccountService:
    """Service for the stateless account operations."""

    LOGIN_SUCCEEDED = "Login successful"
    PASSWORD_UPDATED = "Password updated successfully"
    PROFILE_UPDATED = "Profile updated successfully"
    PROFILE_INVALID = "Invalid profile data"

    @staticmethod
    def login(data: LoginRequest) -> str:
        """
        Check a login attempt.

        Args:
            data: Login credentials

        Returns:
            Success message

        Raises:
            BusinessRuleError: if a field is invalid or the credentials do not match
        """
        errors = validate_login(data)
        if errors:
            logger.info("login_rejected", reason="validation", fields=sorted(errors))
            raise BusinessRuleError(next(iter(errors.values())), errors=errors)

        if not _matches_mock_credential(data.password):
            logger.info("login_rejected", reason="credentials")
            raise BusinessRuleError(INVALID_CREDENTIALS)

        logger.info("login_succeeded")
        return AccountService.LOGIN_SUCCEEDED

    @staticmethod
    def change_password(data: PasswordChangeRequest) -> str:
        """
        Change the current user's password.

        Rules are checked in a fixed order and the first failure wins: required
        fields, new/confirm equality, minimum length, then the current password.

        Args:
            data: Password change request

        Returns:
            Success message

        Raises:
            BusinessRuleError: with the message of the first failing rule
        """
        errors = validate_password_change(data)
        if errors:
            field, message = next(iter(errors.items()))
            logger.info("password_change_rejected", field=field, reason=message)
            raise BusinessRuleError(message)

        if not _matches_mock_credential(data.current_password):
            logger.info("password_change_rejected", field="currentPassword", reason="mismatch")
            raise BusinessRuleError(CURRENT_PASSWORD_INCORRECT)

        # No store to update
        logger.info("password_updated")
        return AccountService.PASSWORD_UPDATED

    @staticmethod
    def update_profile(data: ProfileUpdateRequest, today: date | None = None) -> str:
        """
        Update the current user's profile.

        Args:
            data: Profile fields
            today: Reference date for the birth date rule

        Returns:
            Success message

        Raises:
            BusinessRuleError: carrying one message per invalid field
        """
        errors = validate_profile(data, today=today)
        if errors:
            logger.info("profile_update_rejected", fields=sorted(errors))
            raise BusinessRuleError(AccountService.PROFILE_INVALID, errors=errors)

        logger.info("profile_updated", username=data.username)
        return AccountService.PROFILE_UPDATED
