"""Validation rules shared by the forms and the API endpoints.

Each validator returns a field error mapping keyed by wire field name. An empty
mapping means the input is valid.

- validate_password_change(): ordered, stops at the first failing rule
- validate_login(): every rule is evaluated
- validate_profile(): every rule is evaluated
"""

import re
from datetime import date, datetime

from ..api.schemas import LoginRequest, PasswordChangeRequest, ProfileUpdateRequest
from ..config import settings

FieldErrors = dict[str, str]

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
BIRTH_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Password change
ALL_FIELDS_REQUIRED = "All fields are required"
NEW_PASSWORDS_DO_NOT_MATCH = "New passwords do not match"
CURRENT_PASSWORD_INCORRECT = "Current password is incorrect"

# Login
EMAIL_REQUIRED = "Email is required."
INVALID_CREDENTIALS = "Invalid credentials"

# Profile
FULL_NAME_REQUIRED = "Full name is required"
INVALID_EMAIL_FORMAT = "Must be a valid email format"
BIRTH_DATE_IN_FUTURE = "Birth date cannot be in the future"
BIRTH_DATE_INVALID = "Birth date must be a valid date"


def password_too_short_message() -> str:
    return f"Password must be at least {settings.password_min_length} characters"


def username_too_short_message() -> str:
    return f"Username must be at least {settings.username_min_length} characters"


def phone_digits_message() -> str:
    return f"Phone must be {settings.phone_min_digits}-{settings.phone_max_digits} digits"


def bio_too_long_message() -> str:
    return f"Bio must be {settings.bio_max_length} characters or less"


def parse_birth_date(value: str) -> date | None:
    """Parse a YYYY-MM-DD birth date, returning None when it is not one."""
    if not BIRTH_DATE_PATTERN.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def validate_password_change(data: PasswordChangeRequest) -> FieldErrors:
    """
    Validate a password change request.

    Rules run in order: required fields, new/confirm equality, minimum length.
    Only the first failure is reported. The mock credential check is not part of
    this rule set because the form side has no access to it.

    Args:
        data: Password change request

    Returns:
        Field error mapping with at most one entry
    """
    required = (
        ("currentPassword", data.current_password),
        ("newPassword", data.new_password),
        ("confirmPassword", data.confirm_password),
    )
    for field, value in required:
        if not value:
            return {field: ALL_FIELDS_REQUIRED}

    if data.new_password != data.confirm_password:
        return {"confirmPassword": NEW_PASSWORDS_DO_NOT_MATCH}

    if len(data.new_password) < settings.password_min_length:
        return {"newPassword": password_too_short_message()}

    return {}


def validate_login(data: LoginRequest) -> FieldErrors:
    """Validate a login attempt; both fields are always checked."""
    errors: FieldErrors = {}

    if not (data.email or "").strip():
        errors["email"] = EMAIL_REQUIRED

    if len(data.password or "") < settings.password_min_length:
        # Login messages end with a period
        errors["password"] = f"{password_too_short_message()}."

    return errors


def validate_profile(data: ProfileUpdateRequest, today: date | None = None) -> FieldErrors:
    """
    Validate a profile update.

    Every rule is evaluated so that all invalid fields are reported together.
    Birth date and bio are optional.

    Args:
        data: Profile update request
        today: Reference date for the birth date rule (defaults to date.today())

    Returns:
        Field error mapping, one entry per invalid field
    """
    errors: FieldErrors = {}
    today = today or date.today()

    if len(data.username or "") < settings.username_min_length:
        errors["username"] = username_too_short_message()

    if not (data.full_name or "").strip():
        errors["fullName"] = FULL_NAME_REQUIRED

    if not EMAIL_PATTERN.fullmatch(data.email or ""):
        errors["email"] = INVALID_EMAIL_FORMAT

    phone = data.phone or ""
    if not (
        DIGITS_PATTERN.fullmatch(phone)
        and settings.phone_min_digits <= len(phone) <= settings.phone_max_digits
    ):
        errors["phone"] = phone_digits_message()

    if data.birth_date:
        birth_date = parse_birth_date(data.birth_date)
        if birth_date is None:
            errors["birthDate"] = BIRTH_DATE_INVALID
        elif birth_date > today:
            errors["birthDate"] = BIRTH_DATE_IN_FUTURE

    if len(data.bio or "") > settings.bio_max_length:
        errors["bio"] = bio_too_long_message()

    return errors
