"""Field validation rules used on both sides of every form submission."""

from .rules import (
    FieldErrors,
    validate_login,
    validate_password_change,
    validate_profile,
)

__all__ = [
    "FieldErrors",
    "validate_login",
    "validate_password_change",
    "validate_profile",
]
